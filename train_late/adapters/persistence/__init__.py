from .csv_schedule_repository import CsvScheduleRepository, read_routes, read_trips

__all__ = [
    "CsvScheduleRepository",
    "read_routes",
    "read_trips",
]
