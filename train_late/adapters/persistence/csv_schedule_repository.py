from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from train_late.app.ports.output import IScheduleRepository
from train_late.domain.exceptions import MalformedRecord, SourceUnavailable
from train_late.domain.models import Route, ScheduleIndex, Trip

logger = logging.getLogger(__name__)

# routes.txt column 1 values that denote rail service; everything else is
# another transit mode.
RAIL_ROUTE_MODES = frozenset({"x0001", "X0000"})

_ROUTE_COLUMNS = 4  # id, mode, short name, long name
_TRIP_COLUMNS = 3  # route id, (unused), trip id


class _RecordLines:
    """Decodes input lines one at a time and keeps the raw text of the current
    record, so quoting can be checked after the csv module has parsed it.
    """

    def __init__(self, fp: BinaryIO) -> None:
        self._fp = fp
        self._pending: list[str] = []

    def __iter__(self) -> "_RecordLines":
        return self

    def __next__(self) -> str:
        # A bad byte is reported against its own row.
        line = next(self._fp).decode("utf-8")
        self._pending.append(line)
        return line

    def take(self) -> str:
        text = "".join(self._pending)
        self._pending.clear()
        return text


def _has_bare_quote(row: list[str], raw: str) -> bool:
    # A quote is only valid inside a quoted field, doubled.
    for value in row:
        if '"' in value and '"' + value.replace('"', '""') + '"' not in raw:
            return True
    return False


def _iter_rows(path: str | Path, min_columns: int) -> Iterator[list[str]]:
    """Yield the data rows of a CSV reference file.

    The header row is discarded even when it is malformed. Data rows must
    have the header's field count and at least `min_columns` fields.
    """

    try:
        fp = open(path, "rb")
    except OSError as exc:
        raise SourceUnavailable(str(path)) from exc

    with fp:
        lines = _RecordLines(fp)
        reader = csv.reader(lines, strict=True)

        expected_fields: int | None = None
        try:
            header = next(reader, None)
            while header == []:
                header = next(reader, None)
        except (csv.Error, UnicodeDecodeError):
            header = None
        lines.take()
        if header:
            expected_fields = len(header)

        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as exc:
                raise MalformedRecord(str(path), reader.line_num, str(exc)) from exc
            raw = lines.take()

            if not row:
                continue
            if expected_fields is not None and len(row) != expected_fields:
                raise MalformedRecord(
                    str(path),
                    reader.line_num,
                    f"expected {expected_fields} fields, got {len(row)}",
                )
            if len(row) < min_columns:
                raise MalformedRecord(
                    str(path),
                    reader.line_num,
                    f"expected at least {min_columns} fields, got {len(row)}",
                )
            if _has_bare_quote(row, raw):
                raise MalformedRecord(
                    str(path), reader.line_num, 'bare " in non-quoted field'
                )
            yield row


def read_routes(path: str | Path) -> tuple[Route, ...]:
    """Load rail routes from a GTFS routes file, in file order."""

    routes: list[Route] = []
    for row in _iter_rows(path, _ROUTE_COLUMNS):
        if row[1] not in RAIL_ROUTE_MODES:
            continue
        routes.append(Route(id=row[0], short_name=row[2], long_name=row[3]))
    return tuple(routes)


def read_trips(path: str | Path) -> tuple[Trip, ...]:
    """Load every trip from a GTFS trips file, in file order."""

    return tuple(
        Trip(route_id=row[0], id=row[2]) for row in _iter_rows(path, _TRIP_COLUMNS)
    )


@dataclass(slots=True)
class CsvScheduleRepository(IScheduleRepository):
    """Loads the rail schedule from GTFS routes.txt and trips.txt.

    Any read or parse error aborts loading; no partial index is returned.
    """

    routes_path: str | Path
    trips_path: str | Path

    def load_schedule(self) -> ScheduleIndex:
        routes = read_routes(self.routes_path)
        trips = read_trips(self.trips_path)
        logger.info(
            "Loaded schedule: %d rail routes, %d trips", len(routes), len(trips)
        )
        return ScheduleIndex(routes=routes, trips=trips)
