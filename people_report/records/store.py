from pathlib import Path

from people_report.logging.logger import Log
from people_report.records.exceptions import (
    ColumnsNotResolvedError,
    MalformedHeaderError,
    RecordLoadError,
    RecordStoreError,
    SourceFileNotFoundError,
)
from people_report.records.header import FIELD_DELIMITER, resolve_columns
from people_report.records.line_parser import create_person_from_line, split_line
from people_report.records.models import ColumnMap, Person

# utf-8-sig drops a leading byte order mark if the file has one.
SOURCE_ENCODING = "utf-8-sig"


class PersonStore:
    """Loads people from a comma-delimited file and keeps them in file order."""

    def __init__(self) -> None:
        self._people: list[Person] = []
        self._columns: ColumnMap | None = None

    @property
    def people(self) -> list[Person]:
        return list(self._people)

    @property
    def columns(self) -> ColumnMap | None:
        """Column positions from the most recent successful header parse."""
        return self._columns

    def load(self, path: Path) -> None:
        """Replace the store contents with the people read from ``path``.

        The store is left unchanged if loading fails.

        Raises:
            SourceFileNotFoundError: if ``path`` does not exist.
            MalformedHeaderError: if the file or its first line is empty.
            InvalidHeaderError: if the header fields are not the expected ones.
            FieldCountError: if a data line has the wrong number of fields.
            AddressFormatError: if an address is not three tokens long.
            RecordLoadError: if reading the file fails for any other reason.
        """
        path = Path(path)
        if not path.exists():
            raise SourceFileNotFoundError(
                f"Source file {path} doesn't exist, please ensure the file exists "
                "in the location and try again."
            )
        try:
            columns, people = self._read(path)
        except RecordStoreError:
            raise
        except Exception as exc:
            raise RecordLoadError(f"Failed to load people from {path}: {exc}") from exc

        self._columns = columns
        self._people = people
        Log.info(f"Loaded {len(people)} people from {path}")

    def create_person_from_line(self, line: str) -> Person:
        """Convert a data line using the columns resolved by the last load.

        Raises:
            FieldCountError: if the line does not split into exactly four fields.
            ColumnsNotResolvedError: if no header has been resolved yet.
        """
        if self._columns is None:
            split_line(line)
            raise ColumnsNotResolvedError(
                "No header has been resolved; load a source file first"
            )
        return create_person_from_line(line, self._columns)

    def _read(self, path: Path) -> tuple[ColumnMap, list[Person]]:
        with path.open("r", encoding=SOURCE_ENCODING) as source:
            lines = (line.rstrip("\r\n") for line in source)
            header = next(lines, "")
            if not header:
                raise MalformedHeaderError(
                    "First line does not contain field headers. Please verify the "
                    "first line contains the correct field headers and try again."
                )
            columns = resolve_columns(header.split(FIELD_DELIMITER))

            people: list[Person] = []
            for line in lines:
                if not line:
                    continue
                Log.debug(f"Parsing line: {line}")
                people.append(create_person_from_line(line, columns))
        return columns, people
