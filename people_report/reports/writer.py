from collections.abc import Iterable
from pathlib import Path

from people_report.logging.logger import Log
from people_report.records.models import Person
from people_report.reports.exceptions import ReportWriteError
from people_report.reports.generator import name_frequencies, ordered_addresses

REPORT_ENCODING = "utf-8"


def write_report(items: Iterable[object], path: Path) -> None:
    """Write one line per item, replacing any existing file at ``path``.

    Raises:
        ReportWriteError: if the file cannot be written.
    """
    path = Path(path)
    count = 0
    try:
        with path.open("w", encoding=REPORT_ENCODING) as report:
            for item in items:
                report.write(f"{item}\n")
                count += 1
    except OSError as exc:
        raise ReportWriteError(f"Failed to write report {path}: {exc}") from exc
    Log.info(f"Wrote {count} lines to {path}")


def write_name_frequencies(people: Iterable[Person], path: Path) -> None:
    """Write the name frequency report as ``Name, Frequency`` lines."""
    write_report(name_frequencies(people), path)


def write_ordered_addresses(people: Iterable[Person], path: Path) -> None:
    """Write every address ordered by street name."""
    write_report(ordered_addresses(people), path)
