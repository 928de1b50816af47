import sys

from people_report.config.settings import Settings
from people_report.logging.logger import Log
from people_report.processor.processor import build_context, build_processor
from people_report.records.exceptions import RecordStoreError
from people_report.reports.exceptions import ReportError


def main() -> int:
    """Entry point: load settings -> configure logging -> run the report pipeline."""
    settings = Settings()
    Log.configure(settings.log_level)

    processor = build_processor()
    try:
        processor.process(build_context(settings))
    except (RecordStoreError, ReportError):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
