from people_report.reports.generator import name_frequencies, ordered_addresses
from people_report.reports.writer import (
    write_name_frequencies,
    write_ordered_addresses,
    write_report,
)

__all__ = [
    "name_frequencies",
    "ordered_addresses",
    "write_name_frequencies",
    "write_ordered_addresses",
    "write_report",
]
