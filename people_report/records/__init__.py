from people_report.records.header import resolve_columns, validate_header
from people_report.records.line_parser import create_person_from_line
from people_report.records.models import Address, ColumnMap, NameFrequency, Person
from people_report.records.store import PersonStore

__all__ = [
    "Address",
    "ColumnMap",
    "NameFrequency",
    "Person",
    "PersonStore",
    "create_person_from_line",
    "resolve_columns",
    "validate_header",
]
