"""Header validation and column resolution for the people source file."""

from collections.abc import Sequence

from people_report.records.exceptions import InvalidHeaderError
from people_report.records.models import ColumnMap

FIELD_DELIMITER = ","

FIRST_NAME_FIELD = "FirstName"
LAST_NAME_FIELD = "LastName"
ADDRESS_FIELD = "Address"
PHONE_NUMBER_FIELD = "PhoneNumber"

REQUIRED_FIELDS = (FIRST_NAME_FIELD, LAST_NAME_FIELD, ADDRESS_FIELD, PHONE_NUMBER_FIELD)
FIELD_COUNT = len(REQUIRED_FIELDS)


def validate_header(fields: Sequence[str]) -> bool:
    """Return True if the header holds exactly the required fields, in any order."""
    return len(fields) == FIELD_COUNT and set(fields) == set(REQUIRED_FIELDS)


def resolve_columns(fields: Sequence[str]) -> ColumnMap:
    """Validate the header and look up the position of every required field.

    Raises:
        InvalidHeaderError: if the field count is wrong or a field is missing.
    """
    if len(fields) != FIELD_COUNT:
        raise InvalidHeaderError(
            f"Unexpected field headers: expected {FIELD_COUNT} fields, got {len(fields)}"
        )
    missing = [name for name in REQUIRED_FIELDS if name not in fields]
    if missing:
        raise InvalidHeaderError(
            f"Unexpected field headers: missing {', '.join(missing)}"
        )
    fields = list(fields)
    return ColumnMap(
        first_name=fields.index(FIRST_NAME_FIELD),
        last_name=fields.index(LAST_NAME_FIELD),
        address=fields.index(ADDRESS_FIELD),
        phone_number=fields.index(PHONE_NUMBER_FIELD),
    )
