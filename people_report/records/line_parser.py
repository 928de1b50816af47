from people_report.records.exceptions import FieldCountError
from people_report.records.header import FIELD_COUNT, FIELD_DELIMITER
from people_report.records.models import Address, ColumnMap, Person


def split_line(line: str) -> list[str]:
    """Split a data line into its fields.

    Raises:
        FieldCountError: if the line does not split into exactly four fields.
    """
    values = line.split(FIELD_DELIMITER)
    if len(values) != FIELD_COUNT:
        raise FieldCountError(
            f"The following line in the file has incorrect number of fields: {line}"
        )
    return values


def create_person_from_line(line: str, columns: ColumnMap) -> Person:
    """Convert one data line into a Person using the resolved header columns.

    Raises:
        FieldCountError: if the line does not split into exactly four fields.
        AddressFormatError: if the address field has fewer than three tokens.
    """
    values = split_line(line)
    return Person(
        first_name=values[columns.first_name],
        last_name=values[columns.last_name],
        address=Address.from_string(values[columns.address]),
        phone_number=values[columns.phone_number],
    )
