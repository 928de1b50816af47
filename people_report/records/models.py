from dataclasses import dataclass

from people_report.records.exceptions import AddressFormatError

ADDRESS_DELIMITER = " "


@dataclass(frozen=True)
class Address:
    """Street address split into house number, street name and street type."""

    house_number: str
    street_name: str
    street_type: str

    @classmethod
    def from_string(cls, raw: str) -> "Address":
        """Build an Address from a ``"102 Long Lane"`` style string.

        Tokens past the third are dropped, so ``"1 Long Lane North"`` becomes
        ``"1 Long Lane"``.

        Raises:
            AddressFormatError: if fewer than three tokens are present.
        """
        parts = raw.split(ADDRESS_DELIMITER)
        if len(parts) < 3:
            raise AddressFormatError(
                f"Address must have a house number, street name and street type: {raw!r}"
            )
        return cls(house_number=parts[0], street_name=parts[1], street_type=parts[2])

    def __str__(self) -> str:
        return ADDRESS_DELIMITER.join(
            (self.house_number, self.street_name, self.street_type)
        )


@dataclass(frozen=True)
class Person:
    """One record from the source file."""

    first_name: str
    last_name: str
    address: Address
    phone_number: str


@dataclass(frozen=True)
class NameFrequency:
    """How many times a name occurs across all first and last names."""

    name: str
    frequency: int

    def __str__(self) -> str:
        return f"{self.name}, {self.frequency}"


@dataclass(frozen=True)
class ColumnMap:
    """Positions of each required field within the header line."""

    first_name: int
    last_name: int
    address: int
    phone_number: int
