class RecordStoreError(Exception):
    """Base exception for all record loading errors."""


class SourceFileNotFoundError(RecordStoreError, FileNotFoundError):
    """Raised when the source data file does not exist."""


class MalformedHeaderError(RecordStoreError):
    """Raised when the source file is empty or its first line is blank."""


class InvalidHeaderError(RecordStoreError):
    """Raised when the header does not declare exactly the expected fields."""


class FieldCountError(RecordStoreError):
    """Raised when a data line has the wrong number of fields."""


class AddressFormatError(RecordStoreError):
    """Raised when an address cannot be split into its three parts."""


class ColumnsNotResolvedError(RecordStoreError):
    """Raised when a line is parsed before any header has been resolved."""


class RecordLoadError(RecordStoreError):
    """Raised when reading the source file fails for any other reason."""
