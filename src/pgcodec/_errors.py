"""pgcodec error types."""


class PGError(Exception):
    """Base error for all pgcodec failures."""


class InvalidSystemNameError(PGError):
    """Input is not a PG system name."""


class PGSystemError(PGError):
    """System descriptor field out of range."""


class UnknownSectorError(PGError):
    """Sector name does not decode, or a sector cell has no generated name."""


class AddressRangeError(PGError):
    """Descriptor does not fit the bit fields of an address layout."""
