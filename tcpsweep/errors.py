class ScanError(ValueError):
    """Base class for errors that abort a scan before or during dispatch."""


class AddressParseError(ScanError):
    """An address in the target range is not a valid IPv4 literal."""


class RangeValidationError(ScanError):
    """Port or address bounds, thread count or timeout are out of range."""
