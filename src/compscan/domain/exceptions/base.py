"""Base exceptions for compscan domain."""


class CompScanError(Exception):
    """Root exception for all compscan errors.

    All domain exceptions inherit from this.
    Allows catching all compscan-specific errors.
    """
