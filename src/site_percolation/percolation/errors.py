"""Errors raised by the percolation model."""


class PercolationError(Exception):
    """Base class for all percolation model errors."""


class InvalidSize(PercolationError, ValueError):
    """Grid size is not positive."""


class SizeOverflow(PercolationError, ValueError):
    """Grid size is too big for N*N sites to be indexed."""


class OutOfRange(PercolationError, IndexError):
    """Row or column outside 1..N."""


# Lookup by name, used by scenario files to declare expected errors
ERROR_KINDS = {
    'InvalidSize': InvalidSize,
    'SizeOverflow': SizeOverflow,
    'OutOfRange': OutOfRange,
}
