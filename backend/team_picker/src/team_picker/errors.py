from __future__ import annotations


class PartitionError(ValueError):
    """Raised for user input problems: bad group size, unknown mode, empty roster."""
