from __future__ import annotations


class TyposeeError(Exception):
    pass


class ResourceExhaustedError(TyposeeError, MemoryError):
    """
    A comparison could not be performed because memory ran out.

    Distinct from a non-match: callers must not read this as a distance.
    """


class TableAllocationError(ResourceExhaustedError):
    pass


class ScriptAllocationError(ResourceExhaustedError):
    pass


class SourceFormatError(TyposeeError, ValueError):
    pass
