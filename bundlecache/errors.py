# bundlecache/errors.py
from enum import StrEnum


class LoadError(Exception):
    """A bundle could not be opened, read or decoded."""


class LookupFailure(StrEnum):
    """Kinds of failed lookups, attached to diagnostic log records."""

    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"
    MALFORMED_NAME = "malformed_name"
