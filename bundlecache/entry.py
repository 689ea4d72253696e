# bundlecache/entry.py
from dataclasses import dataclass
from typing import Any

from bundlecache.types import TypeTag


@dataclass(frozen=True)
class ResourceEntry:
    """
    Value stored per normalized name.
    The owning index never hands the entry out for mutation.
    """

    tag: TypeTag
    payload: Any
    path: str  # origin inside the bundle, diagnostics only


@dataclass(frozen=True)
class LoadedResource:
    """What a provider yields for one bundle path."""

    tag: TypeTag
    payload: Any
    name: str  # intrinsic name, before normalization
