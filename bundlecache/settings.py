# bundlecache/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, field

from bundlecache.defaults import DEFAULT_RENAMES
from bundlecache.names import RenameTable


@dataclass(frozen=True, slots=True)
class IndexSettings:
    """Lookup policy for a ResourceIndex."""

    renames: RenameTable = field(default=DEFAULT_RENAMES)
    # Upper bound on rename indirections, keeps cyclic tables terminating.
    max_rename_hops: int = 8
    # Length of the "_<digit>" suffix on multi-mesh export names.
    mesh_id_suffix_length: int = 2

    def __post_init__(self) -> None:
        if self.max_rename_hops < 0:
            raise ValueError(
                f"max_rename_hops must be >= 0, got {self.max_rename_hops}"
            )
        if self.mesh_id_suffix_length <= 0:
            raise ValueError(
                "mesh_id_suffix_length must be > 0, "
                f"got {self.mesh_id_suffix_length}"
            )

    @staticmethod
    def from_env(renames: RenameTable = DEFAULT_RENAMES) -> IndexSettings:
        return IndexSettings(
            renames=renames,
            max_rename_hops=int(os.getenv("BUNDLECACHE_MAX_RENAME_HOPS", "8")),
            mesh_id_suffix_length=int(
                os.getenv("BUNDLECACHE_MESH_ID_SUFFIX_LENGTH", "2")
            ),
        )
