# bundlecache/defaults/__init__.py
from bundlecache.names import RenameTable

# Exhaust effects renamed between bundle releases.
DEFAULT_RENAMES = RenameTable(
    {
        "vfx_exh_bell_j_01": "bell_j_1",
        "vfx_exh_bell_p2_1_0": "bell_p2_1",
        "vfx_exh_shock_p1_s1_0": "shock_1_pt1",
        "vfx_exh_shock_p2_s1_0": "shock_1_pt2",
        "vfx_exh_shock_p3_s1_0": "shock_1_pt3",
        "vfx_exh_shock_p4_s1_0": "shock_1_pt4",
    }
)

__all__ = [
    "DEFAULT_RENAMES",
]
