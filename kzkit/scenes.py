"""Scene categories and lookup of scenes by id."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from kzkit.scene_table import Scene, build_scenes

__all__ = ["SceneCategory", "GAME_VERSIONS", "build_categories", "find_scene"]

GAME_VERSIONS = ("NZSE", "NZSJ", "NZSJ10")
"""Game releases the category table is built for."""

_BETA_VERSIONS = frozenset({"NZSJ", "NZSJ10"})

_CATEGORY_DATA: tuple[tuple[str, tuple[int, ...]], ...] = (
    (
        "clock town",
        (101, 100, 99, 98, 102, 22, 94, 7, 43, 38, 48, 0, 4, 13, 15, 24, 74, 87),
    ),
    ("swamp", (54, 28, 59, 6, 77, 2, 90, 31, 35, 52, 72, 60, 19, 23)),
    (
        "snowhead",
        (20, 70, 80, 36, 68, 83, 84, 97, 67, 62, 41, 51, 81, 82, 25, 58),
    ),
    ("great bay", (46, 39, 32, 50, 29, 12, 49, 27, 47, 64, 42, 66, 63, 85)),
    (
        "ikana",
        (73, 57, 5, 40, 11, 69, 86, 71, 75, 65, 21, 76, 78, 79, 14, 16, 45),
    ),
    ("overworld", (37, 33, 9, 30)),
    ("milk road", (26, 96, 44, 3, 55, 56)),
    ("moon", (93, 34, 53, 61, 92, 1)),
    ("other", (91, 18, 17, 89, 95, 88, 10)),
)

_BETA_CATEGORY = ("beta", (8,))


@dataclass(frozen=True)
class SceneCategory:
    """A named group of scenes, given as indices into the scene table."""

    name: str
    scene_indices: tuple[int, ...]


@lru_cache(maxsize=None)
def build_categories(game_version: str) -> tuple[SceneCategory, ...]:
    """Return the scene categories for ``game_version``.

    The Japanese releases add a ``beta`` category holding the test map.
    """
    if game_version not in GAME_VERSIONS:
        raise ValueError(
            f"unknown game version {game_version!r}; expected one of {GAME_VERSIONS}"
        )
    data = _CATEGORY_DATA
    if game_version in _BETA_VERSIONS:
        data = data + (_BETA_CATEGORY,)
    return tuple(SceneCategory(name, indices) for name, indices in data)


def find_scene(scene_id: int, crash_warp: bool = False) -> Scene:
    """Return the scene whose id is ``scene_id``; raise ``KeyError`` if none."""
    for scene in build_scenes(crash_warp):
        if scene.scene_id == scene_id:
            return scene
    raise KeyError(scene_id)