import pytest

from kzkit.scene_table import CRASH_ENTRANCE, build_scenes
from kzkit.scenes import GAME_VERSIONS, SceneCategory, build_categories, find_scene


def test_english_release_has_no_beta_category():
    names = [category.name for category in build_categories("NZSE")]
    assert names == [
        "clock town",
        "swamp",
        "snowhead",
        "great bay",
        "ikana",
        "overworld",
        "milk road",
        "moon",
        "other",
    ]


@pytest.mark.parametrize("version", ["NZSJ", "NZSJ10"])
def test_japanese_releases_add_beta_category(version):
    categories = build_categories(version)
    assert categories[-1] == SceneCategory("beta", (8,))
    assert categories[:-1] == build_categories("NZSE")


def test_japanese_categories_cover_every_scene_once():
    indices = [i for c in build_categories("NZSJ") for i in c.scene_indices]
    assert sorted(indices) == list(range(len(build_scenes())))


@pytest.mark.parametrize("version", GAME_VERSIONS)
def test_category_indices_are_in_table(version):
    count = len(build_scenes())
    for category in build_categories(version):
        assert all(0 <= i < count for i in category.scene_indices)


def test_unknown_version_rejected():
    with pytest.raises(ValueError):
        build_categories("NZSX")


def test_find_scene_by_id():
    assert find_scene(210).name == "east clock town"
    assert find_scene(16).entrances == ("unknown",)


def test_find_scene_crash_warp_adds_crash_entrance():
    assert find_scene(218, True).entrances[-1] == CRASH_ENTRANCE
    assert CRASH_ENTRANCE not in find_scene(218).entrances


def test_find_scene_unknown_id():
    with pytest.raises(KeyError):
        find_scene(1)