import pytest

from kzkit.scene_table import CRASH_ENTRANCE, Scene, build_scenes


@pytest.mark.parametrize("crash_warp", [False, True])
def test_table_bounds(crash_warp):
    scenes = build_scenes(crash_warp)
    assert len(scenes) == 103
    assert scenes[0] == Scene(
        0,
        "mayor's residence",
        ("east clock town", "after couples mask")
        + ((CRASH_ENTRANCE,) if crash_warp else ()),
    )
    assert scenes[-1].scene_id == 218
    assert scenes[-1].name == "laundry pool"


@pytest.mark.parametrize("crash_warp", [False, True])
def test_ids_strictly_increasing_and_every_scene_has_entrances(crash_warp):
    scenes = build_scenes(crash_warp)
    ids = [scene.scene_id for scene in scenes]
    assert ids == sorted(set(ids))
    assert all(scene.entrances for scene in scenes)


def test_without_crash_warp_no_crash_entrances():
    for scene in build_scenes(False):
        assert CRASH_ENTRANCE not in scene.entrances


def test_crash_warp_only_adds_crash_entrances():
    plain = build_scenes(False)
    crash = build_scenes(True)
    assert [s.scene_id for s in plain] == [s.scene_id for s in crash]
    assert [s.name for s in plain] == [s.name for s in crash]
    for p, c in zip(plain, crash):
        filtered = tuple(e for e in c.entrances if e != CRASH_ENTRANCE)
        assert filtered == p.entrances
    assert sum(len(s.entrances) for s in crash) > sum(len(s.entrances) for s in plain)


def test_crash_entrances_keep_their_position():
    cutscene = build_scenes(True)[10]
    assert cutscene.name == "cutscene map"
    assert cutscene.entrances[:4] == (
        "unknown",
        CRASH_ENTRANCE,
        CRASH_ENTRANCE,
        "unknown",
    )
    assert cutscene.entrances[-1] == CRASH_ENTRANCE


def test_entrance_names_kept_verbatim():
    ikana = build_scenes(False)[11]
    assert ikana.name == "ikana canyon"
    assert ikana.entrances[-1] == "song of storms cave (house closed) "
    laundry = build_scenes(True)[-1]
    assert laundry.entrances == ("south clock town", "kafei's hideout", CRASH_ENTRANCE)


def test_entrances_with_commas_stay_whole():
    interior = build_scenes(False)[27]
    assert interior.name == "pirates fortress interior"
    assert "outside, underwater" in interior.entrances
    assert len(interior.entrances) == 12
    assert len(build_scenes(True)[27].entrances) == 16


def test_scenes_are_immutable():
    scene = build_scenes(False)[1]
    assert scene.entrances == ("moon",)
    with pytest.raises(AttributeError):
        scene.name = "other"


def test_crash_entrance_total():
    crash_count = sum(
        scene.entrances.count(CRASH_ENTRANCE) for scene in build_scenes(True)
    )
    assert crash_count == 19