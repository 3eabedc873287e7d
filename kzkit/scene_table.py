"""The table of game scenes and the named entrances into each of them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

__all__ = ["Scene", "build_scenes", "CRASH_ENTRANCE"]

CRASH_ENTRANCE = "unknown (crash)"
"""Name of entrances that crash the game; listed only when crash warps are enabled."""

_SEPARATOR = ";"
_CRASH_MARK = "!"

# Each entry holds a scene id, its name and its entrances joined by ";".
# A "!" stands for an entrance that crashes the game.
_SCENE_DATA: tuple[tuple[int, str, str], ...] = (
    (0, "mayor's residence", "east clock town;after couples mask;!"),
    (2, "majora's lair", "moon"),
    (4, "hags potion shop", "southern swamp"),
    (6, "romani ranch buildings", "barn from ranch;house from ranch;!"),
    (8, "honey & darling", "east clock town"),
    (10, "beneath graveyard", "day 2 start;day 1 start"),
    (12, "southern swamp (clear)",
     "swamp road;boat house;woodfall;lower deku palace;upper deku palace;"
     "hags potion shop;boat cruise;woods of mystery;swamp spider house;"
     "ikana canyon;owl statue"),
    (14, "curiosity shop",
     "west clock town;kafei's hideout;spying start;spying end"),
    (16, "test map", "unknown"),
    (20, "grottos",
     "ocean gossip stones;swamp gossip stones;canyon gossip stones;"
     "mountain gossip stones;generic grotto;hot spring;maze straight (a);"
     "dodongo;maze vines (lower);business scrub;cows;ocean heart piece;"
     "magic bean seller;peahat;maze straight (b);maze grotto (upper);"
     "lens of truth"),
    (28, "cutscene map",
     "unknown;!;!;unknown;unknown;unknown;unknown;unknown;unknown;!"),
    (32, "ikana canyon",
     "ikana road;ghost hut;music box house;stone tower;owl statue;"
     "beneath the well;sakon's hideout;after stone tower;ikana castle;"
     "after house opens;song of storms cave (house open);fairy fountain;"
     "secret shrine;from song of storms cave;"
     "song of storms cave (house closed) "),
    (34, "pirates fortress",
     "exterior pirates fortress;lower hookshot room;upper hookshot room;"
     "silver rupee room;silver rupee room exit;barrel room;barrel room exit;"
     "twin barrel room;twin barrel room exit;oob near twin barrel;telescope;"
     "oob hookshot room;balcony;upper hookshot room;!"),
    (36, "milk bar", "east clock town"),
    (38, "stone tower temple", "intro;no intro"),
    (40, "treasure chest shop", "east clock town;after game"),
    (42, "stone tower temple (inverted)", "main entrance;boss room entrance;!"),
    (44, "clock tower", "first encounter;after song of time;!"),
    (46, "before clock town",
     "falling from cliff;inside clock tower;transformed to deku;void respawn;"
     "song of time flashback"),
    (48, "woodfall temple",
     "main entrance;prison after odolwa;deku princess room"),
    (50, "path to mountain village", "termina field;mountain village"),
    (52, "ikana castle",
     "beneath the well;ikana canyon;exterior from interior;"
     "interior from exterior;powder keg hole;block hole;throne room"),
    (54, "deku playground", "north clock town;after game"),
    (56, "odolwa", "woodfall temple"),
    (58, "town shooting gallery",
     "east clock town (intro);east clock town (no intro)"),
    (60, "snowhead temple", "snowhead (intro);snowhead (no intro)"),
    (62, "milk road",
     "termina field;romani ranch;gorman track (track exit);"
     "gorman track (main exit);owl statue;unknown;unknown"),
    (64, "pirates fortress interior",
     "hookshot room;hookshot room upper;100 rupee room;100 rupee room (egg);"
     "barrel room;barrel room (egg);twin barrel room;twin barrel room (egg);"
     "telescope;outside, underwater;outside, telescope;unknown;!;!;!;!"),
    (66, "swamp shooting gallery", "road to southern swamp"),
    (68, "pinnacle rock", "great bay coast;void respawn"),
    (70, "fairy fountain",
     "clock town;woodfall;snowhead;zora cape;ikana canyon;after magic;"
     "after spin attack;after double magic;after double defense;"
     "after great fairy sword"),
    (72, "swamp spider house", "southern swamp"),
    (74, "oceanside spider house", "great bay coast"),
    (76, "observatory", "east clock town;termina field;after telescope"),
    (78, "deku trial", "moon"),
    (80, "deku palace",
     "southern swamp;thrown out;deku king chamber;deku king chamber (upper);"
     "deku shrine;southern swamp (shortcut);jp grotto left, first room;"
     "jp grotto left, second room;jp grotto right, second room;bean seller;"
     "jp grotto right, first room"),
    (82, "mountain smithy", "mountain village"),
    (84, "termina field",
     "west clock town;road to southern swamp;great bay coast;"
     "path to mountain village;road to ikana;milk road;south clock town;"
     "east clock town;north clock town;observatory;observatory (telescope);"
     "near ikana;moon crash;cremia hug;skullkid cutscene;west clock town"),
    (86, "post office", "west clock town"),
    (88, "marine lab", "great bay coast"),
    (90, "dampes house", "beneath the graveyard;graveyard"),
    (94, "goron shrine",
     "goron village;goron shop;after lullaby;goron village (no intro)"),
    (96, "zora hall",
     "zora cape;zora cape (turtle);zora shop;lulu's room;evan's room;"
     "japa's room;mikau & tijo's room;stage;after rehearsal"),
    (98, "trading post",
     "west clock town (intro);west clock town (no intro)"),
    (100, "romani ranch",
     "milk road;after target practice;barn;house;cucco shack;doggy racetrack;"
     "after aliens;after romani leaves;failing cremia game;failing aliens;"
     "after aliens intro;leaving with cremia"),
    (102, "twinmold", "inverted stone tower;inverted stone tower;!;!;!"),
    (104, "great bay coast",
     "termina field;zora cape;void respawn;pinnacle rock;fisherman hut;"
     "pirates fortress;void resapwn (murky water);marine lab;"
     "oceanside spider house;during zora mask;after zora mask;owl statue;"
     "thrown out;after jumping game"),
    (106, "zora cape",
     "great bay coast;zora hall;zora hall (turtle);void respawn;waterfall;"
     "fairy fountain;owl statue;great bay temple;after great bay temple;"
     "unknown"),
    (108, "lottery shop", "west clock town"),
    (112, "pirates fortress exterior",
     "great bay coast;pirates fortress;underwater passage;underwater jet;"
     "kicked out;hookshot platform;passage door"),
    (114, "fisherman's hut", "great bay coast"),
    (116, "goron shop", "goron shrine"),
    (118, "deku king's chamber",
     "deku palace;deku palace (upper);monkey released;front of king"),
    (120, "goron trial", "moon"),
    (122, "road to southern swamp",
     "termina field;southern swamp;swamp shooting gallery"),
    (124, "doggy racetrack", "romani ranch;after race"),
    (126, "cucco shack", "romani ranch;after bunny hood"),
    (128, "ikana graveyard",
     "road to ikana;grave 1;grave 2;grave 3;dampe's house;"
     "after keeta defeated"),
    (130, "goht", "snowhead temple"),
    (132, "southern swamp (poison)",
     "road to southern swamp;boat house;woodfall;deku palace;"
     "deku palace (shortcut);hags potion shop;boat ride;woods of mystery;"
     "swamp spider house;ikana canyon;owl statue"),
    (134, "woodfall",
     "southern swamp;unknown;fairy fountain;unknown;owl statue"),
    (136, "zora trial", "moon;void respawn"),
    (138, "goron village (spring)",
     "path to goron village (spring);unknown;goron shrine;lens of truth;"
     "void out"),
    (140, "great bay temple", "zora cape (waving);zora cape;!"),
    (142, "waterfall", "zora cape;race start;race end;game won"),
    (144, "beneath the well", "ikana canyon;ikana castle"),
    (146, "zora hall rooms",
     "mikau from zora hall;japas from zora hall;lulu from zora hall;"
     "evan from zora hall;japa after jam session;zora shop from zora hall;"
     "evan after composing song"),
    (148, "goron village (winter)",
     "path to goron village (winter);deku flower;goron shrine;lens of truth;"
     "void out"),
    (150, "goron graveyard", "mountain village;receiving goron mask"),
    (152, "sakon's hideout", "ikana canyon"),
    (154, "mountain village (winter)",
     "after snowhead;mountain smithy;path to goron village (winter);"
     "goron graveyard;path to snowhead;on ice;path to mountain village;"
     "unknown;owl statue"),
    (156, "ghost hut", "ikana canyon;after minigame;beat minigame"),
    (158, "deku shrine", "deku palace;deku palace;!"),
    (160, "road to ikana", "termina field;ikana canyon;ikana graveyard"),
    (162, "swordsman school", "west clock town"),
    (164, "music box house", "ikana canyon"),
    (166, "igos du ikana", "ikana castle"),
    (168, "boat house", "southern swamp;koume;tingle's dad"),
    (170, "stone tower",
     "ikana canyon;unknown;stone tower temple;owl statue"),
    (172, "stone tower (inverted)", "after inverting;stone tower temple"),
    (174, "mountain village (spring)",
     "after snowhead;mountain smithy;path to goron village (spring);"
     "goron graveyard;path to snowhead;behind waterfall;"
     "path to mountain village;after snowhead (cutscene);owl statue"),
    (176, "path to snowhead",
     "mountain village;unknown;snowhead;unknown;unknown"),
    (178, "snowhead",
     "path to snowhead;snowhead temple;fairy fountain;owl statue"),
    (180, "path to goron village (winter)",
     "mountain village (winter);goron village (winter);goron racetrack"),
    (182, "path to goron village (spring)",
     "mountain village (spring);goron village (spring);goron racetrack"),
    (184, "gyorg", "great bay temple;falling cutscene"),
    (186, "secret shrine", "ikana canyon"),
    (188, "stock pot inn",
     "east clock town (main);east clock town (balcony);granny's story;"
     "anju meeting;eavesdropping anju;after eavesdropping"),
    (190, "great bay (cutscene)", "zora cape"),
    (192, "clock tower interior",
     "twisted hallway;south clock town;deku mask cutscene;moon crash;"
     "song of time;twisted hallway;majora's mask cutscene"),
    (194, "woods of mystery", "southern swamp"),
    (196, "lost woods", "kicked off epona;song of time cutscene;unknown"),
    (198, "link trial", "moon"),
    (200, "moon", "clock tower"),
    (202, "bomb shop", "west clock town;west clock town"),
    (204, "giants chamber", "oath to order"),
    (206, "gorman race track",
     "milk road;unknown;beat minigame;milk road behind fence;"
     "milk road fence cutscene;unknown;start minigame"),
    (208, "goron racetrack", "path to mountain village;race start;race end"),
    (210, "east clock town",
     "termina field;south clock town;observatory;south clock town;"
     "treasure chest shop;north clock town;honey & darling;"
     "mayor's residence;shooting gallery;stock pot inn (main);"
     "stock pot inn (upper);milk bar;!"),
    (212, "west clock town",
     "termina field;south clock town (lower);south clock town (upper);"
     "swordsman school;curiosity shop;trading post;bomb shop;post office;"
     "lottery shop;termina field"),
    (214, "north clock town",
     "termina field;east clock town;south clock town;fairy fountain;"
     "deku playground;bombers code;after bomberrs;after sakon"),
    (216, "south clock town",
     "clock tower interior;termina field;east clock town (upper);"
     "west clock town (upper);north clock town;west clock town (lower);"
     "laundry pool;east clock town (lower);clock tower;owl statue;"
     "clock tower (after song of time)"),
    (218, "laundry pool", "south clock town;kafei's hideout;!"),
)


@dataclass(frozen=True)
class Scene:
    """A scene with its id and the names of its entrances, in entrance order."""

    scene_id: int
    name: str
    entrances: tuple[str, ...]


def _entrances(packed: str, crash_warp: bool) -> tuple[str, ...]:
    result = []
    for entry in packed.split(_SEPARATOR):
        if entry == _CRASH_MARK:
            if crash_warp:
                result.append(CRASH_ENTRANCE)
        else:
            result.append(entry)
    return tuple(result)


@lru_cache(maxsize=None)
def build_scenes(crash_warp: bool = False) -> tuple[Scene, ...]:
    """Return the scene table.

    Entrances known to crash the game are listed only when ``crash_warp``
    is true; otherwise they are left out and the remaining entrances keep
    their order.
    """
    return tuple(
        Scene(scene_id, name, _entrances(packed, crash_warp))
        for scene_id, name, packed in _SCENE_DATA
    )