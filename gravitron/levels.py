"""Static description of every room: walls, traps, save points and enemies."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum

Point = tuple[float, float]

DEFAULT_RESOURCE_DIR = os.environ.get("GRAVITRON_RESOURCE_DIR", "Resources")


class LevelID(IntEnum):
    """Identifier of a room; the value is the room's index on the map."""

    WELCOME_ABOARD = 0
    CONUNDRUM = 1
    SOLITUDE = 2
    LEAP_OF_FAITH = 3
    TRAFFIC_JAM = 4
    ATMOSPHERIC_FILTERING_UNIT = 5
    ITS_A_SECRET_TO_NOBODY = 6
    LINEAR_COLLIDER = 7
    SECURITY_SWEEP = 8
    GENTRY_AND_DOLLY = 9
    COMMS_RELAY = 10
    THE_YES_MEN = 11
    STOP_AND_REFLECT = 12
    TRENCH_WARFARE = 13
    V_STITCH = 14
    BBB_BUSTED = 15
    THE_SENSIBLE_ROOM = 16
    BOO_THINK_FAST = 17
    DRILLER = 18
    EXHAUST_CHUTE = 19
    SORROW = 20
    QUICKSAND = 21
    THE_TOMB_OF_MAD_CAREW = 22
    BRASS_SENT_US_UNDER_THE_TOP = 23
    A_WRINKLE_IN_TIME = 24


@dataclass(frozen=True)
class EnemyInfo:
    """An enemy patrolling between two points."""

    image_path: str
    position1: Point
    position2: Point
    size: Point
    is_increment: bool
    speed: float
    is_reverse_able: bool = False


@dataclass(frozen=True)
class LevelData:
    """Everything needed to build one room."""

    image_name: str
    background_name: str
    up_wall: LevelID
    down_wall: LevelID
    left_wall: LevelID
    right_wall: LevelID
    has_traps: bool
    has_enemies: bool
    has_save_point: bool
    trap_positions: tuple[Point, ...] = field(default_factory=tuple)
    trap_reverse_positions: tuple[Point, ...] = field(default_factory=tuple)
    enemy_infos: tuple[EnemyInfo, ...] = field(default_factory=tuple)
    save_point_positions: tuple[Point, ...] = field(default_factory=tuple)
    save_reverse_positions: tuple[Point, ...] = field(default_factory=tuple)


def _row(y: float, *xs: float) -> tuple[Point, ...]:
    return tuple((float(x), float(y)) for x in xs)


def _points(*points: tuple[float, float]) -> tuple[Point, ...]:
    return tuple((float(x), float(y)) for x, y in points)


class LevelInfoTable:
    """Lookup table of all rooms, keyed by :class:`LevelID`."""

    def __init__(self, resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
        self.resource_dir = os.fspath(resource_dir)
        self._levels = self._build()

    def _enemy_image(self, name: str) -> str:
        return f"{self.resource_dir}/Image/Background/{name}.png"

    def get(self, level_id: LevelID | int) -> LevelData:
        """Return the data of a room; raise KeyError for an unknown id."""
        try:
            key = LevelID(level_id)
        except ValueError:
            raise KeyError(level_id) from None
        return self._levels[key]

    def level_ids(self) -> tuple[LevelID, ...]:
        """All known room ids in map order."""
        return tuple(sorted(self._levels))

    def __contains__(self, level_id: object) -> bool:
        return level_id in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def _build(self) -> dict[LevelID, LevelData]:
        L = LevelID
        e5 = self._enemy_image("5.enemy")
        e8 = self._enemy_image("8.enemy")
        e9 = self._enemy_image("9.point")
        e12 = self._enemy_image("12.yesman")
        e14 = self._enemy_image("14.enemy")
        e16 = self._enemy_image("16.enemy")

        levels = {
            L.WELCOME_ABOARD: LevelData(
                "1.WelcomeAboardWithNote", "1.WelcomeAboardBackground",
                L.WELCOME_ABOARD, L.WELCOME_ABOARD, L.WELCOME_ABOARD, L.CONUNDRUM,
                False, False, False,
            ),
            L.CONUNDRUM: LevelData(
                "2.Conundrum", "2.ConundrumBackground",
                L.CONUNDRUM, L.CONUNDRUM, L.WELCOME_ABOARD, L.SOLITUDE,
                True, False, False,
                trap_positions=_row(-303, -201, -151, -101, -51, -1, 49, 99, 149, 199),
            ),
            L.SOLITUDE: LevelData(
                "3.Solitude", "3.SolitudeBackground",
                L.LEAP_OF_FAITH, L.SOLITUDE, L.CONUNDRUM, L.SOLITUDE,
                False, False, True,
                save_point_positions=_points((-30, -227)),
            ),
            L.LEAP_OF_FAITH: LevelData(
                "4.LeapOfFaith", "4.LeapOfFaithBackground",
                L.TRAFFIC_JAM, L.SOLITUDE, L.LEAP_OF_FAITH, L.LEAP_OF_FAITH,
                False, False, False,
            ),
            L.TRAFFIC_JAM: LevelData(
                "5.TrafficJam", "5.TrafficJamBackground",
                L.TRAFFIC_JAM, L.LEAP_OF_FAITH, L.ATMOSPHERIC_FILTERING_UNIT, L.TRAFFIC_JAM,
                False, True, True,
                enemy_infos=(
                    EnemyInfo(e5, (220.0, -80.0), (220.0, 210.0), (90.0, 130.0), True, 10.0),
                    EnemyInfo(e5, (-100.0, 85.0), (-100.0, 375.0), (90.0, 130.0), False, 10.0),
                    EnemyInfo(e5, (-415.0, -80.0), (-415.0, 210.0), (90.0, 130.0), True, 10.0),
                ),
                save_reverse_positions=_points((317.5, -287.5)),
            ),
            L.ATMOSPHERIC_FILTERING_UNIT: LevelData(
                "6.AtmosphericFilteringUnit", "6.AtmosphericFilteringUnitBackground",
                L.ATMOSPHERIC_FILTERING_UNIT, L.ITS_A_SECRET_TO_NOBODY,
                L.LINEAR_COLLIDER, L.TRAFFIC_JAM,
                True, False, True,
                trap_positions=_row(-303, -70, -25, 20, 65, 110, 155),
                trap_reverse_positions=_row(
                    360, -300, -253.125, -206.25, -159.375, -112.5,
                    -65.625, -18.75, 28.125, 75,
                ),
                save_point_positions=_points((-165, -195)),
                save_reverse_positions=_points((160, 255)),
            ),
            L.ITS_A_SECRET_TO_NOBODY: LevelData(
                "7.ItsASecretToNobody", "7.ItsASecretToNobodyBackground",
                L.ATMOSPHERIC_FILTERING_UNIT, L.ITS_A_SECRET_TO_NOBODY,
                L.ITS_A_SECRET_TO_NOBODY, L.ITS_A_SECRET_TO_NOBODY,
                True, False, True,
                trap_positions=_row(-175, -430, -390, -350, -140, -100, -60, -20, 20, 60),
                trap_reverse_positions=_row(136, -300, -255, -210, -165, -120, 80, 125, 170),
                save_point_positions=_points((255, -130)),
            ),
            L.LINEAR_COLLIDER: LevelData(
                "8.LinearCollider", "8.LinearColliderBackground",
                L.LINEAR_COLLIDER, L.LINEAR_COLLIDER, L.SECURITY_SWEEP,
                L.ATMOSPHERIC_FILTERING_UNIT,
                False, True, True,
                enemy_infos=(
                    EnemyInfo(e8, (-290.0, 100.0), (290.0, 100.0), (128.0, 66.0), True, 6.0),
                    EnemyInfo(e8, (-290.0, -62.0), (290.0, -62.0), (128.0, 66.0), False, 6.0),
                ),
                save_point_positions=_points((-513, -225)),
                save_reverse_positions=_points((510, 255)),
            ),
            L.SECURITY_SWEEP: LevelData(
                "9.SecuritySweep", "9.SecuritySweepBackground",
                L.SECURITY_SWEEP, L.GENTRY_AND_DOLLY, L.SECURITY_SWEEP, L.LINEAR_COLLIDER,
                False, True, True,
                enemy_infos=(
                    EnemyInfo(e9, (186.0, 345.0), (186.0, -214.0), (67.0, 67.0), False, 15.0),
                ),
                save_point_positions=_points((62, 25)),
            ),
            L.GENTRY_AND_DOLLY: LevelData(
                "10.GentryAndDolly", "10.GentryAndDollyBackground",
                L.SECURITY_SWEEP, L.THE_YES_MEN, L.GENTRY_AND_DOLLY, L.COMMS_RELAY,
                True, False, False,
                trap_positions=_row(-16, -74, -34, 6)
                + _row(-367, -125, -75, -25, 26, 75, 126, 175, 226.125, 275, 326),
            ),
            L.COMMS_RELAY: LevelData(
                "11.CommsRelay", "11.CommsRelayBackground",
                L.COMMS_RELAY, L.COMMS_RELAY, L.GENTRY_AND_DOLLY, L.COMMS_RELAY,
                False, False, False,
            ),
            L.THE_YES_MEN: LevelData(
                "12.TheYesMen", "12.TheYesMenBackground",
                L.GENTRY_AND_DOLLY, L.STOP_AND_REFLECT, L.THE_YES_MEN, L.THE_YES_MEN,
                False, True, True,
                enemy_infos=(
                    EnemyInfo(e12, (-117.0, 385.0), (-117.0, 148.0), (83.0, 83.0), False, 5.0),
                    EnemyInfo(e12, (-117.0, -122.0), (-117.0, -356.0), (83.0, 83.0), True, 5.0),
                    EnemyInfo(e12, (460.0, 385.0), (460.0, -225.0), (83.0, 83.0), False, 5.0),
                    EnemyInfo(e12, (176.0, 269.0), (176.0, 70.0), (83.0, 83.0), False, 7.0),
                    EnemyInfo(e12, (176.0, -245.0), (176.0, -50.0), (83.0, 83.0), False, 7.0),
                ),
                save_point_positions=_points((-352, 126)),
                save_reverse_positions=_points((-352, -94)),
            ),
            L.STOP_AND_REFLECT: LevelData(
                "13.StopAndReflect", "13.StopAndReflectBackground",
                L.THE_YES_MEN, L.V_STITCH, L.STOP_AND_REFLECT, L.TRENCH_WARFARE,
                True, False, True,
                trap_positions=_row(-241, -228, -188),
                trap_reverse_positions=_row(270, -228, -188),
                save_point_positions=_points((540, -192)),
            ),
            L.TRENCH_WARFARE: LevelData(
                "14.TrenchWarfare", "14.TrenchWarfareBackground",
                L.TRENCH_WARFARE, L.TRENCH_WARFARE, L.STOP_AND_REFLECT, L.TRENCH_WARFARE,
                True, True, False,
                trap_reverse_positions=_row(175, -435, -400, -85, -50, 210, 240)
                + _row(363, -367, -332, -297, -262, -227, -192, -157, -122)
                + _row(363, -3, 33, 69, 105, 141, 177)
                + _row(363, 273, 308, 343, 378, 413, 448, 483, 518),
                enemy_infos=(
                    EnemyInfo(e14, (-180.0, -350.0), (-180.0, -100.0), (70.0, 76.0), True, 7.0),
                    EnemyInfo(e14, (75.0, -350.0), (75.0, -100.0), (70.0, 76.0), False, 7.0),
                    EnemyInfo(e14, (335.0, -350.0), (335.0, -100.0), (70.0, 76.0), True, 7.0),
                ),
            ),
            L.V_STITCH: LevelData(
                "15.VStitch", "15.VStitchBackground",
                L.STOP_AND_REFLECT, L.V_STITCH, L.V_STITCH, L.BBB_BUSTED,
                True, False, True,
                trap_positions=_row(80, 20, 60, 100, 405, 445, 485, 525, 565, 605)
                + _row(-365, -495, -455, -415, -235, -195, -155, 25, 65, 105, 285, 325, 365),
                trap_reverse_positions=_row(395, -172, -132, -92, 212, 252, 292)
                + _row(
                    -55, 405, 445, 485, 525, 565, 605, -530, -570, -610,
                    -275, -315, -355, -105, -65, -25, 150, 190, 230,
                ),
                save_point_positions=_points((-353, 125)),
            ),
            L.BBB_BUSTED: LevelData(
                "16.BBBBusted", "16.BBBBustedBackground",
                L.BBB_BUSTED, L.BBB_BUSTED, L.V_STITCH, L.THE_SENSIBLE_ROOM,
                True, True, False,
                trap_positions=_row(
                    75, -623, -583, -543, -503, -463, -423, -383, -343, -303, -263,
                    272, 312, 352, 392, 432, 472, 512, 552, 592, 632,
                ),
                trap_reverse_positions=_row(
                    -48, -623, -583, -543, -503, -463, -423, -383, -343, -303, -263,
                    -223, -183, -143, -103, -63, 72, 112, 152, 192, 232,
                    272, 312, 352, 392, 432, 472, 512, 552, 592, 632,
                ),
                enemy_infos=(
                    EnemyInfo(e16, (-640.0, 290.0), (640.0, 290.0), (257.0, 184.0), True, 10.0, True),
                ),
            ),
            L.THE_SENSIBLE_ROOM: LevelData(
                "17.TheSensibleRoom", "17.TheSensibleRoomBackground",
                L.BOO_THINK_FAST, L.THE_SENSIBLE_ROOM, L.BBB_BUSTED, L.THE_SENSIBLE_ROOM,
                True, False, True,
                trap_positions=_row(
                    75, -623, -583, -543, -503, -463, -423, -383, -343,
                    -303, -263, -223, -183, -143,
                ),
                trap_reverse_positions=_row(-50, -623, -583, -543, -503, -462, -303, -263),
                save_point_positions=_points((0, 125)),
                save_reverse_positions=_points((-387, -130)),
            ),
            L.BOO_THINK_FAST: LevelData(
                "18.BooThinkFast", "18.BooThinkFastBackground",
                L.BOO_THINK_FAST, L.THE_SENSIBLE_ROOM, L.BOO_THINK_FAST, L.DRILLER,
                True, False, False,
                trap_positions=_row(
                    -110, 157, 197, 237, 277, 317, 357, 397, 437, 477, 517, 557, 597, 637,
                ),
            ),
            L.DRILLER: LevelData(
                "19.Driller", "19.DrillerBackground",
                L.DRILLER, L.EXHAUST_CHUTE, L.BOO_THINK_FAST, L.QUICKSAND,
                True, False, True,
                trap_positions=_row(
                    -110, -608, -568, -528, -488, -448, -408, -368, -328,
                    -288, -248, -208, -168, -128, -88, 85, 125,
                    165, 205, 245, 285, 325, 365, 405, 445, 485, 525, 565, 605,
                ),
                trap_reverse_positions=_row(360, -63, -23, 17, 57),
                save_reverse_positions=_points((-450, 350), (440, 350)),
            ),
            L.EXHAUST_CHUTE: LevelData(
                "20.ExhaustChute", "20.ExhaustChuteBackground",
                L.DRILLER, L.SORROW, L.EXHAUST_CHUTE, L.EXHAUST_CHUTE,
                True, False, False,
                trap_positions=_row(142, -300, -260, -220, -180)
                + _row(15, -40, 4, 44)
                + _row(142, 185, 225, 265, 305),
                trap_reverse_positions=_row(
                    330, -488, -448, -408, -368, -328, -288, -248, -208, -168, -128,
                    -88, 85, 125, 165, 205, 245, 285, 325, 365, 405, 445, 485, 525, 565,
                )
                + _row(-80, -40, 4, 44),
            ),
            L.SORROW: LevelData(
                "21.Sorrow", "21.SorrowBackground",
                L.EXHAUST_CHUTE, L.SORROW, L.SORROW, L.SORROW,
                True, False, False,
                trap_positions=_row(303, -152, -112, 108, 145)
                + _row(145, -118, -78, 80, 118),
                trap_reverse_positions=_row(237, -152, -112, 108, 145)
                + _row(77, -118, -75, 80, 118),
            ),
            L.QUICKSAND: LevelData(
                "22.Quicksand", "22.QuicksandBackground",
                L.QUICKSAND, L.THE_TOMB_OF_MAD_CAREW, L.DRILLER, L.QUICKSAND,
                True, False, False,
            ),
            L.THE_TOMB_OF_MAD_CAREW: LevelData(
                "23.TheTombOfMadCarew", "23.TheTombOfMadCarewBackground",
                L.QUICKSAND, L.THE_TOMB_OF_MAD_CAREW, L.THE_TOMB_OF_MAD_CAREW,
                L.BRASS_SENT_US_UNDER_THE_TOP,
                True, False, False,
            ),
            L.BRASS_SENT_US_UNDER_THE_TOP: LevelData(
                "24.BrassSentUsUnderTheTop", "24.BrassSentUsUnderTheTopBackground",
                L.BRASS_SENT_US_UNDER_THE_TOP, L.BRASS_SENT_US_UNDER_THE_TOP,
                L.THE_TOMB_OF_MAD_CAREW, L.A_WRINKLE_IN_TIME,
                True, False, False,
            ),
            L.A_WRINKLE_IN_TIME: LevelData(
                "25.AWrinkleInTime", "25.AWrinkleInTimeBackground",
                L.A_WRINKLE_IN_TIME, L.A_WRINKLE_IN_TIME,
                L.BRASS_SENT_US_UNDER_THE_TOP, L.A_WRINKLE_IN_TIME,
                True, False, False,
            ),
        }
        return levels