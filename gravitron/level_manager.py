"""Room switching, collision masks and the hazards of the current room."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .entities import Enemy, GameObject, SavePoint, Sprite, Trap, Vec2, VecLike
from .imageloader import ImageLoader
from .levels import DEFAULT_RESOURCE_DIR, LevelData, LevelID, LevelInfoTable

IMAGE_WIDTH = 1280
IMAGE_HEIGHT = 915
VERTICAL_PROBE = 47
HORIZONTAL_PROBE = 25
FOOT_SPREAD = 15
BODY_SPREAD = 18

ENTRY_NONE = 0
ENTRY_UP = 1
ENTRY_DOWN = 2
ENTRY_RIGHT = 3
ENTRY_LEFT = 4

# Alpha 0 maps to 1 (walkable), any other alpha to 0 (solid).
_WALKABLE = bytes([1] + [0] * 255)


def world_to_image(wx: float, wy: float) -> tuple[int, int]:
    """Convert world coordinates (origin at the centre, y up) to image pixels."""
    return int(wx + IMAGE_WIDTH // 2), int(950 // 2 - wy)


class LevelManager(GameObject):
    """Keeps track of the current room and everything placed in it."""

    def __init__(
        self,
        resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR,
        table: LevelInfoTable | None = None,
    ) -> None:
        super().__init__()
        self.resource_dir = os.fspath(resource_dir)
        self.table = table if table is not None else LevelInfoTable(self.resource_dir)
        self._masks: dict[LevelID, bytes] = {}
        self.preload_walkable_masks()

        self.current_level_id = LevelID.WELCOME_ABOARD
        self.level_data: LevelData = self.table.get(self.current_level_id)
        self.level = Sprite(self.level_data.image_name, -10, self.resource_dir)
        self.background = Sprite(self.level_data.background_name, -10, self.resource_dir)
        self._mask = self._masks[self.current_level_id]

        self.traps: list[Trap] = []
        self.save_points: list[SavePoint] = []
        self.enemies: list[Enemy] = []

        self.save_point_position = Vec2()
        self.save_point_level_id = LevelID.WELCOME_ABOARD
        self.save_point_is_reverse = False
        self.stepped_on_quicksand = False
        self.in_game = True

    def children(self) -> list[GameObject]:
        return [self.level, self.background]

    def preload_walkable_masks(self) -> None:
        """Decode every room image into a mask: 1 where the player may stand."""
        for level_id in self.table.level_ids():
            data = self.table.get(level_id)
            image = ImageLoader(
                f"{self.resource_dir}/Image/Background/{data.image_name}.png"
            )
            self._masks[level_id] = image.pixels[3::4].translate(_WALKABLE)

    def _walkable(self, x: int, y: int) -> bool:
        index = y * IMAGE_WIDTH + x
        if 0 <= index < len(self._mask):
            return bool(self._mask[index])
        return False

    def is_movable(self, position: VecLike, is_increment: bool, is_vertical: bool) -> bool:
        """Whether the player may step from *position* in the given direction.

        Vertically, *is_increment* means downwards in image space (falling);
        horizontally it means to the right.
        """
        p = Vec2.of(position)
        x, y = world_to_image(p.x, p.y)
        if is_vertical:
            y += VERTICAL_PROBE if is_increment else -VERTICAL_PROBE
            if y >= IMAGE_HEIGHT or y <= 0:
                return True
            return all(
                self._walkable(px, y) for px in (x, x + FOOT_SPREAD, x - FOOT_SPREAD)
            )
        x += HORIZONTAL_PROBE if is_increment else -HORIZONTAL_PROBE
        return all(
            self._walkable(x, py) for py in (y, y + BODY_SPREAD, y - BODY_SPREAD)
        )

    def enter_up(self) -> None:
        self._load(self.level_data.up_wall, ENTRY_UP)

    def enter_down(self) -> None:
        self._load(self.level_data.down_wall, ENTRY_DOWN)

    def enter_right(self) -> None:
        self._load(self.level_data.right_wall, ENTRY_RIGHT)

    def enter_left(self) -> None:
        self._load(self.level_data.left_wall, ENTRY_LEFT)

    def set_level(self, level_id: LevelID | int) -> None:
        """Jump straight to a room, as when respawning."""
        self._load(LevelID(level_id), ENTRY_NONE)

    def touches_save_point(self, position: VecLike) -> bool:
        """Record the save point touched at *position*, if any."""
        for save_point in self.save_points:
            if save_point.touches(position):
                self.save_point_level_id = self.current_level_id
                self.save_point_is_reverse = save_point.is_reverse
                return True
        return False

    def touches_enemy(self, position: VecLike) -> bool:
        return any(enemy.touches(position) for enemy in self.enemies)

    def touches_trap(self, position: VecLike) -> bool:
        return any(trap.touches(position) for trap in self.traps)

    def update_enemies(self) -> None:
        if self.level_data.has_enemies:
            for enemy in self.enemies:
                enemy.update()

    def _load(self, level_id: LevelID, entry_direction: int) -> None:
        self._mask = self._masks[level_id]
        self.current_level_id = level_id
        self.level_data = self.table.get(level_id)
        self._populate(entry_direction)

    def _populate(self, entry_direction: int) -> None:
        self._clear()
        data = self.level_data
        self.level.change_image(data.image_name)
        self.background.change_image(data.background_name)
        if data.has_traps:
            self.traps = [
                *(Trap(p, False, self.resource_dir) for p in data.trap_positions),
                *(Trap(p, True, self.resource_dir) for p in data.trap_reverse_positions),
            ]
            self._attach(self.traps)
        if data.has_save_point:
            self.save_points = [
                *(SavePoint(p, False, self.resource_dir) for p in data.save_point_positions),
                *(SavePoint(p, True, self.resource_dir) for p in data.save_reverse_positions),
            ]
            self._attach(self.save_points)
        if data.has_enemies:
            self.enemies = [
                Enemy(
                    info.image_path, info.position1, info.position2, info.size,
                    info.is_increment, info.speed, info.is_reverse_able, entry_direction,
                )
                for info in data.enemy_infos
            ]
            self._attach(self.enemies)

    def _attach(self, objects: list) -> None:
        for obj in objects:
            obj.z_index = 0
            obj.visible = True
            self.level.add_child(obj)

    def _placed(self) -> Iterator[GameObject]:
        yield from self.traps
        yield from self.save_points
        yield from self.enemies

    def _clear(self) -> None:
        removed = list(self._placed())
        for obj in removed:
            obj.destroy()
        removed_ids = {id(obj) for obj in removed}
        self.level.children = [c for c in self.level.children if id(c) not in removed_ids]
        self.traps = []
        self.save_points = []
        self.enemies = []