"""The overview map that slides in and out over the game."""

from __future__ import annotations

import os

from .entities import GameObject, Sprite
from .levels import DEFAULT_RESOURCE_DIR

MAP_MOVE_SPEED = 50.0
MAP_SIZE = 25
MAP_HIDE_Y = -950.0
MAP_SHOW_Y = 0.0


def _hidden(sprite: Sprite, visible: bool) -> Sprite:
    sprite.visible = visible
    sprite.position = (0.0, MAP_HIDE_Y)
    return sprite


class MapManager(GameObject):
    """Map of all rooms, masking the unvisited ones and marking the current one."""

    def __init__(self, resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
        super().__init__()
        res = os.fspath(resource_dir)
        self.background = _hidden(Sprite("Map/allMap", 9, res), True)
        self.masks = [
            _hidden(Sprite(f"Map/unvisitedMap/{i + 1}", 10, res), True)
            for i in range(MAP_SIZE)
        ]
        self.current_maps = [
            _hidden(Sprite(f"Map/currentMap/{i + 1}", 15, res), False)
            for i in range(MAP_SIZE)
        ]
        self.current_titles = [
            _hidden(Sprite(f"Map/MapTitles/({i + 1})", 20, res), False)
            for i in range(MAP_SIZE)
        ]
        self.mask_cover = [i != 0 for i in range(MAP_SIZE)]
        self.is_current = [i == 0 for i in range(MAP_SIZE)]
        self.is_current_title = [i == 0 for i in range(MAP_SIZE)]
        self.current_maps[0].visible = True
        self.current_titles[0].visible = True
        self.map_called = False
        self.map_move_complete = True

    def children(self) -> list[GameObject]:
        return [self.background, *self.masks, *self.current_maps, *self.current_titles]

    def _layers(self) -> list[Sprite]:
        return [self.background, *self.masks, *self.current_maps, *self.current_titles]

    def _shift(self, dy: float) -> None:
        for sprite in self._layers():
            sprite.position += (0.0, dy)

    def _place(self, y: float) -> None:
        for sprite in self._layers():
            sprite.position = (sprite.position.x, y)

    def call_map(self) -> None:
        """Slide the map one step up into view."""
        self._shift(MAP_MOVE_SPEED)
        if self.background.position.y + MAP_MOVE_SPEED >= MAP_SHOW_Y:
            self._place(MAP_SHOW_Y)
            self.map_move_complete = True

    def return_map(self) -> None:
        """Slide the map one step down out of view."""
        self._shift(-MAP_MOVE_SPEED)
        if self.background.position.y - MAP_MOVE_SPEED <= MAP_HIDE_Y:
            self._place(MAP_HIDE_Y)
            self.map_move_complete = True

    def update_map(self) -> None:
        """Apply the visited and current flags to the sprites' visibility."""
        for i in range(MAP_SIZE):
            self.masks[i].visible = self.mask_cover[i]
            shown = self.is_current[i]
            self.current_maps[i].visible = shown
            self.current_titles[i].visible = shown

    def _check(self, index: int) -> int:
        if not 0 <= index < MAP_SIZE:
            raise IndexError(f"map index {index} out of range")
        return index

    def map_visited(self, index: int) -> None:
        self.mask_cover[self._check(index)] = False

    def map_current(self, index: int) -> None:
        self._check(index)
        self.is_current = [i == index for i in range(MAP_SIZE)]
        self.is_current_title = list(self.is_current)