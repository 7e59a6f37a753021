"""The game loop: player physics, room changes, hazards and the overview map."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from .entities import Animation, GameObject, Player
from .level_manager import LevelManager
from .levels import DEFAULT_RESOURCE_DIR
from .map_manager import MapManager

log = logging.getLogger(__name__)

PLAYER_Z_INDEX = 5
PRESSED_STEPS = 6
PRESSED_SPEED = 2
RELEASE_STEPS = 4


class AppState(Enum):
    """Lifecycle of the application."""

    START = auto()
    UPDATE = auto()
    END = auto()


class Key(Enum):
    """Keys the game reacts to."""

    SPACE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    N = auto()
    M = auto()


FLIP_KEYS = (Key.SPACE, Key.UP, Key.DOWN, Key.W, Key.S)
LEFT_KEYS = (Key.LEFT, Key.A)
RIGHT_KEYS = (Key.RIGHT, Key.D)


@dataclass(frozen=True)
class KeyState:
    """Keyboard state of one frame.

    ``down`` holds keys that went down this frame, ``pressed`` keys held down,
    and ``up`` keys released this frame.
    """

    down: frozenset[Key] = field(default_factory=frozenset)
    pressed: frozenset[Key] = field(default_factory=frozenset)
    up: frozenset[Key] = field(default_factory=frozenset)

    def is_down(self, *args: Key) -> bool:
        return any(key in self.down for key in args)

    def is_pressed(self, *args: Key) -> bool:
        return any(key in self.pressed for key in args)

    def is_up(self, *args: Key) -> bool:
        return any(key in self.up for key in args)


class App:
    """Owns the scene and advances the game one frame at a time."""

    def __init__(self, resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
        self.resource_dir = os.fspath(resource_dir)
        self.state = AppState.START
        self.root = GameObject()
        self.player: Player | None = None
        self.level_manager: LevelManager | None = None
        self.map_manager: MapManager | None = None
        self.fall_able = False

    def start(self) -> None:
        """Build the player, the rooms and the map, then enter the update state."""
        log.debug("Start")
        character_dir = f"{self.resource_dir}/Image/Character"
        self.player = Player(
            [f"{character_dir}/playerNew.png", f"{character_dir}/playerNewReverse.png"]
        )
        self.player.position = (0.0, 0.0)
        self.player.z_index = PLAYER_Z_INDEX
        self.player.visible = True
        self.root.add_child(self.player)

        self.level_manager = LevelManager(self.resource_dir)
        self.root.add_children(self.level_manager.children())

        self.map_manager = MapManager(self.resource_dir)
        self.root.add_children(self.map_manager.children())

        self.state = AppState.UPDATE

    def update(self, keys: KeyState | None = None) -> None:
        """Advance the game by one frame given this frame's keyboard state."""
        if self.player is None or self.level_manager is None or self.map_manager is None:
            raise RuntimeError("update() called before start()")
        keys = keys if keys is not None else KeyState()
        lm = self.level_manager
        game_map = self.map_manager

        if lm.in_game:
            self._apply_gravity()
            self._cross_walls()
            self._flip(keys)
            self._walk(keys, LEFT_KEYS, is_right=False)
            self._walk(keys, RIGHT_KEYS, is_right=True)

            if keys.is_down(Key.N):
                self.fall_able = not self.fall_able

            self._check_hazards()

            if lm.touches_save_point(self.player.position):
                lm.save_point_position = self.player.position

            lm.update_enemies()

        if keys.is_down(Key.M):
            if game_map.map_called:
                game_map.map_called = False
            else:
                game_map.map_called = True
                lm.in_game = False
            game_map.map_move_complete = False
            game_map.update_map()

        if game_map.map_called and not game_map.map_move_complete:
            game_map.call_map()
        elif not game_map.map_called and not game_map.map_move_complete:
            game_map.return_map()
        elif game_map.map_move_complete and not game_map.map_called:
            lm.in_game = True

    def end(self) -> None:
        log.debug("End")

    def _apply_gravity(self) -> None:
        player, lm = self.player, self.level_manager
        downward = not player.gravity_flipped
        movable = lm.is_movable(player.position, downward, True)
        if movable and not self.fall_able and not lm.stepped_on_quicksand:
            player.update()
        player.flip_able = not lm.is_movable(player.position, downward, True)

    def _entered_room(self) -> None:
        index = int(self.level_manager.current_level_id)
        self.map_manager.map_visited(index)
        self.map_manager.map_current(index)

    def _cross_walls(self) -> None:
        player, lm = self.player, self.level_manager
        if player.touch_up_wall():
            lm.enter_up()
            self._entered_room()
        if player.touch_down_wall():
            lm.enter_down()
            self._entered_room()
        if player.touch_left_wall():
            lm.enter_left()
            player.move(False)
            self._entered_room()
        if player.touch_right_wall():
            lm.enter_right()
            player.move(True)
            self._entered_room()

    def _flip(self, keys: KeyState) -> None:
        if keys.is_down(*FLIP_KEYS) and self.player.flip_able:
            self.player.flip_gravity()
            self.player.update()

    def _walk(self, keys: KeyState, walk_keys: Sequence[Key], is_right: bool) -> None:
        if keys.is_pressed(*walk_keys):
            speeds: Iterable[int] = [PRESSED_SPEED] * PRESSED_STEPS
        elif keys.is_up(*walk_keys):
            speeds = range(RELEASE_STEPS, 0, -1)
        else:
            return
        for speed in speeds:
            if not self.level_manager.is_movable(self.player.position, is_right, False):
                break
            self.player.move(is_right, speed)

    def _check_hazards(self) -> None:
        player, lm = self.player, self.level_manager
        if lm.touches_trap(player.position) or lm.touches_enemy(player.position):
            player.position = lm.save_point_position
            if player.gravity_flipped != lm.save_point_is_reverse:
                player.flip_gravity()
            if lm.current_level_id != lm.save_point_level_id:
                lm.set_level(lm.save_point_level_id)


class _Renderer:
    """Draws the visible objects of a scene tree with pygame, lowest depth first."""

    def __init__(self, screen) -> None:
        self.screen = screen
        self._images: dict[str, object] = {}

    def _surface(self, path: str):
        import pygame

        if path not in self._images:
            self._images[path] = pygame.image.load(path).convert_alpha()
        return self._images[path]

    def draw(self, root: GameObject) -> None:
        width, height = self.screen.get_size()
        self.screen.fill((0, 0, 0))
        objects = [obj for obj in root.walk() if obj.visible]
        for obj in sorted(objects, key=lambda o: o.z_index):
            drawable = obj.drawable
            if isinstance(drawable, Animation):
                path = drawable.frames[drawable.current_frame]
            elif isinstance(drawable, str):
                path = drawable
            else:
                continue
            surface = self._surface(path)
            x = width / 2 + obj.position.x - surface.get_width() / 2
            y = height / 2 - obj.position.y - surface.get_height() / 2
            self.screen.blit(surface, (x, y))


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="gravitron", description="Gravity-flipping platformer.")
    parser.add_argument("--resource-dir", default=DEFAULT_RESOURCE_DIR)
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fps", type=int, default=60)
    args = parser.parse_args(argv)

    import pygame

    key_codes = {
        Key.SPACE: pygame.K_SPACE,
        Key.UP: pygame.K_UP,
        Key.DOWN: pygame.K_DOWN,
        Key.LEFT: pygame.K_LEFT,
        Key.RIGHT: pygame.K_RIGHT,
        Key.W: pygame.K_w,
        Key.A: pygame.K_a,
        Key.S: pygame.K_s,
        Key.D: pygame.K_d,
        Key.N: pygame.K_n,
        Key.M: pygame.K_m,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("gravitron")
        renderer = _Renderer(screen)
        clock = pygame.time.Clock()
        app = App(args.resource_dir)
        previous: frozenset[Key] = frozenset()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            held = pygame.key.get_pressed()
            pressed = frozenset(key for key, code in key_codes.items() if held[code])
            keys = KeyState(down=pressed - previous, pressed=pressed, up=previous - pressed)
            previous = pressed

            if app.state is AppState.START:
                app.start()
            elif app.state is AppState.UPDATE:
                app.update(keys)
            else:
                app.end()
                running = False

            renderer.draw(app.root)
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0