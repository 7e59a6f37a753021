"""Game objects: plain sprites, characters, the player, traps, save points and enemies."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Union

from .levels import DEFAULT_RESOURCE_DIR

PLAYER_WIDTH = 40
PLAYER_HEIGHT = 82


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: VecLike) -> Vec2:
        """Build a vector from a Vec2 or an (x, y) pair."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: VecLike) -> Vec2:
        o = Vec2.of(other)
        return Vec2(self.x + o.x, self.y + o.y)

    def __sub__(self, other: VecLike) -> Vec2:
        o = Vec2.of(other)
        return Vec2(self.x - o.x, self.y - o.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return Vec2()
        return Vec2(self.x / size, self.y / size)

    def distance(self, other: VecLike) -> float:
        return (self - other).length()


VecLike = Union[Vec2, Sequence[float]]


def _image_path(resource_dir: str | os.PathLike[str], name: str) -> str:
    return f"{os.fspath(resource_dir)}/Image/Background/{name}.png"


def _overlaps(a: Vec2, b: VecLike, width: float, height: float) -> bool:
    p = Vec2.of(b)
    return (
        abs(p.x - a.x) * 2 < PLAYER_WIDTH + width
        and abs(p.y - a.y) * 2 < PLAYER_HEIGHT + height
    )


class GameObject:
    """A node of the scene tree with a drawable, a depth and a position."""

    def __init__(
        self,
        drawable: object = None,
        z_index: float = 0.0,
        visible: bool = True,
        position: VecLike = (0.0, 0.0),
    ) -> None:
        self.drawable = drawable
        self.z_index = z_index
        self.visible = visible
        self.position = position
        self.children: list[GameObject] = []

    @property
    def position(self) -> Vec2:
        return self._position

    @position.setter
    def position(self, value: VecLike) -> None:
        self._position = Vec2.of(value)

    def add_child(self, child: GameObject) -> None:
        self.children.append(child)

    def add_children(self, children: Iterable[GameObject]) -> None:
        self.children.extend(children)

    def walk(self) -> Iterator[GameObject]:
        """Yield this object and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class Sprite(GameObject):
    """A still image taken from the background image folder."""

    def __init__(
        self,
        name: str,
        z_index: float,
        resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR,
    ) -> None:
        self.resource_dir = os.fspath(resource_dir)
        super().__init__(_image_path(self.resource_dir, name), z_index)

    @property
    def image_path(self) -> str | None:
        return self.drawable  # type: ignore[return-value]

    def change_image(self, name: str) -> None:
        self.drawable = _image_path(self.resource_dir, name)


class Character(GameObject):
    """A game object showing a single image, starting at the origin."""

    STEP = 20

    def __init__(self, image_path: str) -> None:
        super().__init__()
        self.image_path = ""
        self.set_image(image_path)

    def set_image(self, image_path: str) -> None:
        self.image_path = image_path
        self.drawable = image_path

    def move_up(self) -> None:
        self.position += (0, self.STEP)

    def move_down(self) -> None:
        self.position -= (0, self.STEP)

    def move_left(self) -> None:
        self.position -= (self.STEP, 0)

    def move_right(self) -> None:
        self.position += (self.STEP, 0)

    def collides(self, other: Character) -> bool:
        return self.position.x >= other.position.x and self.position.y >= other.position.y


class Animation:
    """A sequence of frames with a current frame and a play state."""

    def __init__(
        self,
        frames: Iterable[str],
        play: bool = False,
        interval: int = 500,
        looping: bool = False,
        cooldown: int = 0,
    ) -> None:
        self.frames = tuple(frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.playing = play
        self.interval = interval
        self.looping = looping
        self.cooldown = cooldown
        self._current_frame = 0

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @current_frame.setter
    def current_frame(self, frame: int) -> None:
        if not 0 <= frame < len(self.frames):
            raise IndexError(f"frame {frame} out of range 0..{len(self.frames) - 1}")
        self._current_frame = frame

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False


class AnimatedCharacter(GameObject):
    """A game object drawn from an animation."""

    def __init__(self, animation_paths: Iterable[str]) -> None:
        super().__init__(Animation(animation_paths, play=False, interval=500, looping=False, cooldown=0))

    @property
    def animation(self) -> Animation:
        return self.drawable  # type: ignore[return-value]

    @property
    def looping(self) -> bool:
        return self.animation.looping

    @looping.setter
    def looping(self, value: bool) -> None:
        self.animation.looping = value

    @property
    def is_playing(self) -> bool:
        return self.animation.playing

    def start_playing(self) -> None:
        self.animation.interval = 100
        self.animation.play()

    def set_frame(self, frame: int) -> None:
        self.animation.current_frame = frame

    def draw(self) -> None:
        self.animation.play()
        self.animation.pause()

    def animation_ended(self) -> bool:
        return self.animation.current_frame == self.animation.frame_count - 1


class Player(AnimatedCharacter):
    """The player: falls every tick and can flip gravity."""

    FALL_SPEED = 15

    def __init__(self, animation_paths: Iterable[str]) -> None:
        super().__init__(animation_paths)
        self.gravity_flipped = False
        self.flip_able = True

    def flip_gravity(self) -> None:
        self.gravity_flipped = not self.gravity_flipped
        self.set_frame(1 if self.gravity_flipped else 0)
        self.draw()

    def update(self) -> None:
        step = self.FALL_SPEED if self.gravity_flipped else -self.FALL_SPEED
        self.position += (0, step)

    def move(self, is_right: bool, speed: float = 15) -> None:
        self.position += (speed if is_right else -speed, 0)

    def touch_up_wall(self) -> bool:
        if self.position.y >= 452:
            self.position = (self.position.x, -377.5)
            return True
        return False

    def touch_down_wall(self) -> bool:
        if self.position.y <= -387.5:
            self.position = (self.position.x, 465)
            return True
        return False

    def touch_left_wall(self) -> bool:
        if self.position.x <= -610:
            self.position = (-self.position.x - 10, self.position.y)
            return True
        return False

    def touch_right_wall(self) -> bool:
        if self.position.x >= 610:
            self.position = (-self.position.x + 10, self.position.y)
            return True
        return False


class Trap(Character):
    """A spike that sends the player back to the last save point."""

    WIDTH = 49
    HEIGHT = 52

    def __init__(
        self,
        position: VecLike,
        is_reverse: bool = False,
        resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR,
    ) -> None:
        super().__init__(_image_path(resource_dir, "SpikeReverse" if is_reverse else "Spike"))
        self.is_reverse = is_reverse
        self.position = position

    def touches(self, point: VecLike) -> bool:
        return _overlaps(self.position, point, self.WIDTH, self.HEIGHT)

    def destroy(self) -> None:
        self.visible = False
        self.drawable = None


class SavePoint(Character):
    """A checkpoint the player respawns at."""

    WIDTH = 55
    HEIGHT = 61

    def __init__(
        self,
        position: VecLike,
        is_reverse: bool = False,
        resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR,
    ) -> None:
        super().__init__(
            _image_path(resource_dir, "SavePointReverse" if is_reverse else "SavePoint")
        )
        self.is_reverse = is_reverse
        self.position = position

    def touches(self, point: VecLike) -> bool:
        return _overlaps(self.position, point, self.WIDTH, self.HEIGHT)

    def destroy(self) -> None:
        self.visible = False
        self.drawable = None


class Enemy(Character):
    """An enemy patrolling back and forth between two points."""

    def __init__(
        self,
        image_path: str,
        point1: VecLike,
        point2: VecLike,
        size: VecLike,
        is_increment: bool,
        speed: float = 15.0,
        is_reverse_able: bool = False,
        entry_direction: int = 0,
    ) -> None:
        super().__init__(image_path)
        self.point1 = Vec2.of(point1)
        self.point2 = Vec2.of(point2)
        self.size = Vec2.of(size)
        self.is_increment = is_increment
        self.speed = speed
        self.is_reverse_able = is_reverse_able
        self.position = self.point1 if is_increment else self.point2
        if entry_direction == 3 and is_reverse_able:
            self.position = self.point2
            self.is_increment = not self.is_increment

    def touches(self, point: VecLike) -> bool:
        return _overlaps(self.position, point, self.size.x, self.size.y)

    def update(self) -> None:
        target = self.point2 if self.is_increment else self.point1
        pos = self.position + (target - self.position).normalized() * self.speed
        end = self.point2 if self.is_increment else self.point1
        if pos.distance(end) < self.speed:
            self.is_increment = not self.is_increment
        self.position = pos

    def destroy(self) -> None:
        self.visible = False
        self.drawable = None


def is_inside_the_square(character: GameObject) -> bool:
    """Whether a character stands inside the target square."""
    p = character.position
    return -90 < p.y < 93 and 50 < p.x < 233


def are_all_doors_open(doors: Iterable[Character], open_image_path: str) -> bool:
    """Whether every door shows the open-door image."""
    return all(door.image_path == open_image_path for door in doors)