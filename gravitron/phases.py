"""Phase backgrounds, task captions and the manager that steps through them."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .entities import GameObject
from .levels import DEFAULT_RESOURCE_DIR

log = logging.getLogger(__name__)

PHASE_TASKS = (
    "Replace the image of m_giraffe with giraffe.png in Resources!",
    "Make the giraffe move into the red area using the keyboard!",
    "Make the chest disappear when the giraffe touches it!",
    "Write a program to give your bee friend an animation!",
    "Write a program to open the door when your character touches it!",
    "Design a program to countdown, stop animation after OK display",
)
VALIDATION = "Press Enter to validate"
WHITE = (255, 255, 255)
LAST_PHASE = 7


@dataclass
class _Text:
    font_path: str
    size: int
    text: str
    color: tuple[int, int, int]


def _caption(task: str) -> str:
    return f"{task}\n{VALIDATION}"


class BackgroundImage(GameObject):
    """Full-screen background showing the picture of the current phase."""

    def __init__(self, resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
        self.resource_dir = os.fspath(resource_dir)
        super().__init__(self._path(0), -10)

    def _path(self, phase: int) -> str:
        return f"{self.resource_dir}/Image/Background/phase{phase}.png"

    @property
    def image_path(self) -> str:
        return self.drawable  # type: ignore[return-value]

    def change_stage(self, phase: int) -> None:
        self.drawable = self._path(phase)


class TaskText(GameObject):
    """Caption describing the current task."""

    def __init__(self, resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
        font = f"{os.fspath(resource_dir)}/Font/Inkfree.ttf"
        super().__init__(_Text(font, 20, _caption(PHASE_TASKS[0]), WHITE), 100, position=(0.0, -270.0))

    @property
    def text(self) -> str:
        return self.drawable.text  # type: ignore[union-attr]

    def next_phase(self, phase: int) -> None:
        if not 0 <= phase < len(PHASE_TASKS):
            raise IndexError(f"no task for phase {phase}")
        self.drawable.text = _caption(PHASE_TASKS[phase])  # type: ignore[union-attr]


class PhaseResourceManager:
    """Steps the background and task caption through the phases."""

    def __init__(self, resource_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
        self.task_text = TaskText(resource_dir)
        self.background = BackgroundImage(resource_dir)
        self.phase = 1

    def children(self) -> list[GameObject]:
        return [self.task_text, self.background]

    def next_phase(self) -> None:
        if self.phase == LAST_PHASE:
            return
        log.debug("Passed! Next phase: %d", self.phase)
        self.background.change_stage(self.phase)
        if self.phase < len(PHASE_TASKS):
            self.task_text.next_phase(self.phase)
        self.phase += 1