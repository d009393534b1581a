# events.py
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WizardChoice:
    class_id: int

    def render(self) -> str:
        return f"Number {self.class_id} is chosen!"


@dataclass(frozen=True)
class Moved:
    x: int
    y: int

    def render(self) -> str:
        return f"Moving to {self.x}-{self.y}"


@dataclass(frozen=True)
class PathBlocked:
    def render(self) -> str:
        return "Path is impassable!"


@dataclass(frozen=True)
class ObjectiveReached:
    number: int

    def render(self) -> str:
        return f"Objective {self.number} reached!"


Event = Union[WizardChoice, Moved, PathBlocked, ObjectiveReached]
