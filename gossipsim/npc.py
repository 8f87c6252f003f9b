"""Non-player characters and their relationships with one another."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .vec2 import Vec2, angle_of

__all__ = [
    "Colour",
    "RelationLine",
    "NPC",
    "clamp_relation_value",
    "DEFAULT_COLOUR",
    "HIGHLIGHT_COLOUR",
    "NEGATIVE_RELATION_COLOUR",
    "POSITIVE_RELATION_COLOUR",
    "RELATION_LINE_WIDTH",
    "RELATION_MIN",
    "RELATION_MAX",
]

RELATION_MIN = -100
RELATION_MAX = 100


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


DEFAULT_COLOUR = Colour(1.0, 1.0, 1.0, 1.0)
HIGHLIGHT_COLOUR = Colour(0.8, 0.8, 0.8, 0.8)
NEGATIVE_RELATION_COLOUR = Colour(0.8, 0.2, 0.2, 1.0)
POSITIVE_RELATION_COLOUR = Colour(0.2, 0.8, 0.2, 1.0)
RELATION_LINE_WIDTH = 0.05
RELATION_LINE_DEPTH = -0.1


def clamp_relation_value(value: int) -> int:
    """Clamp a relation value into the range -100..100."""
    return max(RELATION_MIN, min(RELATION_MAX, value))


def _relation_colour(value: int) -> Colour:
    return POSITIVE_RELATION_COLOUR if value >= 0 else NEGATIVE_RELATION_COLOUR


@dataclass(frozen=True)
class RelationLine:
    """A rotated bar linking two related NPCs."""

    centre: Vec2
    length: float
    width: float
    angle: float
    colour: Colour
    depth: float = RELATION_LINE_DEPTH


Lookup = Callable[[str], Optional["NPC"]]


class NPC:
    """A character with a position, a colour and relations to other NPCs."""

    def __init__(
        self,
        name: str = "NULL",
        position: Vec2 = Vec2(),
        depth: float = 0.0,
        size: float = 0.25,
        colour: Colour = DEFAULT_COLOUR,
    ) -> None:
        self.name = name
        self.position = position
        self.depth = depth
        self.size = size
        self.colour = colour
        self.ticks = 0
        self._relations: dict[str, int] = {}

    def __repr__(self) -> str:
        return f"NPC(name={self.name!r}, position={self.position!r})"

    def __str__(self) -> str:
        return self.name

    @property
    def relations(self) -> Mapping[str, int]:
        """A read-only view of this NPC's relations."""
        return MappingProxyType(self._relations)

    def tick(self) -> None:
        """Advance this NPC by one simulation step."""
        self.ticks += 1

    def add_relation(self, npc: str, value: int) -> None:
        """Add a relation to ``npc`` unless one already exists."""
        if npc not in self._relations:
            self._relations[npc] = clamp_relation_value(value)

    def update_relation(self, npc: str, value: int) -> None:
        """Change the value of an existing relation; unknown NPCs are ignored."""
        if npc in self._relations:
            self._relations[npc] = clamp_relation_value(value)

    def has_relation(self, npc: str) -> bool:
        return npc in self._relations

    def check_relation(self, npc: str) -> int:
        """Return the relation value to ``npc``, or 0 when there is none."""
        return self._relations.get(npc, 0)

    def remove_relation(self, npc: str) -> None:
        self._relations.pop(npc, None)

    def clear_relations(self) -> None:
        self._relations.clear()

    def contains_point(self, point: Vec2) -> bool:
        """Whether ``point`` lies within this NPC's diamond-shaped bounds."""
        dif = self.position - point
        return abs(dif.x) + abs(dif.y) <= self.size

    def set_relation_colours(self, lookup: Lookup, revert_to_default: bool = False) -> None:
        """Colour this NPC and its relations to show them, or restore defaults."""
        self.colour = DEFAULT_COLOUR if revert_to_default else HIGHLIGHT_COLOUR
        for name, value in self._relations.items():
            other = lookup(name)
            if other is None:
                continue
            other.colour = DEFAULT_COLOUR if revert_to_default else _relation_colour(value)

    def relation_lines(self, lookup: Lookup) -> list[RelationLine]:
        """Return the lines linking this NPC to every related NPC that exists."""
        lines = []
        for name, value in self._relations.items():
            other = lookup(name)
            if other is None:
                continue
            difference = self.position - other.position
            lines.append(
                RelationLine(
                    centre=(self.position + other.position) / 2,
                    length=abs(difference.x) + abs(difference.y),
                    width=RELATION_LINE_WIDTH,
                    angle=angle_of(difference),
                    colour=_relation_colour(value),
                )
            )
        return lines

    def describe(self) -> str:
        """Return a text summary of this NPC and its relations."""
        lines = [f"NPC Name: {self.name}", "Relations"]
        lines.extend(f"NPC: {name}, Value: {value}" for name, value in self._relations.items())
        return "\n".join(lines)