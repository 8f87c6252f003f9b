"""Gossip records and the manager that tracks who has heard them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .npc import NPC

__all__ = ["GossipType", "Gossip", "GossipManager"]


class GossipType(enum.Enum):
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(eq=False)
class Gossip:
    """A piece of gossip about an NPC."""

    type: GossipType = GossipType.NEUTRAL
    about: str = "NULL"
    id: int = 0

    def __eq__(self, other: object) -> bool:
        """Two gossips are equal when they are of the same type about the same NPC."""
        if not isinstance(other, Gossip):
            return NotImplemented
        return self.type == other.type and self.about == other.about

    __hash__ = None  # type: ignore[assignment]


class GossipManager:
    """Creates gossip and records which NPCs have heard each one."""

    def __init__(self) -> None:
        self._gossips: list[Gossip] = []
        self._heard: dict[int, list[NPC]] = {}

    def create_gossip(self, gossip_type: GossipType, about: str, start_npc: NPC) -> Gossip:
        """Start new gossip with ``start_npc`` and return it; ids begin at 1."""
        gossip = Gossip(gossip_type, about, len(self._gossips) + 1)
        self._gossips.append(gossip)
        self._heard[gossip.id] = [start_npc]
        return gossip

    def npcs_heard_gossip(self, gossip_id: int) -> list[NPC]:
        """Return the NPCs that have heard the gossip; empty for unknown ids."""
        return list(self._heard.get(gossip_id, ()))

    def next_gossip_id(self) -> int:
        return len(self._gossips) + 1