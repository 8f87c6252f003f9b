"""The interactive gossip simulation and its command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .gossip import GossipManager, GossipType
from .npc import DEFAULT_COLOUR, NPC, Colour
from .npc_manager import NPCManager
from .vec2 import Vec2

__all__ = ["Simulation", "main", "GOSSIP_COLOUR"]

GOSSIP_COLOUR = Colour(0.6, 0.0, 0.7, 1.0)
_NO_NPC_HOVERED = "No NPC Hovered"


class Simulation:
    """Tracks the hovered NPC, the selected gossip, and the colours they imply."""

    def __init__(self, npc_manager: NPCManager, gossip_manager: Optional[GossipManager] = None) -> None:
        self.npc_manager = npc_manager
        self.gossip_manager = gossip_manager if gossip_manager is not None else GossipManager()
        self.selected_gossip = 0
        self.hovered_npc: Optional[NPC] = None
        self.mouse_in_bounds = False

    def attach(self) -> None:
        """Seed the simulation with gossip about Bravo, started by Echo."""
        echo = self.npc_manager.find_npc("Echo")
        if echo is None:
            raise LookupError("NPC 'Echo' is needed to start the gossip")
        self.gossip_manager.create_gossip(GossipType.NEUTRAL, "Bravo", echo)

    def update(self, mouse_position: Vec2, mouse_pressed: bool = False) -> Optional[NPC]:
        """Run one frame with the mouse at ``mouse_position`` in world space.

        Returns the NPC under the mouse, if any.
        """
        lookup = self.npc_manager.find_npc
        self.mouse_in_bounds = False

        for npc in self.npc_manager:
            npc.tick()
            if self.mouse_in_bounds:
                continue
            if npc.contains_point(mouse_position):
                if self.hovered_npc is not None and self.hovered_npc is not npc:
                    self.hovered_npc.set_relation_colours(lookup, True)
                self.mouse_in_bounds = True
                self.hovered_npc = npc

        if self.mouse_in_bounds:
            self.hovered_npc.set_relation_colours(lookup)
        elif self.hovered_npc is not None:
            self.hovered_npc.set_relation_colours(lookup, True)
            self.hovered_npc = None

        if self.selected_gossip != 0:
            for npc in self.gossip_manager.npcs_heard_gossip(self.selected_gossip):
                npc.colour = GOSSIP_COLOUR

        if mouse_pressed and self.mouse_in_bounds:
            self.hovered_npc.position = mouse_position

        return self.hovered_npc if self.mouse_in_bounds else None

    def gossip_labels(self) -> list[str]:
        """Labels for the gossip selector; index 0 means no gossip."""
        return [
            "None" if index == 0 else f"Gossip: {index}"
            for index in range(self.gossip_manager.next_gossip_id())
        ]

    def select_gossip(self, gossip_id: int) -> None:
        """Select gossip to highlight, restoring colours of the previous selection."""
        if not 0 <= gossip_id < self.gossip_manager.next_gossip_id():
            raise ValueError(f"no gossip with id {gossip_id}")
        if gossip_id == self.selected_gossip:
            return
        for npc in self.gossip_manager.npcs_heard_gossip(self.selected_gossip):
            npc.colour = DEFAULT_COLOUR
        self.selected_gossip = gossip_id

    def details_text(self) -> str:
        """Details of the hovered NPC, or a notice that none is hovered."""
        if self.mouse_in_bounds and self.hovered_npc is not None:
            return self.hovered_npc.describe()
        return _NO_NPC_HOVERED


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gossipsim", description="Run one frame of the gossip simulation.")
    parser.add_argument("npc_file", nargs="?", default="NPC_Data.xml", help="XML file listing the NPCs")
    parser.add_argument("--hover", nargs=2, type=float, metavar=("X", "Y"), help="mouse position in world space")
    parser.add_argument("--select", type=int, default=0, metavar="ID", help="gossip to highlight")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    try:
        manager = NPCManager.from_file(args.npc_file)
    except (OSError, ValueError) as exc:
        print(f"gossipsim: cannot load {args.npc_file}: {exc}", file=sys.stderr)
        return 1

    simulation = Simulation(manager)
    try:
        simulation.attach()
        simulation.select_gossip(args.select)
    except (LookupError, ValueError) as exc:
        print(f"gossipsim: {exc}", file=sys.stderr)
        return 1

    mouse = Vec2(*args.hover) if args.hover else Vec2(float("inf"), float("inf"))
    simulation.update(mouse)

    print(simulation.details_text())
    print()
    for index, label in enumerate(simulation.gossip_labels()):
        marker = "*" if index == simulation.selected_gossip else " "
        print(f"{marker} {label}")
    return 0


if __name__ == "__main__":
    sys.exit(main())