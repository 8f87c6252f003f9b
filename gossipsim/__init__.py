"""Simulation of NPCs, their relationships, and gossip about them."""

__version__ = "0.1.0"
__all__ = ["gossip", "npc", "npc_manager", "simulation", "vec2"]