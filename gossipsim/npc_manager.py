"""Loading NPCs from XML and looking them up by name."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Optional, Union

from .npc import NPC
from .vec2 import Vec2

__all__ = ["NPCManager"]

log = logging.getLogger(__name__)

_ROOT_TAG = "listOfNPC"
_NPCS_PER_ROW = 3
_ORIGIN = Vec2(-1.0, 0.75)
_DEPTH_STEP = 0.01
_NPC_SIZE = 0.25
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _as_int(text: Optional[str]) -> int:
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class NPCManager:
    """Holds every NPC in the simulation."""

    def __init__(self, npcs: Iterable[NPC] = ()) -> None:
        self._npcs = list(npcs)

    @classmethod
    def from_xml_string(cls, text: Union[str, bytes]) -> NPCManager:
        """Build a manager from an XML document listing NPCs and their relations.

        NPCs are laid out on a grid three wide, starting from the top left.
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise ValueError(f"invalid NPC data: {exc}") from exc

        npcs = []
        if root.tag == _ROOT_TAG:
            for index, node in enumerate(root):
                column, row = index % _NPCS_PER_ROW, index // _NPCS_PER_ROW
                npc = NPC(
                    node.get("name", ""),
                    position=Vec2(column + _ORIGIN.x, -row + _ORIGIN.y),
                    depth=index * _DEPTH_STEP,
                    size=_NPC_SIZE,
                )
                relationships = node.find("relationships")
                if relationships is not None:
                    for relation in relationships:
                        npc.add_relation(relation.get("npc", ""), _as_int(relation.get("value")))
                npcs.append(npc)
        return cls(npcs)

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> NPCManager:
        """Build a manager from an XML file on disk."""
        with open(path, "rb") as handle:
            return cls.from_xml_string(handle.read())

    def find_npc(self, name: str) -> Optional[NPC]:
        """Return the first NPC called ``name``, or None when there is none."""
        for npc in self._npcs:
            if npc.name == name:
                return npc
        log.warning("NPC (%s) not found", name)
        return None

    def __iter__(self) -> Iterator[NPC]:
        return iter(self._npcs)

    def __len__(self) -> int:
        return len(self._npcs)