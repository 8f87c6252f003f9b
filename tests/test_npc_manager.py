import pytest

from gossipsim.npc import NPC
from gossipsim.npc_manager import NPCManager
from gossipsim.vec2 import Vec2

XML = """<?xml version="1.0"?>
<listOfNPC>
  <NPC name="Alpha">
    <relationships>
      <relation npc="Bravo" value="30"/>
      <relation npc="Charlie" value="-250"/>
    </relationships>
  </NPC>
  <NPC name="Bravo"/>
  <NPC name="Charlie"/>
  <NPC name="Delta">
    <relationships>
      <relation npc="Alpha" value="junk"/>
    </relationships>
  </NPC>
</listOfNPC>
"""


@pytest.fixture
def manager():
    return NPCManager.from_xml_string(XML)


def test_loads_npcs_in_order(manager):
    assert [npc.name for npc in manager] == ["Alpha", "Bravo", "Charlie", "Delta"]
    assert len(manager) == 4


def test_relations_are_parsed_and_clamped(manager):
    alpha = manager.find_npc("Alpha")
    assert dict(alpha.relations) == {"Bravo": 30, "Charlie": -100}


def test_unparsable_value_becomes_zero(manager):
    assert dict(manager.find_npc("Delta").relations) == {"Alpha": 0}


def test_first_npc_at_grid_origin(manager):
    first = next(iter(manager))
    assert first.position == Vec2(-1.0, 0.75)
    assert first.depth == 0


def test_grid_wraps_after_three(manager):
    npcs = list(manager)
    assert npcs[3].position.x == npcs[0].position.x
    assert npcs[3].position.y < npcs[0].position.y
    assert npcs[1].position.y == npcs[0].position.y
    assert npcs[0].depth < npcs[1].depth < npcs[2].depth < npcs[3].depth


def test_find_npc_missing_returns_none(manager):
    assert manager.find_npc("Nobody") is None


def test_wrong_root_gives_empty_manager():
    assert len(NPCManager.from_xml_string("<other><NPC name='A'/></other>")) == 0


def test_invalid_xml_raises():
    with pytest.raises(ValueError):
        NPCManager.from_xml_string("<listOfNPC>")


def test_from_file(tmp_path):
    path = tmp_path / "NPC_Data.xml"
    path.write_text(XML, encoding="utf-8")
    assert [npc.name for npc in NPCManager.from_file(path)][:2] == ["Alpha", "Bravo"]


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        NPCManager.from_file(tmp_path / "missing.xml")


def test_constructed_from_npcs():
    a = NPC("A")
    manager = NPCManager([a, NPC("A")])
    assert manager.find_npc("A") is a