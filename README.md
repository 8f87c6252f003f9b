# gossipsim

A small simulation of non-player characters (NPCs), the relationships
between them, and gossip about them.

## NPC data

NPCs are read from an XML document whose root element is `listOfNPC`.
Each child element is one NPC. It has a `name` attribute and may hold a
`relationships` element with one child per relation. Each relation carries
`npc` and `value` attributes. Relation values are clamped to the range
-100 to 100. A second relation to the same NPC is ignored.

```xml
<listOfNPC>
  <NPC name="Alpha">
    <relationships>
      <relation npc="Bravo" value="40"/>
      <relation npc="Echo" value="-25"/>
    </relationships>
  </NPC>
  <NPC name="Bravo"/>
  <NPC name="Echo"/>
</listOfNPC>
```

NPCs are placed on a grid three wide. The first one is at (-1.0, 0.75),
each later one is one unit to the right, and each new row is one unit
lower. Malformed XML raises `ValueError`.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Command line

```
gossipsim [NPC_FILE] [--hover X Y] [--select ID]
```

- `NPC_FILE` is the XML file to load. It defaults to `NPC_Data.xml`.
- `--hover X Y` sets the mouse position in world coordinates for the frame.
- `--select ID` picks the gossip to highlight. `0`, the default, means none.

The command loads the NPCs and starts one piece of neutral gossip about
`Bravo`, started by the NPC `Echo`. The data must contain an NPC called
`Echo`. The command then runs a single frame and prints two things:

- the details of the hovered NPC, or `No NPC Hovered`;
- the gossip selector labels, with the selected one marked `*`.

It exits with status 1 in these cases:

- the file cannot be read or parsed;
- there is no `Echo`;
- the selected gossip does not exist.

## Library use

```python
from gossipsim.npc_manager import NPCManager
from gossipsim.gossip import GossipManager, GossipType

npcs = NPCManager.from_file("NPC_Data.xml")
alpha = npcs.find_npc("Alpha")          # None (and a logged warning) if absent
print(alpha.check_relation("Bravo"))    # 0 when there is no relation

gossip = GossipManager()
rumour = gossip.create_gossip(GossipType.NEUTRAL, "Bravo", alpha)
print(rumour.id, [npc.name for npc in gossip.npcs_heard_gossip(rumour.id)])
```

- `gossipsim.vec2`: the `Vec2` vector type and the helpers `dot_product`,
  `magnitude` and `angle_of`.
- `gossipsim.npc`: the `NPC` class and its relation methods:
  - `add_relation`, `update_relation`, `has_relation`, `check_relation`,
    `remove_relation` and `clear_relations`;
  - `contains_point`, a diamond-shaped hit test;
  - `set_relation_colours`, `relation_lines` and `describe`.

  The module also has `Colour`, `RelationLine` and `clamp_relation_value`.
- `gossipsim.npc_manager`: `NPCManager`, built from a list of NPCs, with
  `from_xml_string` or with `from_file`. It is iterable and has a length.
- `gossipsim.gossip`: `GossipType`, `Gossip` and `GossipManager`. Two
  gossips are equal when they have the same type and subject. Ids start at 1.
- `gossipsim.simulation`: `Simulation` ties the two managers together.
  - `attach` seeds the gossip started by `Echo`.
  - `update(mouse_position, mouse_pressed)` runs one frame and returns the
    hovered NPC, if there is one. It highlights that NPC's relations and
    colours the NPCs that have heard the selected gossip. While the button
    is pressed it moves the hovered NPC to the mouse.
  - `gossip_labels`, `select_gossip` and `details_text` supply the text a
    user interface would show.

## What it does not do

There is no window, drawing or mouse input. Colours, positions and
relation lines are computed as data for a caller to display. Gossip is
recorded only with the NPC that starts it. Nothing in the package passes
it on to other NPCs.