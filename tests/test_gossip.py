import pytest

from gossipsim.gossip import Gossip, GossipManager, GossipType
from gossipsim.npc import NPC


def test_default_gossip():
    gossip = Gossip()
    assert (gossip.type, gossip.about, gossip.id) == (GossipType.NEUTRAL, "NULL", 0)


def test_equality_ignores_id():
    assert Gossip(GossipType.NEUTRAL, "Bravo", 1) == Gossip(GossipType.NEUTRAL, "Bravo", 7)


def test_equality_checks_type_and_subject():
    base = Gossip(GossipType.NEUTRAL, "Bravo", 1)
    assert not base == Gossip(GossipType.NEGATIVE, "Bravo", 1)
    assert not base == Gossip(GossipType.NEUTRAL, "Echo", 1)


def test_gossip_is_unhashable():
    with pytest.raises(TypeError):
        hash(Gossip())


def test_first_gossip_gets_id_one():
    manager = GossipManager()
    assert manager.next_gossip_id() == 1
    gossip = manager.create_gossip(GossipType.NEUTRAL, "Bravo", NPC("Echo"))
    assert gossip.id == 1
    assert manager.next_gossip_id() == 2


def test_ids_increase_with_each_gossip():
    manager = GossipManager()
    ids = [manager.create_gossip(GossipType.NEGATIVE, "X", NPC("Y")).id for _ in range(3)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3
    assert manager.next_gossip_id() == ids[-1] + 1


def test_start_npc_has_heard_gossip():
    manager = GossipManager()
    echo = NPC("Echo")
    gossip = manager.create_gossip(GossipType.NEUTRAL, "Bravo", echo)
    heard = manager.npcs_heard_gossip(gossip.id)
    assert len(heard) == 1 and heard[0] is echo


def test_unknown_gossip_has_no_listeners():
    assert GossipManager().npcs_heard_gossip(0) == []


def test_returned_list_is_a_copy():
    manager = GossipManager()
    gossip = manager.create_gossip(GossipType.NEUTRAL, "Bravo", NPC("Echo"))
    manager.npcs_heard_gossip(gossip.id).clear()
    assert len(manager.npcs_heard_gossip(gossip.id)) == 1