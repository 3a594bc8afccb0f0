import pytest

from cosmosgraph.connection_menu import ConnectionAction, ConnectionMenu
from cosmosgraph.relation import RelationType


def test_closed_menu_returns_nothing():
    menu = ConnectionMenu()
    assert menu.choose(RelationType.ORBIT) is None


def test_show_for_nodes_opens_menu():
    menu = ConnectionMenu()
    menu.show_for_nodes("a", "b")
    assert menu.show_menu is True
    assert (menu.source_id, menu.target_id) == ("a", "b")


@pytest.mark.parametrize(
    "relation_type",
    [RelationType.ORBIT, RelationType.EVOLUTION, RelationType.REFERENCE],
)
def test_choose_returns_action_and_closes(relation_type):
    menu = ConnectionMenu()
    menu.show_for_nodes("a", "b")
    action = menu.choose(relation_type)
    assert action == ConnectionAction("a", "b", relation_type)
    assert menu.show_menu is False
    assert menu.source_id is None
    assert menu.target_id is None


def test_second_choice_after_close_returns_nothing():
    menu = ConnectionMenu()
    menu.show_for_nodes("a", "b")
    menu.choose(RelationType.ORBIT)
    assert menu.choose(RelationType.ORBIT) is None


def test_cancel_resets():
    menu = ConnectionMenu()
    menu.show_for_nodes("a", "b")
    menu.cancel()
    assert menu.show_menu is False
    assert menu.choose(RelationType.REFERENCE) is None


def test_hierarchy_is_not_offered():
    menu = ConnectionMenu()
    menu.show_for_nodes("a", "b")
    with pytest.raises(ValueError):
        menu.choose(RelationType.HIERARCHY)
    assert menu.show_menu is True