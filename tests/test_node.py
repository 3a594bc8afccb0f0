import json
import uuid
from datetime import datetime, timezone

import pytest

from cosmosgraph.node import Node, format_timestamp, parse_timestamp
from cosmosgraph.node_type import NodeType
from cosmosgraph.position import Position2D


def make_node():
    return Node("Idea", NodeType.STAR, Position2D(10.0, 20.0))


def test_new_node_defaults():
    node = make_node()
    assert node.description is None
    assert node.parent_id is None
    assert node.custom_color is None
    assert node.custom_size is None
    assert node.created_at == node.updated_at


def test_new_nodes_have_distinct_uuid_ids():
    ids = [make_node().id for _ in range(5)]
    assert len(set(ids)) == 5
    assert all(str(uuid.UUID(node_id)) == node_id for node_id in ids)


def test_set_description_touches_timestamp():
    node = make_node()
    created = node.created_at
    node.set_description("notes")
    assert node.description == "notes"
    assert node.updated_at >= created


def test_set_title():
    node = make_node()
    node.set_title("Renamed")
    assert node.title == "Renamed"
    assert node.updated_at >= node.created_at


def test_with_parent_returns_same_node():
    node = make_node()
    result = node.with_parent("parent-id")
    assert result is node
    assert node.parent_id == "parent-id"


def test_set_and_get_color():
    node = make_node()
    node.set_color((12, 34, 56, 78))
    assert node.get_color() == (12, 34, 56, 78)


def test_get_color_absent_by_default():
    assert make_node().get_color() is None


@pytest.mark.parametrize("color", [(0, 0, 0, 256), (1, 2, 3), (-1, 0, 0, 0), (1.5, 0, 0, 0)])
def test_invalid_color_rejected(color):
    node = make_node()
    with pytest.raises(ValueError):
        node.set_color(color)
    assert node.get_color() is None


def test_set_size():
    node = make_node()
    node.set_size(12)
    assert node.custom_size == 12.0


def test_dict_round_trip_through_json():
    node = make_node().with_parent("p")
    node.set_description("text")
    node.set_color((1, 2, 3, 4))
    node.set_size(9.5)
    restored = Node.from_dict(json.loads(json.dumps(node.to_dict())))
    assert restored == node


def test_serialized_color_key_and_type():
    node = make_node()
    node.set_color((5, 6, 7, 8))
    data = node.to_dict()
    assert data["custom_color_rgba"] == [5, 6, 7, 8]
    assert data["node_type"] == "Star"


def test_optional_fields_may_be_missing():
    data = make_node().to_dict()
    for key in ("description", "parent_id", "custom_color_rgba", "custom_size"):
        del data[key]
    restored = Node.from_dict(data)
    assert restored.description is None
    assert restored.custom_size is None


def test_timestamp_uses_z_suffix():
    assert format_timestamp(make_node().created_at).endswith("Z")


def test_parse_nanosecond_timestamp():
    parsed = parse_timestamp("2024-01-02T03:04:05.123456789Z")
    assert parsed == datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)


def test_timestamp_round_trip():
    moment = datetime.now(timezone.utc)
    assert parse_timestamp(format_timestamp(moment)) == moment


def test_bad_timestamp_rejected():
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")