import json

import pytest

from cosmosgraph.graph import Graph
from cosmosgraph.node_type import NodeType
from cosmosgraph.position import Position2D
from cosmosgraph.storage import Storage
from cosmosgraph.universe import Universe


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path / "data")


def make_universe(title="Plans"):
    graph = Graph()
    graph.create_node("Sun", NodeType.STAR, Position2D(3.0, 4.0))
    return Universe.from_graph(graph) if title is None else Universe("uid", title, graph)


def test_creates_data_directory(tmp_path):
    target = tmp_path / "nested" / "dir"
    store = Storage(target)
    assert target.is_dir()
    assert store.data_dir == target


def test_save_and_load_round_trip(storage):
    universe = make_universe()
    storage.save_universe(universe, "first")
    assert (storage.data_dir / "first.json").is_file()
    assert storage.load_universe("first") == universe


def test_saved_file_is_indented_json(storage):
    storage.save_universe(make_universe(), "pretty")
    text = (storage.data_dir / "pretty.json").read_text(encoding="utf-8")
    assert "\n  " in text
    assert json.loads(text)["title"] == "Plans"


def test_load_missing_returns_none(storage):
    assert storage.load_universe("nothing") is None


def test_load_corrupt_returns_none(storage):
    (storage.data_dir / "bad.json").write_text("{not json", encoding="utf-8")
    assert storage.load_universe("bad") is None


def test_universes_skips_other_and_broken_files(storage):
    first = make_universe("One")
    second = make_universe("Two")
    storage.save_universe(first, "a")
    storage.save_universe(second, "b")
    (storage.data_dir / "notes.txt").write_text("hello", encoding="utf-8")
    (storage.data_dir / "broken.json").write_text("[]", encoding="utf-8")
    titles = sorted(u.title for u in storage.universes())
    assert titles == ["One", "Two"]


def test_delete_universe(storage):
    storage.save_universe(make_universe(), "gone")
    assert storage.delete_universe("gone") is True
    assert storage.load_universe("gone") is None
    assert storage.delete_universe("gone") is False