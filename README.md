# cosmosgraph

cosmosgraph models a mind map as a small universe. Ideas are nodes of four
kinds (stars, planets, satellites and asteroids). Relations of four kinds join
them: orbit, evolution, reference and hierarchy. Universes are saved as JSON
files.

The package holds the model and the state behind an editor. That covers
selecting and dragging nodes, the node creator and editor panels, the
connection menu, particle effects and the start menu.

## What it does not do

cosmosgraph has no window, canvas or drawing code, and it installs no command.
It describes what should be shown and what the user asked for. Drawing that
and feeding it pointer input is left to the program that uses it.

## Installation

```
pip install cosmosgraph
```

For running the tests:

```
pip install "cosmosgraph[test]"
pytest
```

## The model

```python
from cosmosgraph.graph import Graph
from cosmosgraph.node_type import NodeType
from cosmosgraph.position import Position2D
from cosmosgraph.relation import RelationType

graph = Graph()
sun = graph.create_node("Project", NodeType.STAR, Position2D(400.0, 300.0))

# A child is placed 100 units right and down from its parent and joined to it
# by a hierarchy relation.
plan = graph.create_child_node("Plan", NodeType.PLANET, sun)

# An evolution keeps the base node's type. Without a position it is placed
# 50 units right and down from the base node.
revised = graph.evolve_node(plan, "Plan, revised", None)

graph.add_relation(sun, revised, RelationType.REFERENCE)

for node in graph.nodes():
    print(node.title, node.node_type.display_name())
```

- `Graph.get_node` returns `None` for an unknown id.
- `create_child_node` and `evolve_node` raise `KeyError` when the parent or base node does not exist.
- `add_relation` returns the new `Relation`.

`NodeType.valid_children()` gives the types a node may have beneath it:

- A star holds planets.
- A planet holds satellites.
- A satellite holds asteroids.
- An asteroid holds nothing.

`Relation.is_valid_hierarchy(source_type, target_type)` accepts only star to planet and planet to satellite.

A `Node` has these fields:

- a title
- an optional description
- an optional parent id
- an optional colour, as an `(r, g, b, a)` tuple of integers from 0 to 255
- an optional size

Each setter moves `updated_at` forward. The setters are `set_title`, `set_description`, `set_color` and `set_size`. `set_color` raises `ValueError` for a malformed colour.

Every model class has `to_dict()` and `from_dict()` for JSON-ready dictionaries. These classes are `Position2D`, `Node`, `Relation`, `Graph` and `Universe`.

## Saving universes

```python
from cosmosgraph.storage import Storage
from cosmosgraph.universe import Universe

storage = Storage()                 # the "cosmos" folder in your user data directory
universe = Universe.from_graph(graph)   # new id, title "New Universe"
storage.save_universe(universe, universe.id)

loaded = storage.load_universe(universe.id)
for saved in storage.universes():
    print(saved.title)

storage.delete_universe(universe.id)
```

Pass a directory to `Storage(...)` to keep the files somewhere else.

Each universe is one pretty-printed `<id>.json` file.

- `load_universe` returns `None` when the file is missing or cannot be read.
- `universes()` yields every readable file, in file-name order.
- `delete_universe` returns whether a file was removed.

## Editor state

- `cosmosgraph.selection.NodeSelector`
  - Keeps track of the selected node.
  - `selected(graph)` looks that node up in a graph.
- `cosmosgraph.drag.DragHandler.handle(event, graph)`
  - Turns a `PointerEvent` into a `DragAction`, or `None`.
  - The actions are:
    - selecting and deselecting
    - panning the view
    - moving a node
    - drawing a connection from a node
    - asking for a child node where that drag ends
    - double-click requests
  - `node_contains` tests whether a point lies within 20 units of a node.
- `cosmosgraph.node_creator.NodeCreator`
  - Gathers a title, a description and a position after `open(...)`.
  - Produces a `CreateRoot`, `CreateChild` or `CreateEvolution` request.
  - An evolution request is placed 50 units below the position.
- `cosmosgraph.node_editor.NodeEditor`
  - Produces `EditorAction`s for the title, description, colour and size.
  - The size is clamped to 5–50.
  - `apply(node, action)` carries an action out on a node.
  - `default_color` and `default_size` give the look of each node type.
- `cosmosgraph.connection_menu.ConnectionMenu`
  - Turns a choice of orbit, evolution or reference for two nodes into a `ConnectionAction`.
- `cosmosgraph.particle.Particle`
  - A spark that speeds up as it fades. It moves with `update()`.
  - `trail_segments()` gives its trail as segments with a width and a colour.
  - `hsv_to_rgb` and `random_bright_color` are the colour helpers.
- `cosmosgraph.app.CosmosApp`
  - Moves between the start menu, the cosmos view and the time log in response to `MenuAction`s.
  - "Black Hole" raises `SystemExit`.