# routefinder

Shortest paths and shortest circuits on small directed graphs. Each vertex is
named by a single character.

- **Bellman-Ford** (`routefinder.bellman`):
  - `bellman_ford_step` runs one relaxation round and returns new
    `(values, previous)` lists.
  - `bellman_ford_path` returns the shortest path from one vertex to another as
    a space-separated string of vertex names.
- **Travelling salesman** (`routefinder.tsm`): `traveling` finds a circuit that
  starts and ends at a given vertex and passes through every vertex.
  - Graphs of up to 20 vertices are solved exactly by Held-Karp dynamic
    programming (`held_karp`).
  - Larger graphs use an ant colony heuristic (`ant_colony`), which gives an
    approximate answer. It runs 200 rounds with one ant per vertex. You can
    pass a `random.Random` as `rng` to make the result reproducible.

## Installation

```
pip install .
```

## Edges

Each edge is a triple `(source, target, weight)`:

- The source and target are single-character strings with a code below 256.
- A weight of `0` means there is no edge.
- If the same pair of vertices appears more than once, the later edge wins.

```python
from routefinder.bellman import bellman_ford_path
from routefinder.tsm import traveling

edges = [
    ("A", "B", 4), ("A", "C", 1),
    ("C", "B", 2), ("B", "C", 5),
    ("B", "A", 3), ("C", "A", 7),
]

print(bellman_ford_path(edges, "A", "B"))   # A C B
print(traveling(edges, "A"))                # A C B A
```

### Vertex names in the graph

`routefinder.graph.Graph.from_edges` builds the adjacency matrix that the
algorithms work on. Vertices are ordered by character code. `index_of` and
`name_of` map between vertex names and matrix positions.

### Return values and errors

- `bellman_ford_step`
  - In the value list, `-1` marks a vertex that has not been reached.
  - Raises `ValueError` if the value list or the predecessor list does not
    have one entry per vertex.
- `bellman_ford_path`
  - Returns `""` if the start or goal vertex is not in the graph.
  - Returns only the goal's name if the goal cannot be reached.
  - Raises `ValueError` if the predecessor chain loops, as it does around a
    negative cycle.
- `traveling` and `held_karp`
  - Return `""` when no circuit exists.
  - Raise `KeyError` if the start vertex is not in the graph.

## Command line

```
routefinder [--seed N] [--vertices N]
```

The command builds a random set of distinct printable vertex names, 5 to 25 of
them unless `--vertices` is given. `--vertices` accepts 1 to 94. It then fills
two random weight matrices with weights from 0 to 500 and a zero diagonal. It
picks a random start vertex and a random goal vertex. `--seed` makes the run
reproducible.

It prints both matrices, the vertex names, and the start and goal vertices.
It then prints:

1. the Bellman-Ford steps, alternating between the two matrices, until the
   predecessor array stops changing or 99 steps have run;
2. the shortest path from the start vertex to the goal vertex in the first
   matrix;
3. a circuit from the start vertex in the first matrix. It is exact for up to
   20 vertices and an ant colony approximation for more;
4. the processor time used.

## Limitations

- The command works only on the random graphs it generates. It does not read
  graphs from files.
- Nothing is saved between runs.