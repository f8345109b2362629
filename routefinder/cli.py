"""Command line demonstration on a randomly generated pair of complete graphs."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .bellman import UNSET, bellman_ford_path, bellman_ford_step
from .graph import Edge
from .tsm import EXACT_LIMIT, traveling

_MIN_VERTICES = 5
_MAX_VERTICES = 25
_MAX_WEIGHT = 500
_FIRST_NAME_CODE = 33
_LAST_NAME_CODE = 126
_MAX_STEPS = 100


@dataclass(frozen=True)
class _Instance:
    names: list[str]
    first: list[list[int]]
    second: list[list[int]]
    start: str
    end: str


def _vertex_count(text: str) -> int:
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    limit = _LAST_NAME_CODE - _FIRST_NAME_CODE + 1
    if not 1 <= count <= limit:
        raise argparse.ArgumentTypeError(f"vertex count must be between 1 and {limit}")
    return count


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="routefinder",
        description="Run Bellman-Ford and a travelling-salesman search on random graphs.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument(
        "--vertices",
        type=_vertex_count,
        default=None,
        help=f"number of vertices (default: random between {_MIN_VERTICES} and {_MAX_VERTICES})",
    )
    return parser.parse_args(argv)


def _random_matrix(size: int, rng: random.Random) -> list[list[int]]:
    return [
        [0 if i == j else rng.randint(0, _MAX_WEIGHT) for j in range(size)]
        for i in range(size)
    ]


def _random_instance(rng: random.Random, size: Optional[int]) -> _Instance:
    if size is None:
        size = rng.randint(_MIN_VERTICES, _MAX_VERTICES)
    codes = rng.sample(range(_FIRST_NAME_CODE, _LAST_NAME_CODE + 1), size)
    names = [chr(code) for code in codes]
    first = _random_matrix(size, rng)
    second = _random_matrix(size, rng)
    start = rng.choice(names)
    end = rng.choice(names)
    return _Instance(names, first, second, start, end)


def _edges(names: Sequence[str], matrix: Sequence[Sequence[int]]) -> list[Edge]:
    return [
        (source, target, weight)
        for source, row in zip(names, matrix)
        for target, weight in zip(names, row)
    ]


def _spaced(items) -> str:
    return "".join(f"{item} " for item in items)


def _print_matrix(title: str, matrix: Sequence[Sequence[int]]) -> None:
    print(f"{title}: ")
    for row in matrix:
        print(_spaced(row))
    print()


def _print_state(step: int, values: Sequence[int], previous: Sequence[int]) -> None:
    print(f"step {step}:")
    print(f"Value array: {_spaced(values)}")
    print(f"Previous array: {_spaced(previous)}")


def _run_bellman_ford(first: list[Edge], second: list[Edge], start: str, size: int) -> None:
    print("Function BF run:")
    values, previous = bellman_ford_step(first, start, [UNSET] * size, [UNSET] * size)
    _print_state(1, values, previous)
    checked = list(previous)
    for step in range(2, _MAX_STEPS):
        edges = first if step % 2 else second
        values, previous = bellman_ford_step(edges, start, values, previous)
        if previous == checked:
            break
        checked = list(previous)
        _print_state(step, values, previous)
    print("Finished the last step\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Generate random graphs, run the searches on them and print the results."""
    args = _parse_args(argv)
    began = time.process_time()
    rng = random.Random(args.seed)
    instance = _random_instance(rng, args.vertices)
    size = len(instance.names)

    print(f"Number of vertices: {size}")
    print()
    _print_matrix("G1_Matrix", instance.first)
    _print_matrix("G2_Matrix", instance.second)
    print("Vertices' names: ")
    print(_spaced(instance.names))
    print()
    print(f"Start vertex's name: {instance.start}")
    print(f"End vertex's name: {instance.end}")
    print()

    first = _edges(instance.names, instance.first)
    second = _edges(instance.names, instance.second)

    _run_bellman_ford(first, second, instance.start, size)

    print("Function BF_Path run:")
    path = bellman_ford_path(first, instance.start, instance.end)
    print(f"The shortest path from {instance.start} to {instance.end} is: {path}")

    print("\nFunction Traveling run:")
    route = traveling(first, instance.start, rng)
    if size <= EXACT_LIMIT:
        print(f"The shortest circuit using Bellman-Held-Karp algorithm is: {route}")
    else:
        print(
            "The approximate shortest circuit using Ant Colony Optimization algorithm is: "
            f"{route}"
        )
    print()
    print(f"Time running: {time.process_time() - began}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())