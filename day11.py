"""Reactor: count the paths data can take through a directed device graph."""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

START = "you"
SERVER = "svr"
OUT = "out"
CHECKPOINTS = ("dac", "fft")


class Network:
    def __init__(self, edges: Dict[str, List[str]]):
        self.edges = edges

    def count_paths(self, source: str, target: str) -> int:
        """Number of distinct paths from source to target (memoized DFS).

        The walk keeps its own stack of (device, remaining outputs), so
        arbitrarily long chains of devices are fine.
        """
        cache: Dict[str, int] = {target: 1}
        if source in cache:
            return cache[source]
        totals: Dict[str, int] = {source: 0}
        stack: List[Tuple[str, Iterator[str]]] = [
            (source, iter(self.edges.get(source, [])))
        ]
        while stack:
            node, outputs = stack[-1]
            for nxt in outputs:
                if nxt in cache:
                    totals[node] += cache[nxt]
                elif nxt in totals:
                    raise ValueError(f"cycle through {nxt!r}")
                else:
                    totals[nxt] = 0
                    stack.append((nxt, iter(self.edges.get(nxt, []))))
                    break
            else:
                stack.pop()
                cache[node] = totals.pop(node)
                if stack:
                    totals[stack[-1][0]] += cache[node]
        return cache[source]

    def count_paths_via(self, source: str, target: str, via: Tuple[str, str]) -> int:
        """Paths from source to target passing through both nodes of `via`."""
        first, second = via
        return self.count_paths(source, first) * self.count_paths(
            first, second
        ) * self.count_paths(second, target) + self.count_paths(
            source, second
        ) * self.count_paths(second, first) * self.count_paths(first, target)


def parse(text: str) -> Network:
    edges: Dict[str, List[str]] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        source, sep, targets = line.partition(":")
        if not sep:
            raise ValueError(f"did not find colon in {line!r}")
        source = source.strip()
        if source in edges:
            raise ValueError(f"device {source!r} listed twice")
        edges[source] = targets.split()
    return Network(edges)


def part_1(network: Network) -> int:
    return network.count_paths(START, OUT)


def part_2(network: Network) -> int:
    return network.count_paths_via(SERVER, OUT, CHECKPOINTS)


def solve(text: str) -> Tuple[int, int]:
    network = parse(text)
    return part_1(network), part_2(network)
