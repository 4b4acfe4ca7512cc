"""Mutable directed graph keyed by string identifiers."""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Protocol, runtime_checkable

from ._algorithms import topological_sort
from ._node import _Node

logger = logging.getLogger(__name__)


@runtime_checkable
class Graph(Protocol):
    """Operations available on a directed graph.

    Edges are ordered per source node and are not deduplicated. Self-loops
    are never created by ``connect``. The graph is not safe for concurrent
    mutation; callers sharing one across threads must lock around it.
    """

    def get_node(self, node_id: str) -> tuple[list[str], bool]:
        """Return ``(connections, True)`` for a member, else ``([], False)``."""
        ...

    def nodes(self) -> list[str]:
        """Return all node identifiers in ascending order."""
        ...

    def put_node(self, node_id: str) -> None:
        """Create ``node_id``, or reset its outgoing edges if it already exists."""
        ...

    def put_nodes(self, *node_ids: str) -> None:
        """Call ``put_node`` for each identifier in order."""
        ...

    def remove_node(self, node_id: str) -> bool:
        """Remove a node and every edge pointing to it.

        Returns:
            True if the node was present, False otherwise.

        """
        ...

    def connect(self, src: str, dst: str) -> None:
        """Add an edge ``src -> dst``, creating missing endpoints.

        Does nothing when ``src == dst``.
        """
        ...

    def contains(self, node_id: str) -> bool:
        """Check if a node is in the graph."""
        ...

    def sort(self) -> list[str]:
        """Return nodes in topological order.

        Raises:
            GraphCycleError: If the graph contains a cycle.

        """
        ...

    def __str__(self) -> str: ...

    def __contains__(self, node_id: object) -> bool: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[str]: ...


def new_graph() -> Graph:
    """Create an empty graph."""
    return _MapGraph()


def graph_from_mapping(mapping: Mapping[str, Sequence[str] | None]) -> Graph:
    """Build a graph from a mapping of node to successors.

    Every key becomes a node; a ``None`` value is an empty successor list.
    Successors are copied and are not checked for membership.

    Example:
        >>> graph = graph_from_mapping({"a": ["b", "c"], "b": None, "c": ["b"]})
        >>> graph.sort()
        ['a', 'c', 'b']

    """
    graph = _MapGraph()
    for node_id, successors in mapping.items():
        graph._nodes[node_id] = _Node(node_id, list(successors or ()))
    logger.debug("Built graph with %d nodes", len(graph._nodes))
    return graph


class _MapGraph:
    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[str, _Node] = {}

    def get_node(self, node_id: str) -> tuple[list[str], bool]:
        node = self._nodes.get(node_id)
        if node is None:
            return [], False
        return node.connections, True

    def nodes(self) -> list[str]:
        return sorted(self._nodes)

    def put_node(self, node_id: str) -> None:
        if node_id in self._nodes:
            logger.debug("Resetting edges of node %s", node_id)
        self._nodes[node_id] = _Node(node_id)

    def put_nodes(self, *node_ids: str) -> None:
        for node_id in node_ids:
            self.put_node(node_id)

    def remove_node(self, node_id: str) -> bool:
        if node_id not in self._nodes:
            return False

        for node in self._nodes.values():
            node.disconnect(node_id)
        del self._nodes[node_id]
        logger.debug("Removed node %s", node_id)
        return True

    def connect(self, src: str, dst: str) -> None:
        if src == dst:
            return

        source = self._get_or_create(src)
        self._get_or_create(dst)
        source.connect(dst)

    def _get_or_create(self, node_id: str) -> _Node:
        # The only path that creates nodes implicitly.
        node = self._nodes.get(node_id)
        if node is None:
            node = self._nodes[node_id] = _Node(node_id)
        return node

    def contains(self, node_id: str) -> bool:
        return node_id in self._nodes

    def sort(self) -> list[str]:
        return topological_sort({node_id: node.connections for node_id, node in self._nodes.items()})

    def __str__(self) -> str:
        return "".join(
            f"{node_id} -> [{', '.join(self._nodes[node_id].connections)}]\n" for node_id in self.nodes()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.nodes()!r})"

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes())
