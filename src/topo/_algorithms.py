"""Graph algorithms for ordering nodes."""

import logging
from collections.abc import Mapping, Sequence

from ._errors import GraphCycleError

logger = logging.getLogger(__name__)

_RESOLVED = -1


def topological_sort(successors: Mapping[str, Sequence[str]]) -> list[str]:
    """Sort a graph topologically (sources before their successors).

    Given a graph represented as a mapping from nodes to their successors,
    return nodes in an order where every node appears before all of its
    successors. Ready nodes are kept on a stack, so the most recently
    released node is emitted next. Initial nodes are seeded in ascending order,
    which makes the result deterministic.

    Args:
        successors: Mapping from node to the nodes its edges point to.
            Repeated entries count as separate edges. Entries that are not
            keys of the mapping are ignored.

    Returns:
        List of nodes in topological order.

    Raises:
        GraphCycleError: If the graph contains a cycle. The error lists every
            node that could not be resolved.

    Example:
        >>> topological_sort({"a": ["b", "c"], "b": [], "c": ["b"]})
        ['a', 'c', 'b']

    """
    # Calculate in-degree for each node
    indegree: dict[str, int] = dict.fromkeys(successors, 0)
    for deps in successors.values():
        for dep in deps:
            if dep in indegree:
                indegree[dep] += 1

    stack: list[str] = []
    for node in sorted(indegree):
        if indegree[node] == 0:
            stack.append(node)
            indegree[node] = _RESOLVED

    order: list[str] = []
    while stack:
        node = stack.pop()
        for successor in successors[node]:
            if successor not in indegree:
                continue
            indegree[successor] -= 1
            if indegree[successor] == 0:
                stack.append(successor)
                indegree[successor] = _RESOLVED
        order.append(node)

    if len(order) != len(indegree):
        unresolved = [node for node, deg in indegree.items() if deg > 0]
        logger.debug("Sort stopped after %d of %d nodes", len(order), len(indegree))
        raise GraphCycleError(unresolved)

    logger.debug("Sorted %d nodes", len(order))
    return order
