"""Errors raised by graph operations."""

from collections.abc import Iterable


class GraphCycleError(ValueError):
    """Raised when a graph cannot be ordered because it contains a cycle.

    The reported nodes are every node left unresolved when sorting stopped.
    This includes the members of each cycle and everything downstream of one,
    so it is a superset of the minimal cycle.

    Attributes:
        nodes: Unresolved node identifiers, sorted ascending.

    """

    def __init__(self, nodes: Iterable[str]) -> None:
        self.nodes = tuple(sorted(nodes))
        msg = f"graph cycle involving nodes: [{', '.join(self.nodes)}]"
        super().__init__(msg)

    def __reduce__(self) -> tuple[type["GraphCycleError"], tuple[tuple[str, ...]]]:
        # Rebuild from the node ids, not from the formatted message in args.
        return (type(self), (self.nodes,))
