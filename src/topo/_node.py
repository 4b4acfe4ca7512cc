"""Per-node edge list."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class _Node:
    """A graph vertex and its outgoing edges.

    ``connections`` keeps insertion order and may hold the same target more
    than once. Callers outside the graph should treat it as read-only.
    """

    id: str
    connections: list[str] = field(default_factory=list)

    def connect(self, target: str) -> None:
        self.connections.append(target)

    def disconnect(self, target: str) -> None:
        """Drop every edge to ``target``."""
        self.connections = [c for c in self.connections if c != target]

    def connected(self, target: str) -> bool:
        return target in self.connections
