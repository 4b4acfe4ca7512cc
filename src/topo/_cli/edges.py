"""Parsing of edge arguments given on the command line."""

from collections.abc import Iterable


def parse_edges(specs: Iterable[str], *, delimiter: str = ":", separator: str = ",") -> dict[str, list[str]]:
    """Parse edge arguments into a successor mapping.

    Each spec is ``src`` or ``src<delimiter>dst1<separator>dst2``. A repeated
    source extends its successor list, and every successor is also added as
    a node so that the result is closed over its edges.

    Args:
        specs: Edge arguments, e.g. ``["a:b,c", "c:b"]``.
        delimiter: Splits the source from its successors.
        separator: Splits successors from each other.

    Returns:
        Mapping from node to successors, keys in first-seen order.

    Raises:
        ValueError: If a spec names an empty node identifier.

    Example:
        >>> parse_edges(["a:b,c", "c:b"])
        {'a': ['b', 'c'], 'b': [], 'c': ['b']}

    """
    successors: dict[str, list[str]] = {}
    for spec in specs:
        src, _, rest = spec.partition(delimiter)
        src = src.strip()
        if not src:
            msg = f"Missing source node in {spec!r}"
            raise ValueError(msg)

        targets = successors.setdefault(src, [])
        if not rest.strip():
            continue
        for raw in rest.split(separator):
            dst = raw.strip()
            if not dst:
                msg = f"Empty successor in {spec!r}"
                raise ValueError(msg)
            targets.append(dst)
            successors.setdefault(dst, [])

    return successors
