"""Build order example for topo.

Targets declare the targets they feed into. Sorting the graph yields an order
in which every target is built after everything it needs.

Run with:
    python examples/build_order.py
"""

import topo

# -----------------------------------------------------------------------------
# Graph Setup
# -----------------------------------------------------------------------------

graph = topo.new_graph()
graph.put_nodes("docs", "lint")

graph.connect("codegen", "core")
graph.connect("core", "cli")
graph.connect("core", "plugins")
graph.connect("plugins", "cli")
graph.connect("cli", "package")
graph.connect("docs", "package")


def main() -> None:
    print(graph)

    for step, target in enumerate(graph.sort(), start=1):
        print(f"{step}. {target}")

    # Introduce a cycle and show what cannot be scheduled
    graph.connect("package", "core")
    try:
        graph.sort()
    except topo.GraphCycleError as e:
        print(e)
        print(f"unresolved: {', '.join(e.nodes)}")


if __name__ == "__main__":
    main()
