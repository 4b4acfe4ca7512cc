"""Command-line interface for topo."""
