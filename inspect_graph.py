"""Print a blueprint's forms in dependency order with their prefill sources.

Usage::

    python inspect_graph.py graph.json
    python inspect_graph.py --node form-47c61d17-62b0-4c42-8ca2-0eff641c9d88

Without a path the graph is loaded from ``JOURNEY_GRAPH_FILE`` or the
blueprint API configured in ``.env``.
"""
import argparse
import sys

from dotenv import load_dotenv
load_dotenv()

from journey.api.app import load_configured_graph
from journey.client import load_graph_file
from journey.config import settings
from journey.graph import analyze_topology, build_node_index, get_all_dependencies
from journey.logging import setup_logging
from journey.sources import build_default_registry


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", nargs="?", help="JSON graph snapshot")
    parser.add_argument("--node", help="Only show this node id")
    args = parser.parse_args()

    setup_logging(settings.log_level)
    graph = load_graph_file(args.path) if args.path else load_configured_graph()
    if graph is None:
        print("[ERROR] No graph could be loaded.")
        sys.exit(1)

    report = analyze_topology(graph.nodes)
    index = build_node_index(graph.nodes)
    registry = build_default_registry()

    print(f"{graph.name or graph.id}: {len(graph.nodes)} forms\n")
    for cycle in report.cycles:
        print(f"  [WARN] cycle: {' -> '.join(cycle)}")

    for node in report.order:
        if args.node and node.id != args.node:
            continue
        deps = get_all_dependencies(node, index)
        print(f"[{node.name}] {node.id}")
        print(f"  direct     : {', '.join(n.name for n in deps.direct) or '-'}")
        print(f"  transitive : {', '.join(n.name for n in deps.transitive) or '-'}")
        for group in registry.get_all_data_sources(node, graph):
            print(f"  {group.type:6s} {group.name} ({len(group.items)} fields)")
        print()


if __name__ == "__main__":
    main()
