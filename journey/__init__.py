"""Journey prefill engine: dependency resolution and data-source aggregation
for blueprint form graphs."""

__version__ = "0.1.0"
