"""HTTP surface over the prefill engine."""

from journey.api.app import create_app

__all__ = ["create_app"]
