"""Discover businesses from a map search and collect their contact emails."""

from .pipeline import get_possible_customers

__all__ = ["get_possible_customers"]
