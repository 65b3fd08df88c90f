"""Predicate implementations, one per check kind, grouped by concern."""
