"""Resilience – retry primitives."""
