"""Aggregate roots."""

from .base import AggregateRoot

__all__ = ["AggregateRoot"]
