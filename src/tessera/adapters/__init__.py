"""Concrete implementations of the ports declared in `tessera.interfaces`."""
