"""Ports (interfaces) that the domain depends on.

Concrete implementations live in `tessera.adapters` and are wired in by
`tessera.bootstrap`.
"""
