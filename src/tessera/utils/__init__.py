"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions that
would otherwise clutter feature packages. It is not a new architectural layer.

Scope:
- Small, stateless helpers with minimal dependencies (rendering values as
  text, combining and slicing mappings).
- No business rules, no orchestration, no wiring.

Import direction:
- May be imported by any TESSERA package.
- May import `tessera.value_graph`; must not import from application packages.

Public API:
- Nothing is re-exported at the package level by default. Import specific
  helpers from their defining modules to avoid incidental coupling.
"""
