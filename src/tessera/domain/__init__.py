"""Domain building blocks for TESSERA.

Contains the base types applications derive their models from: value objects
(and their builders), entities with dual-identifier ids, aggregate roots,
domain events, the `Result` container and domain errors. This package is
deliberately technology-agnostic.

Dependency rule: do not import from `tessera.adapters`, `tessera.bootstrap`
or `tessera.entrypoints`.
"""
