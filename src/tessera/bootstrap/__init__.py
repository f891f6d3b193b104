"""Bootstrap (composition root) for Tessera.

Assembles the application at runtime: reads configuration, builds the
concrete adapters and installs process-wide defaults.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `tessera.adapters`, `tessera.interfaces`,
  `tessera.domain`, and `tessera.config`.
- Inner layers must not import `tessera.bootstrap`.

Public surface:
- `AppContainer` and `bootstrap()`; wiring helpers stay internal.
- No business rules live here; this is assembly only.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
