"""TESSERA

Structural value-graph toolkit: deep clone, deep freeze and deep structural
equality over arbitrary (possibly cyclic) graphs of plain data, plus the
value-object, entity and domain-event building blocks built on top of them.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
