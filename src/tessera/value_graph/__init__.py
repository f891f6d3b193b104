"""Structural value-graph engine.

Three cycle-safe traversals over graphs of primitives, dates, patterns,
lists/tuples, dicts, sets and ``SimpleNamespace`` records:

- `clone`: a fully independent copy.
- `freeze`: an immutable version (see `tessera.value_graph.frozen`).
- `equals`: structural equality.

Each call allocates its own identity-keyed visited map, so the functions are
pure and keep no state between calls.
"""

from .clone import clone
from .equality import equals
from .errors import FrozenValueError
from .freeze import freeze, is_frozen
from .frozen import FrozenDict, FrozenList, FrozenRecord, FrozenValuesDict, FrozenValuesSet
from .kinds import Kind, classify, is_plain_object, is_primitive

__all__ = [
    "FrozenDict",
    "FrozenList",
    "FrozenRecord",
    "FrozenValueError",
    "FrozenValuesDict",
    "FrozenValuesSet",
    "Kind",
    "classify",
    "clone",
    "equals",
    "freeze",
    "is_frozen",
    "is_plain_object",
    "is_primitive",
]
