"""Unit tests for safe_stringify."""

import datetime
import json
import re
from types import SimpleNamespace

from tessera.utils.safe_stringify import CIRCULAR_MARKER, UNABLE_TO_STRINGIFY, safe_stringify
from tessera.value_graph import freeze

# pylint: disable=magic-value-comparison


class Opaque:  # pylint: disable=too-few-public-methods
    """An object with no JSON form."""

    def __str__(self) -> str:
        return "opaque!"


class TestPlainValues:
    """JSON-compatible values render as ordinary JSON."""

    @staticmethod
    def test_nested_plain_data() -> None:
        """Dicts with string keys, lists and scalars are unchanged."""
        value = {"a": [1, 2.5, None, True], "b": {"c": "text"}}
        assert json.loads(safe_stringify(value)) == value

    @staticmethod
    def test_indent_is_passed_through() -> None:
        """indent formats the output."""
        assert safe_stringify({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    @staticmethod
    def test_frozen_values_render_like_their_sources() -> None:
        """Frozen containers render like the built-ins they replace."""
        value = {"a": [1], "r": SimpleNamespace(x=1)}
        assert json.loads(safe_stringify(freeze(value))) == {"a": [1], "r": {"x": 1}}


class TestSpecialValues:
    """Non-JSON values get a readable form."""

    @staticmethod
    def test_tagged_containers() -> None:
        """Non-string-keyed dicts and sets are tagged."""
        rendered = json.loads(safe_stringify({"m": {1: "one"}, "s": {3}}))
        assert rendered == {
            "m": {"_type": "Map", "entries": [[1, "one"]]},
            "s": {"_type": "Set", "values": [3]},
        }

    @staticmethod
    def test_dates_patterns_and_tuples() -> None:
        """Dates are ISO strings, patterns /source/, tuples lists."""
        value = {
            "d": datetime.date(2024, 1, 2),
            "p": re.compile("a+b"),
            "t": (1, 2),
        }
        assert json.loads(safe_stringify(value)) == {"d": "2024-01-02", "p": "/a+b/", "t": [1, 2]}

    @staticmethod
    def test_opaque_objects_use_str_or_default() -> None:
        """Unknown objects go through str() unless a default is given."""
        assert safe_stringify([Opaque()]) == '["opaque!"]'
        assert safe_stringify([Opaque()], default=lambda _: "custom") == '["custom"]'


class TestFailureModes:
    """Cycles and conversion failures never raise."""

    @staticmethod
    def test_cycles_are_marked() -> None:
        """A container inside itself is replaced by the marker."""
        value: dict[str, object] = {"name": "root"}
        value["self"] = value
        assert json.loads(safe_stringify(value)) == {"name": "root", "self": CIRCULAR_MARKER}

    @staticmethod
    def test_shared_values_are_not_cycles() -> None:
        """The same list twice is rendered twice."""
        shared = [1]
        assert json.loads(safe_stringify([shared, shared])) == [[1], [1]]

    @staticmethod
    def test_failing_default_returns_placeholder() -> None:
        """Errors during conversion produce the placeholder text."""

        def broken(_: object) -> str:
            raise TypeError("no")

        assert safe_stringify(Opaque(), default=broken) == UNABLE_TO_STRINGIFY
