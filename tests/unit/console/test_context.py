"""Unit tests for the event context record."""
from __future__ import annotations

import pytest

from unklogger.console.context import Context


class TestContext:
    def test_defaults(self) -> None:
        ctx = Context(timestamp="T")
        assert ctx.tags == []
        assert ctx.message == ""
        assert ctx.output == ""
        assert ctx.arguments == []
        assert ctx.extensions == {}

    def test_missing_attribute_raises(self) -> None:
        with pytest.raises(AttributeError, match="no attribute or extension 'ping'"):
            Context(timestamp="T").ping

    def test_dunder_lookup_not_routed_to_extensions(self) -> None:
        ctx = Context(timestamp="T", extensions={"__len__": lambda: 0})
        with pytest.raises(TypeError):
            len(ctx)

    def test_to_dict_excludes_extensions(self) -> None:
        ctx = Context(timestamp="T", tags=["a"], message="m", output="T | [a] m", arguments=["a", "m"])
        ctx.extensions["ping"] = lambda: "pong"
        assert ctx.to_dict() == {
            "timestamp": "T",
            "tags": ["a"],
            "message": "m",
            "output": "T | [a] m",
            "arguments": ["a", "m"],
        }

    def test_identity_equality(self) -> None:
        assert Context(timestamp="T") != Context(timestamp="T")
