"""Smoke tests for the top-level package surface."""
from __future__ import annotations

import unklogger
from unklogger import Context, Unklogger, logger


class TestPublicApi:
    def test_version(self) -> None:
        assert unklogger.__version__ == "0.1.0"

    def test_default_instance(self) -> None:
        assert isinstance(logger, Unklogger)

    def test_default_instance_new_is_isolated(self) -> None:
        fresh = logger.new()
        fresh.add_extension("only_here", lambda ctx: True)
        assert "only_here" not in logger.extensions

    def test_default_instance_logs(self, capsys) -> None:
        isolated = logger.new()
        isolated.colors_enabled = False
        ctx = isolated.success("Array", [0, 1])
        assert isinstance(ctx, Context)
        assert capsys.readouterr().out == ctx.output + "\n"
        assert ctx.output.endswith("| [Array] [\n    0,\n    1\n]")
