"""Unit tests for the log-and-continue helper."""

import pytest

from vouch.util.best_effort import log_and_continue


class TestLogAndContinue:
    """Tests for log_and_continue."""

    @pytest.mark.asyncio
    async def test_swallows_exceptions(self):
        """A failing block does not propagate."""
        reached = []

        async with log_and_continue("test.operation", key="value"):
            reached.append("before")
            raise RuntimeError("boom")

        assert reached == ["before"]

    @pytest.mark.asyncio
    async def test_successful_block_runs_to_completion(self):
        reached = []

        async with log_and_continue("test.operation"):
            reached.append("done")

        assert reached == ["done"]
