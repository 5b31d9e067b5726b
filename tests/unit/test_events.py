"""Event bus tests."""

import asyncio

import pytest

from todosync.events import EventBus


class TestEventBus:
    """EventBus class tests."""

    @pytest.mark.asyncio
    async def test_mixed_subscribers(self):
        """Test mixed sync and async subscribers."""
        test_bus = EventBus()
        sync_received = []
        async_received = []

        def sync_callback(data):
            sync_received.append(data)

        async def async_callback(data):
            await asyncio.sleep(0)
            async_received.append(data)

        test_bus.subscribe("state_changed", sync_callback)
        test_bus.subscribe("state_changed", async_callback)

        await test_bus.publish("state_changed", {"key": "value"})

        assert sync_received == [{"key": "value"}]
        assert async_received == [{"key": "value"}]

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        test_bus = EventBus()
        received = []
        test_bus.subscribe("state_changed", received.append)
        test_bus.unsubscribe("state_changed", received.append)

        await test_bus.publish("state_changed", {})

        assert received == []

    @pytest.mark.asyncio
    async def test_subscriber_error_is_isolated(self, caplog):
        """A failing subscriber is logged and the rest still run."""
        test_bus = EventBus()
        received = []

        def broken(data):
            raise RuntimeError("boom")

        test_bus.subscribe("state_changed", broken)
        test_bus.subscribe("state_changed", received.append)

        await test_bus.publish("state_changed", {"n": 1})

        assert received == [{"n": 1}]
        assert "failed on event state_changed" in caplog.text

    @pytest.mark.asyncio
    async def test_no_subscribers(self):
        await EventBus().publish("nothing", {})
