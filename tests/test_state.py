"""
Tests for the conversation state store.
"""

import asyncio

import pytest

from placebot.core.state import ConversationState, ConversationStore


class TestConversationStore:
    """Test get/set/reset semantics."""

    def test_unknown_chat_is_idle(self, store):
        state = store.get(1)

        assert state.awaiting_location is False
        assert state.pending_query == ""
        assert 1 not in store

    def test_set_and_get(self, store):
        store.set(1, ConversationState.awaiting("pizza nearby"))

        assert store.get(1) == ConversationState(True, "pizza nearby")
        assert store.get(2) == ConversationState.idle()

    def test_reset(self, store):
        store.set("chat-a", ConversationState.awaiting("tacos near me"))
        store.reset("chat-a")

        assert store.get("chat-a") == ConversationState.idle()
        assert "chat-a" in store

    def test_injected_backing_mapping(self):
        """Test that state is written through to the injected mapping."""
        backing = {}
        store = ConversationStore(backing)

        store.set(7, ConversationState.awaiting("museums around"))

        assert backing[7].pending_query == "museums around"
        assert len(store) == 1

    def test_lock_is_per_chat(self, store):
        assert store.lock(1) is store.lock(1)
        assert store.lock(1) is not store.lock(2)

    def test_lock_outlives_reset(self, store):
        lock = store.lock(1)
        store.reset(1)

        assert store.lock(1) is lock

    @pytest.mark.asyncio
    async def test_lock_serializes_same_chat(self, store):
        """Test that a second holder waits for the first."""
        order = []

        async def turn(name):
            async with store.lock(1):
                order.append(f"{name}-start")
                await asyncio.sleep(0.01)
                order.append(f"{name}-end")

        await asyncio.gather(turn("a"), turn("b"))

        assert order == ["a-start", "a-end", "b-start", "b-end"]
