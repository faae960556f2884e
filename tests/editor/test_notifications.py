"""Tests for notifications and schedulers."""

import asyncio

import pytest

from flowbuilder.editor.notifications import NotificationCenter, NotificationType
from flowbuilder.editor.scheduler import AsyncioScheduler, VirtualScheduler


class TestVirtualScheduler:
    def test_fires_when_due(self):
        scheduler = VirtualScheduler()
        fired = []
        scheduler.call_later(3, lambda: fired.append("a"))

        assert scheduler.advance(2.5) == 0
        assert fired == []
        assert scheduler.advance(0.5) == 1
        assert fired == ["a"]
        assert scheduler.now == pytest.approx(3.0)

    def test_same_deadline_keeps_schedule_order(self):
        scheduler = VirtualScheduler()
        fired = []
        scheduler.call_later(1, lambda: fired.append(1))
        scheduler.call_later(1, lambda: fired.append(2))

        scheduler.advance(5)
        assert fired == [1, 2]
        assert scheduler.pending == 0

    def test_cannot_go_backwards(self):
        with pytest.raises(ValueError):
            VirtualScheduler().advance(-1)


class TestNotificationCenter:
    def test_show_and_auto_clear(self, scheduler):
        center = NotificationCenter(scheduler, delay=3)
        notification = center.show("Flow ran successfully")

        assert center.current == notification
        assert notification.to_dict() == {"message": "Flow ran successfully", "type": "success"}

        scheduler.advance(2.5)
        assert center.current == notification
        scheduler.advance(0.5)
        assert center.current is None

    def test_error_notification(self, scheduler):
        center = NotificationCenter(scheduler)
        notification = center.error("nope")
        assert notification.type == NotificationType.ERROR
        assert notification.to_dict()["type"] == "error"

    def test_token_policy_keeps_newer_notification(self, scheduler):
        center = NotificationCenter(scheduler, delay=3, clear_policy="token")
        center.show("first")
        scheduler.advance(2)
        second = center.show("second")

        scheduler.advance(1)  # first timer fires
        assert center.current == second

        scheduler.advance(2)  # second timer fires
        assert center.current is None

    def test_deadline_policy_clears_newer_notification(self, scheduler):
        center = NotificationCenter(scheduler, delay=3, clear_policy="deadline")
        center.show("first")
        scheduler.advance(2)
        center.show("second")

        scheduler.advance(1)
        assert center.current is None

    def test_tokens_increase(self, scheduler):
        center = NotificationCenter(scheduler)
        tokens = [center.show(str(i)).token for i in range(3)]
        assert tokens == [1, 2, 3]

    def test_history(self, scheduler):
        center = NotificationCenter(scheduler)
        center.success("a")
        center.error("b")
        scheduler.advance(10)
        assert [n.message for n in center.history] == ["a", "b"]
        assert center.current is None

    def test_listeners(self, scheduler):
        center = NotificationCenter(scheduler, delay=1)
        seen = []
        center.subscribe(seen.append)

        shown = center.show("hello")
        scheduler.advance(1)

        assert seen == [shown, None]

    def test_manual_clear(self, scheduler):
        center = NotificationCenter(scheduler)
        center.show("x")
        center.clear()
        assert center.current is None
        scheduler.advance(5)
        assert center.current is None


class TestAsyncioScheduler:
    def test_clears_on_event_loop(self):
        async def scenario():
            center = NotificationCenter(AsyncioScheduler(), delay=0.01)
            center.show("Flow ran successfully")
            assert center.current is not None
            await asyncio.sleep(0.05)
            return center.current

        assert asyncio.run(scenario()) is None
