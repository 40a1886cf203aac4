"""Tests for hashrouter.location — in-memory navigation source."""

from hashrouter.location import Location, MemoryLocation


class TestMemoryLocation:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryLocation(), Location)

    def test_initial_fragment(self) -> None:
        assert MemoryLocation("/inbox").fragment == "/inbox"
        assert MemoryLocation().fragment == ""

    def test_assign_notifies(self) -> None:
        location = MemoryLocation()
        seen: list[str] = []
        location.subscribe(seen.append)
        location.assign("/a")
        assert seen == ["/a"]
        assert location.fragment == "/a"
        assert location.history == ["/a"]

    def test_unchanged_fragment_not_notified(self) -> None:
        location = MemoryLocation("/a")
        seen: list[str] = []
        location.subscribe(seen.append)
        location.assign("/a")
        assert seen == []
        assert location.history == []

    def test_unsubscribe(self) -> None:
        location = MemoryLocation()
        seen: list[str] = []
        unsubscribe = location.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        location.assign("/a")
        assert seen == []

    def test_assign_during_delivery_is_queued(self) -> None:
        location = MemoryLocation()
        events: list[str] = []

        def listener(fragment: str) -> None:
            events.append(f"start {fragment}")
            if fragment == "/a":
                location.assign("/b")
                assert location.fragment == "/b"
            events.append(f"end {fragment}")

        location.subscribe(listener)
        location.assign("/a")
        assert events == ["start /a", "end /a", "start /b", "end /b"]

    def test_every_listener_sees_each_change(self) -> None:
        location = MemoryLocation()
        first: list[str] = []
        second: list[str] = []
        location.subscribe(first.append)
        location.subscribe(second.append)
        location.assign("/a")
        location.assign("/b")
        assert first == second == ["/a", "/b"]
