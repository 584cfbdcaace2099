from tamyla_ui.services import EventBus, PlatformEvent


def test_subscribe_publish_basic():
    bus = EventBus()
    received = []
    bus.subscribe(PlatformEvent.THEME_CHANGED, lambda evt: received.append((evt.name, evt.payload)))
    bus.publish(PlatformEvent.THEME_CHANGED, {"theme": {"name": "dark"}})
    assert received == [("theme_changed", {"theme": {"name": "dark"}})]


def test_string_and_enum_names_are_equivalent():
    bus = EventBus()
    count = []
    bus.subscribe("tokens_updated", count.append)
    bus.publish(PlatformEvent.TOKENS_UPDATED)
    assert len(count) == 1


def test_once_subscription():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    bus.subscribe(PlatformEvent.THEME_REGISTERED, incr, once=True)
    bus.publish(PlatformEvent.THEME_REGISTERED)
    bus.publish(PlatformEvent.THEME_REGISTERED)
    assert count == 1
    assert bus.subscriber_count(PlatformEvent.THEME_REGISTERED) == 0


def test_error_isolation():
    bus = EventBus()
    order = []

    def bad(_):
        order.append("bad")
        raise RuntimeError("boom")

    def good(_):
        order.append("good")

    bus.subscribe("custom", bad)
    bus.subscribe("custom", good)
    bus.publish("custom", 123)
    assert order == ["bad", "good"]
    assert len(bus.errors) == 1


def test_unsubscribe_and_cancel():
    bus = EventBus()
    got = []
    sub = bus.subscribe("x", got.append)
    other = bus.subscribe("x", got.append)
    other.cancel()
    bus.publish("x")
    bus.unsubscribe(sub)
    bus.publish("x")
    assert len(got) == 1
    assert "x" in bus.list_events()  # cancelled sub still listed until unsubscribed
