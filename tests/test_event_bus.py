from breakpoints.services.event_bus import BreakpointEvent, EventBus


def test_subscribe_and_publish_order():
    bus = EventBus()
    order = []

    def h1(e):
        order.append(("h1", e.name))

    def h2(e):
        order.append(("h2", e.name))

    bus.subscribe(BreakpointEvent.BREAKPOINT_CHANGED, h1)
    bus.subscribe(BreakpointEvent.BREAKPOINT_CHANGED, h2)
    bus.publish(BreakpointEvent.BREAKPOINT_CHANGED, {"width": 1})
    assert order == [
        ("h1", BreakpointEvent.BREAKPOINT_CHANGED.value),
        ("h2", BreakpointEvent.BREAKPOINT_CHANGED.value),
    ]


def test_once_subscription():
    bus = EventBus()
    count = 0

    def incr(_):
        nonlocal count
        count += 1

    bus.subscribe(BreakpointEvent.PLATFORM_CHANGED, incr, once=True)
    bus.publish(BreakpointEvent.PLATFORM_CHANGED)
    bus.publish(BreakpointEvent.PLATFORM_CHANGED)
    assert count == 1
    assert bus.subscriber_count(BreakpointEvent.PLATFORM_CHANGED) == 0


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
    assert isinstance(bus.errors[0][1], RuntimeError)


def test_unsubscribe_and_cancel():
    bus = EventBus()
    hits = []
    sub = bus.subscribe("x", lambda e: hits.append("a"))
    other = bus.subscribe("x", lambda e: hits.append("b"))
    bus.unsubscribe(sub)
    other.cancel()
    bus.publish("x")
    assert hits == []
    assert bus.subscriber_count("x") == 1


def test_clear():
    bus = EventBus()
    bus.subscribe("x", lambda e: None)
    bus.clear()
    assert bus.subscriber_count("x") == 0
