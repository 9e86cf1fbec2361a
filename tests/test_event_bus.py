from fourstack.events.bus import EventBus, EVENT_TICK


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_a_no_op():
    EventBus().emit(EVENT_TICK, dt=0.1)


def test_every_handler_runs_and_sees_the_bus_as_sender():
    bus = EventBus()
    calls = []
    bus.subscribe(EVENT_TICK, lambda sender, **kw: calls.append(("a", sender, kw["dt"])))
    bus.subscribe(EVENT_TICK, lambda sender, **kw: calls.append(("b", sender, kw["dt"])))
    bus.emit(EVENT_TICK, dt=0.25)
    assert sorted(calls, key=lambda call: call[0]) == [("a", bus, 0.25), ("b", bus, 0.25)]
