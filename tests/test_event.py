from voxelkit.event import Event


def test_trigger_passes_data_to_all_in_order():
    event = Event()
    seen = []
    event.subscribe(lambda d: seen.append(("a", d)))
    event.subscribe(lambda d: seen.append(("b", d)))
    event.trigger(42)
    assert seen == [("a", 42), ("b", 42)]


def test_subscribe_returns_callback_for_decorator_use():
    event = Event()
    received = []

    @event.subscribe
    def handler(data):
        received.append(data)

    event.trigger("x")
    assert received == ["x"]
    assert len(event) == 1


def test_same_callback_twice_is_called_twice():
    event = Event()
    calls = []

    def handler(data):
        calls.append(data)

    returned = event.subscribe(handler)
    event.subscribe(handler)
    assert returned is handler
    assert len(event) == 2
    event.trigger("ping")
    assert calls == ["ping", "ping"]


def test_each_trigger_reaches_subscribers():
    event = Event()
    total = []
    event.subscribe(total.append)
    for value in range(3):
        event.trigger(value)
    assert total == [0, 1, 2]