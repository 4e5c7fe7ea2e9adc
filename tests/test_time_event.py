from spriteworks.time_event import TimeEvent


def test_one_shot_fires_once_and_is_removed():
    calls = []
    events = TimeEvent()
    events.push_event(1.0, lambda: calls.append(1))
    events.update(0.5)
    assert calls == []
    events.update(0.5)
    assert calls == [1]
    events.update(5.0)
    assert calls == [1]
    assert len(events) == 0


def test_loop_event_repeats():
    calls = []
    events = TimeEvent()
    events.push_event(1.0, lambda: calls.append(1), loop=True)
    for _ in range(3):
        events.update(1.0)
    assert len(calls) == 3
    assert len(events) == 1


def test_update_event_runs_each_tick():
    calls = []
    events = TimeEvent()
    events.push_event(1.0, lambda: calls.append(1), is_update=True)
    events.update(0.25)
    events.update(0.25)
    assert len(calls) == 2
    events.update(0.5)
    assert len(calls) == 3
    assert len(events) == 0


def test_newest_event_runs_first():
    order = []
    events = TimeEvent()
    events.push_event(1.0, lambda: order.append("first"))
    events.push_event(1.0, lambda: order.append("second"))
    events.update(1.0)
    assert order == ["second", "first"]


def test_event_pushed_during_update_is_kept():
    events = TimeEvent()
    fired = []

    def spawn():
        events.push_event(1.0, lambda: fired.append("late"))

    events.push_event(0.5, spawn)
    events.update(0.5)
    assert len(events) == 1
    events.update(1.0)
    assert fired == ["late"]