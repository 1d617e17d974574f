import pytest

from sam2695.events import EVENT_POOL_SIZE, Event, EventType
from sam2695.state import State, StateMachine


class RecordingState(State):
    state_id = 1
    name = "Recording"

    def __init__(self, log, label, handled=True):
        self.log = log
        self.label = label
        self.handled = handled
        self.inner_result = None

    def on_enter(self):
        self.log.append(("enter", self.label))

    def on_exit(self):
        self.log.append(("exit", self.label))

    def handle_event(self, machine, event):
        self.log.append(("event", self.label, event.type))
        return self.handled


class ReentrantState(State):
    state_id = 2
    name = "Reentrant"

    def __init__(self):
        self.inner_result = None

    def handle_event(self, machine, event):
        self.inner_result = machine.handle_event(event)
        return True


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()


def test_init_enters_initial_state():
    log = []
    machine = StateMachine()
    first = RecordingState(log, "a")
    machine.init(first, None)
    assert machine.current_state is first
    assert log == [("enter", "a")]


def test_init_rejects_missing_state():
    with pytest.raises(ValueError):
        StateMachine().init(None, None)


def test_handle_event_without_state_is_not_handled():
    assert StateMachine().handle_event(Event(EventType.A_PRESSED)) is False


def test_handle_event_without_event_is_not_handled():
    machine = StateMachine()
    machine.init(RecordingState([], "a"), None)
    assert machine.handle_event(None) is False


def test_handle_event_forwards_to_current_state():
    log = []
    machine = StateMachine()
    machine.init(RecordingState(log, "a", handled=False), None)
    assert machine.handle_event(Event(EventType.B_PRESSED)) is False
    assert log[-1] == ("event", "a", EventType.B_PRESSED)


def test_reentrant_event_is_refused():
    machine = StateMachine()
    state = ReentrantState()
    machine.init(state, None)
    assert machine.handle_event(Event(EventType.A_PRESSED)) is True
    assert state.inner_result is False
    # the guard is lifted afterwards
    assert machine.handle_event(Event(EventType.A_PRESSED)) is True


def test_change_state_exits_and_enters():
    log = []
    machine = StateMachine()
    a = RecordingState(log, "a")
    b = RecordingState(log, "b")
    machine.init(a, None)
    assert machine.change_state(b) is True
    assert log == [("enter", "a"), ("exit", "a"), ("enter", "b")]
    assert machine.current_state is b
    assert machine.previous_state is a


def test_change_to_same_state_is_refused():
    log = []
    machine = StateMachine()
    a = RecordingState(log, "a")
    machine.init(a, None)
    assert machine.change_state(a) is False
    assert log == [("enter", "a")]


def test_change_to_none_raises():
    machine = StateMachine()
    with pytest.raises(ValueError):
        machine.change_state(None)


def test_go_to_previous_state():
    log = []
    machine = StateMachine()
    a = RecordingState(log, "a")
    b = RecordingState(log, "b")
    machine.init(a, None)
    assert machine.go_to_previous_state() is False
    machine.change_state(b)
    assert machine.go_to_previous_state() is True
    assert machine.current_state is a
    assert machine.previous_state is b


def test_handle_error_calls_handler_and_switches():
    log = []
    errors = []
    machine = StateMachine()
    a = RecordingState(log, "a")
    err = RecordingState(log, "err")
    machine.init(a, err)
    machine.set_error_handler(lambda code, message: errors.append((code, message)))
    machine.handle_error(7, "broken")
    assert errors == [(7, "broken")]
    assert machine.current_state is err
    machine.handle_error(8, "again")
    assert log.count(("enter", "err")) == 1
    assert errors[-1] == (8, "again")


def test_handle_error_without_error_state_stays():
    machine = StateMachine()
    a = RecordingState([], "a")
    machine.init(a, None)
    machine.handle_error(1, "x")
    assert machine.current_state is a


def test_event_pool_exhausts_and_recycles():
    machine = StateMachine()
    taken = [machine.acquire_event(EventType.C_PRESSED) for _ in range(EVENT_POOL_SIZE)]
    assert all(event.in_use and event.type == EventType.C_PRESSED for event in taken)
    assert len({id(event) for event in taken}) == EVENT_POOL_SIZE
    assert machine.acquire_event(EventType.D_PRESSED) is None
    machine.recycle_event(taken[1])
    again = machine.acquire_event(EventType.D_PRESSED)
    assert again is taken[1]
    assert again.type == EventType.D_PRESSED


def test_recycle_none_is_harmless():
    machine = StateMachine()
    machine.recycle_event(None)
    assert machine.acquire_event(EventType.A_PRESSED).in_use is True


def test_reset_frees_all_events():
    machine = StateMachine()
    for _ in range(EVENT_POOL_SIZE):
        machine.acquire_event(EventType.A_LONG_PRESSED)
    machine.reset()
    assert all(not e.in_use and e.type == EventType.NONE for e in machine.events)
    assert machine.acquire_event(EventType.A_PRESSED) is not None