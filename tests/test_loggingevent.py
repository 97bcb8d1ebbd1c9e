import dataclasses
import threading

import pytest

from loghier.loggingevent import LoggingEvent
from loghier.timestamp import TimeStamp


def test_fields_are_stored():
    event = LoggingEvent("app.db", "connected", "req-1", 600)
    assert event.category_name == "app.db"
    assert event.message == "connected"
    assert event.ndc == "req-1"
    assert event.priority == 600


def test_time_stamp_is_taken_at_creation():
    before = TimeStamp.now()
    event = LoggingEvent("c", "m", "", 700)
    after = TimeStamp.now()
    assert before <= event.time_stamp <= after


def test_thread_name_identifies_current_thread():
    event = LoggingEvent("c", "m", "", 700)
    assert event.thread_name == str(threading.get_ident())


def test_thread_name_differs_between_threads():
    events = []
    worker = threading.Thread(target=lambda: events.append(LoggingEvent("c", "m", "", 0)))
    worker.start()
    worker.join()
    main_event = LoggingEvent("c", "m", "", 0)
    assert events[0].thread_name != main_event.thread_name
    assert events[0].thread_name == str(worker.ident)


def test_explicit_time_stamp():
    stamp = TimeStamp(10, 20)
    event = LoggingEvent("c", "m", "", 0, thread_name="worker", time_stamp=stamp)
    assert event.time_stamp == stamp
    assert event.thread_name == "worker"


def test_event_is_immutable():
    event = LoggingEvent("c", "m", "", 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.message = "other"
    assert event.message == "m"