import pytest

from loghier.appender import (
    Appender,
    AppenderSkeleton,
    BasicLayout,
    Layout,
    LayoutAppender,
)
from loghier.filter import Decision, Filter
from loghier.loggingevent import LoggingEvent
from loghier.timestamp import TimeStamp


class ListAppender(LayoutAppender):
    def __init__(self, name, reopen_result=True):
        super().__init__(name)
        self.lines = []
        self.closed = 0
        self.reopened = 0
        self.reopen_result = reopen_result

    def close(self):
        self.closed += 1

    def reopen(self):
        self.reopened += 1
        return self.reopen_result

    def _append(self, event):
        self.lines.append(self._get_layout().format(event))


class MessageLayout(Layout):
    def format(self, event):
        return event.message


class FixedFilter(Filter):
    def __init__(self, decision):
        super().__init__()
        self.decision = decision

    def _decide(self, event):
        return self.decision


def make_event(priority=600, message="hello", seconds=1):
    return LoggingEvent("cat", message, "ndc", priority, time_stamp=TimeStamp(seconds, 0))


def test_basic_layout_format():
    event = make_event(priority=300, message="msg", seconds=1)
    assert BasicLayout().format(event) == "1 ERROR cat ndc: msg\n"


def test_basic_layout_debug_name():
    line = BasicLayout().format(make_event(priority=700))
    assert line.split(" ")[1] == "DEBUG"


def test_layout_appender_defaults_to_basic_layout():
    appender = ListAppender("la-default")
    appender.do_append(make_event(message="abc"))
    assert appender.lines == [BasicLayout().format(make_event(message="abc"))]
    assert appender.requires_layout() is True


def test_set_layout_and_reset():
    appender = ListAppender("la-layout")
    appender.set_layout(MessageLayout())
    appender.do_append(make_event(message="one"))
    appender.set_layout(None)
    appender.do_append(make_event(message="two"))
    assert appender.lines[0] == "one"
    assert appender.lines[1].endswith("two\n")


def test_threshold_blocks_lower_priorities():
    appender = ListAppender("la-threshold")
    appender.set_threshold(400)
    appender.set_layout(MessageLayout())
    appender.do_append(make_event(priority=700, message="debug"))
    appender.do_append(make_event(priority=400, message="warn"))
    appender.do_append(make_event(priority=0, message="fatal"))
    assert appender.lines == ["warn", "fatal"]
    assert appender.get_threshold() == 400


def test_default_threshold_lets_everything_through():
    appender = ListAppender("la-nothreshold")
    appender.set_layout(MessageLayout())
    appender.do_append(make_event(priority=900, message="x"))
    assert appender.lines == ["x"]


def test_filter_deny_drops_event():
    appender = ListAppender("la-filter")
    deny = FixedFilter(Decision.DENY)
    appender.set_filter(deny)
    appender.do_append(make_event())
    assert appender.lines == []
    assert appender.get_filter() is deny


def test_filter_neutral_and_accept_pass():
    appender = ListAppender("la-filter2")
    appender.set_layout(MessageLayout())
    chain = FixedFilter(Decision.NEUTRAL)
    chain.append_chained_filter(FixedFilter(Decision.ACCEPT))
    appender.set_filter(chain)
    appender.do_append(make_event(message="kept"))
    assert appender.lines == ["kept"]


def test_registry_lookup():
    appender = ListAppender("la-registry")
    assert Appender.get_appender("la-registry") is appender
    assert appender.name == "la-registry"
    assert Appender.get_appender("la-no-such-appender") is None


def test_registry_later_name_replaces_earlier():
    first = ListAppender("la-dup")
    second = ListAppender("la-dup")
    assert Appender.get_appender("la-dup") is second
    assert first is not second


def test_remove_appender():
    appender = ListAppender("la-remove")
    Appender._remove_appender(appender)
    assert Appender.get_appender("la-remove") is None


def test_reopen_all_reports_failure_and_calls_every_appender():
    failing = ListAppender("la-reopen-fail", reopen_result=False)
    good = ListAppender("la-reopen-good")
    assert Appender.reopen_all() is False
    assert failing.reopened == 1
    assert good.reopened == 1
    Appender._remove_appender(failing)
    assert Appender.reopen_all() is True


def test_close_all_closes_registered_appenders():
    one = ListAppender("la-close-1")
    two = ListAppender("la-close-2")
    Appender.close_all()
    assert one.closed >= 1
    assert two.closed >= 1
    assert Appender.get_appender("la-close-1") is one
    assert Appender.get_appender("la-close-2") is two


def test_skeleton_reopen_returns_true():
    class Plain(AppenderSkeleton):
        def __init__(self, name):
            super().__init__(name)
            self.events = []

        def close(self):
            pass

        def requires_layout(self):
            return False

        def set_layout(self, layout):
            pass

        def _append(self, event):
            self.events.append(event)

    plain = Plain("la-plain")
    event = make_event(message="plain")
    plain.do_append(event)
    assert plain.reopen() is True
    assert plain.events == [event]


def test_abstract_appender_cannot_be_instantiated():
    with pytest.raises(TypeError):
        LayoutAppender("la-abstract")