"""Tests for call list filters and counts."""

from calls_assistant import call_filters


def test_upcoming_calls_keeps_input_order(make_call):
    calls = [
        make_call(client_name="A"),
        make_call(client_name="B", status="completed"),
        make_call(client_name="C"),
    ]

    assert [c.client_name for c in call_filters.upcoming_calls(calls)] == ["A", "C"]


def test_high_priority_calls(make_call):
    calls = [make_call(priority="high"), make_call(priority="low"), make_call(priority="high", status="missed")]

    assert len(call_filters.high_priority_calls(calls)) == 2


def test_first_scheduled_call(make_call):
    calls = [make_call(id="a", status="completed"), make_call(id="b"), make_call(id="c")]

    assert call_filters.first_scheduled_call(calls).id == "b"
    assert call_filters.first_scheduled_call(calls[:1]) is None
    assert call_filters.first_scheduled_call([]) is None


def test_summarize_calls(make_call):
    calls = [
        make_call(status="scheduled", priority="high"),
        make_call(status="completed"),
        make_call(status="missed", priority="high"),
        make_call(status="in-progress"),
    ]

    summary = call_filters.summarize_calls(calls)

    assert summary.scheduled == 1
    assert summary.completed == 1
    assert summary.missed == 1
    assert summary.high_priority == 2
    assert summary.total == 4


def test_filters_do_not_modify_input(make_call):
    calls = (make_call(), make_call(status="completed"))

    call_filters.upcoming_calls(calls)
    call_filters.summarize_calls(calls)

    assert [c.status for c in calls] == ["scheduled", "completed"]
