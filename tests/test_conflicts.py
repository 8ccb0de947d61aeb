# SPDX-License-Identifier: MIT

import pytest

from gridcal.service.occurrence import conflicts_with


def test_back_to_back_events_do_not_conflict(make_event) -> None:
    first = make_event(start_time="09:00", end_time="10:00")
    second = make_event(start_time="10:00", end_time="11:00")

    assert conflicts_with(first, [second]) == []
    assert conflicts_with(second, [first]) == []


def test_one_minute_overlap_conflicts(make_event) -> None:
    first = make_event(start_time="09:00", end_time="10:01")
    second = make_event(start_time="10:00", end_time="11:00")

    assert conflicts_with(first, [second]) == [second]


def test_nested_interval_conflicts(make_event) -> None:
    existing = make_event(date="2024-03-05", start_time="09:00", end_time="10:00")
    candidate = make_event(date="2024-03-05", start_time="09:30", end_time="09:45")

    assert conflicts_with(candidate, [existing]) == [existing]


@pytest.mark.parametrize(
    "first_times, second_times",
    [
        (("09:00", "10:00"), ("09:30", "11:00")),
        (("09:00", "10:00"), ("10:00", "11:00")),
        (("09:00", "12:00"), ("10:00", "11:00")),
        (("08:00", "08:30"), ("13:00", "14:00")),
        (("09:00", "10:00"), ("09:00", "10:00")),
    ],
)
def test_conflicts_are_symmetric(make_event, first_times, second_times) -> None:
    first = make_event(start_time=first_times[0], end_time=first_times[1])
    second = make_event(start_time=second_times[0], end_time=second_times[1])

    assert bool(conflicts_with(first, [second])) == bool(conflicts_with(second, [first]))


def test_event_never_conflicts_with_itself(make_event) -> None:
    stored = make_event(id="abc")
    edited = make_event(id="abc", start_time="09:15", end_time="09:45")
    other = make_event(id="xyz")

    assert conflicts_with(edited, [stored, other]) == [other]


def test_events_on_other_days_are_ignored(make_event) -> None:
    candidate = make_event(date="2024-03-05")
    next_day = make_event(date="2024-03-06")

    assert conflicts_with(candidate, [next_day]) == []


def test_recurring_events_are_compared_by_stored_date_only(make_event) -> None:
    standup = make_event(
        date="2024-03-01",
        start_time="09:00",
        end_time="09:30",
        recurrence_pattern="daily",
    )
    candidate = make_event(date="2024-03-05", start_time="09:00", end_time="10:00")

    assert conflicts_with(candidate, [standup]) == []


def test_expanded_conflicts_find_recurring_occurrences(make_event) -> None:
    standup = make_event(
        date="2024-03-01",
        start_time="09:00",
        end_time="09:30",
        recurrence_pattern="daily",
    )
    candidate = make_event(date="2024-03-05", start_time="09:00", end_time="10:00")

    assert conflicts_with(candidate, [standup], expand_recurrences=True) == [standup]


def test_expanded_conflicts_expand_the_candidate(make_event) -> None:
    weekly_review = make_event(
        date="2024-03-04",
        start_time="14:00",
        end_time="15:00",
        recurrence_pattern="weekly",
    )
    single = make_event(date="2024-03-11", start_time="14:30", end_time="16:00")

    assert conflicts_with(weekly_review, [single]) == []
    assert conflicts_with(weekly_review, [single], expand_recurrences=True) == [single]


def test_expanded_conflicts_still_need_overlapping_times(make_event) -> None:
    standup = make_event(
        date="2024-03-01",
        start_time="09:00",
        end_time="09:30",
        recurrence_pattern="daily",
    )
    candidate = make_event(date="2024-03-05", start_time="09:30", end_time="10:00")

    assert conflicts_with(candidate, [standup], expand_recurrences=True) == []


def test_malformed_existing_times_are_skipped(make_event) -> None:
    broken = make_event(start_time="9 o'clock", end_time="10:00")
    valid = make_event(start_time="09:30", end_time="10:30")
    candidate = make_event(start_time="09:00", end_time="10:00")

    assert conflicts_with(candidate, [broken, valid]) == [valid]


def test_malformed_candidate_has_no_conflicts(make_event) -> None:
    existing = make_event()

    assert conflicts_with(make_event(end_time="25:00"), [existing]) == []
    assert conflicts_with(make_event(date="someday"), [existing]) == []


def test_conflicts_keep_input_order(make_event) -> None:
    candidate = make_event(start_time="08:00", end_time="12:00")
    events = [
        make_event(title="b", start_time="11:00", end_time="11:30"),
        make_event(title="a", start_time="08:30", end_time="09:00"),
        make_event(title="c", start_time="12:00", end_time="13:00"),
    ]

    assert [event["title"] for event in conflicts_with(candidate, events)] == ["b", "a"]
