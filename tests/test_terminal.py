# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest
from typer.testing import CliRunner
from yaml import dump

from gridcal import configuration
from gridcal.repository.configuration import ConfigurationRepository
from gridcal.repository.event import EventRepository
from gridcal.terminal import configuration as configuration_commands
from gridcal.terminal import event as event_commands
from gridcal.terminal import view as view_commands
from gridcal.terminal.app import app

runner = CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def event_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> EventRepository:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(dump(configuration.get_default_configuration()))
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)

    config_repo = ConfigurationRepository()
    event_repo = EventRepository(tmp_path / "events.yaml", "calendar-events")
    for module in (event_commands, view_commands, configuration_commands):
        monkeypatch.setattr(module, "CONFIGURATION_REPO", config_repo)
    for module in (event_commands, view_commands):
        monkeypatch.setattr(module, "EVENT_REPO", event_repo)
    return event_repo


def _add(*args: str, input: str | None = None):
    return runner.invoke(app, ["--no-header", "event", "add", *args], input=input)


def test_add_event(event_repo: EventRepository) -> None:
    result = _add("Dentist", "-d", "2024-03-05", "-s", "9:00", "-e", "9:45", "-c", "health")

    assert result.exit_code == 0, result.output
    [event] = event_repo.get_all_events()
    assert event["title"] == "Dentist"
    assert event["start_time"] == "09:00"
    assert event["end_time"] == "09:45"
    assert event["category"] == "health"
    assert event["recurring"] is False


def test_add_recurring_event(event_repo: EventRepository) -> None:
    result = _add(
        "Standup", "-d", "2024-03-01", "-s", "09:00", "-e", "09:15", "-r", "weekly", "-i", "2"
    )

    assert result.exit_code == 0, result.output
    [event] = event_repo.get_all_events()
    assert event["recurring"] is True
    assert event["recurrence_pattern"] == "weekly"
    assert event["recurrence_interval"] == 2


def test_add_rejects_end_before_start(event_repo: EventRepository) -> None:
    result = _add("Backwards", "-d", "2024-03-05", "-s", "10:00", "-e", "09:00")

    assert result.exit_code == 2
    assert event_repo.get_all_events() == []


def test_add_rejects_unknown_category(event_repo: EventRepository) -> None:
    result = _add("Thing", "-s", "10:00", "-e", "11:00", "-c", "chores")

    assert result.exit_code == 2


def test_conflict_declined_is_not_saved(event_repo: EventRepository) -> None:
    _add("Existing", "-d", "2024-03-05", "-s", "09:00", "-e", "10:00")

    result = _add("Clash", "-d", "2024-03-05", "-s", "09:30", "-e", "09:45", input="n\n")

    assert result.exit_code == 1
    assert "conflicts with 1 existing event" in result.output
    assert [event["title"] for event in event_repo.get_all_events()] == ["Existing"]


def test_conflict_forced_is_saved(event_repo: EventRepository) -> None:
    _add("Existing", "-d", "2024-03-05", "-s", "09:00", "-e", "10:00")

    result = _add("Clash", "-d", "2024-03-05", "-s", "09:30", "-e", "09:45", "--force")

    assert result.exit_code == 0, result.output
    assert len(event_repo.get_all_events()) == 2


def test_back_to_back_event_needs_no_confirmation(event_repo: EventRepository) -> None:
    _add("Existing", "-d", "2024-03-05", "-s", "09:00", "-e", "10:00")

    result = _add("Next", "-d", "2024-03-05", "-s", "10:00", "-e", "11:00")

    assert result.exit_code == 0, result.output
    assert len(event_repo.get_all_events()) == 2


def test_modify_event_does_not_conflict_with_itself(event_repo: EventRepository) -> None:
    _add("Meeting", "-d", "2024-03-05", "-s", "09:00", "-e", "10:00")
    [event] = event_repo.get_all_events()

    result = runner.invoke(
        app, ["--no-header", "event", "modify", event["id"], "-e", "10:30", "-t", "Longer"]
    )

    assert result.exit_code == 0, result.output
    modified = event_repo.get_event(event["id"])
    assert modified["title"] == "Longer"
    assert modified["end_time"] == "10:30"


def test_move_and_delete_event(event_repo: EventRepository) -> None:
    _add("Movable", "-d", "2024-03-05", "-s", "09:00", "-e", "10:00")
    [event] = event_repo.get_all_events()

    moved = runner.invoke(app, ["--no-header", "event", "move", event["id"][:8], "2024-03-07"])
    assert moved.exit_code == 0, moved.output
    assert event_repo.get_event(event["id"])["date"] == "2024-03-07"

    deleted = runner.invoke(app, ["--no-header", "event", "delete", event["id"], "--yes"])
    assert deleted.exit_code == 0, deleted.output
    assert event_repo.get_all_events() == []


def test_unknown_id_is_rejected(event_repo: EventRepository) -> None:
    result = runner.invoke(app, ["--no-header", "event", "show", "missing"])

    assert result.exit_code == 2


def test_month_view(event_repo: EventRepository) -> None:
    _add("Standup", "-d", "2024-03-01", "-s", "09:00", "-e", "09:15", "-r", "daily")

    result = runner.invoke(app, ["--no-header", "view", "month", "2024-03"])

    assert result.exit_code == 0, result.output
    assert "March 2024" in result.output
    assert "Standup" in result.output


def test_day_view_lists_recurring_occurrences(event_repo: EventRepository) -> None:
    _add("Review", "-d", "2024-03-04", "-s", "14:00", "-e", "15:00", "-r", "weekly")

    on_occurrence = runner.invoke(app, ["--no-header", "view", "day", "2024-03-11"])
    off_occurrence = runner.invoke(app, ["--no-header", "view", "day", "2024-03-12"])

    assert "Review" in on_occurrence.output
    assert "Review" not in off_occurrence.output


def test_sample_requires_dev_mode(event_repo: EventRepository) -> None:
    refused = runner.invoke(app, ["--no-header", "event", "sample"])
    assert refused.exit_code == 2

    runner.invoke(app, ["--no-header", "config", "set", "--dev-mode"])
    added = runner.invoke(app, ["--no-header", "event", "sample"])

    assert added.exit_code == 0, added.output
    assert "Added 3 sample event(s)" in added.output
    assert len(event_repo.get_all_events()) == 3


def test_interval_is_stored_as_expanded(event_repo: EventRepository) -> None:
    result = _add(
        "Rare", "-d", "2024-03-01", "-s", "09:00", "-e", "10:00", "-r", "daily", "-i", "10000"
    )

    assert result.exit_code == 0, result.output
    [event] = event_repo.get_all_events()
    assert event["recurrence_interval"] == 365


def test_incomplete_event_is_not_checked_for_conflicts(
    event_repo: EventRepository,
) -> None:
    event_repo.data_path.write_text(
        "calendar-events:\n"
        "- id: untitled\n"
        "  title: ''\n"
        "  date: '2024-03-05'\n"
        "  start_time: '09:00'\n"
        "  end_time: '10:00'\n"
        "- id: titled\n"
        "  title: Titled\n"
        "  date: '2024-03-05'\n"
        "  start_time: '09:30'\n"
        "  end_time: '10:30'\n"
    )

    incomplete = runner.invoke(app, ["--no-header", "event", "conflicts", "untitled"])
    complete = runner.invoke(app, ["--no-header", "event", "conflicts", "titled"])

    assert incomplete.exit_code == 0, incomplete.output
    assert "Titled" not in incomplete.output
    assert "untitled" in complete.output


def test_hand_written_unquoted_event_is_shown_and_listed(
    event_repo: EventRepository,
) -> None:
    event_repo.data_path.write_text(
        "calendar-events:\n"
        "- id: manual\n"
        "  title: Unquoted\n"
        "  date: 2024-03-05\n"
        "  start_time: 9:00\n"
        "  end_time: 10:00\n"
    )
    _add("Quoted", "-d", "2024-03-06", "-s", "09:00", "-e", "10:00")

    shown = runner.invoke(app, ["--no-header", "event", "show", "manual"])
    listed = runner.invoke(app, ["--no-header", "event", "list"])

    assert shown.exit_code == 0, shown.output
    assert "2024-03-05" in shown.output
    assert "09:00-10:00" in shown.output
    assert listed.exit_code == 0, listed.output
    assert listed.output.index("Unquoted") < listed.output.index("Quoted")
