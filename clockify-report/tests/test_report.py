"""Tests for the report command."""

import io
from datetime import date, datetime, time

import pytest

from clockify_report.clockify import ClockifyError, TimeEntry
from clockify_report.errors import CommandExit, ExitCode
from clockify_report.report import INVALID_INPUT_MESSAGE, format_summary, run_report
from clockify_report.timerange import ReportInput, TimeRange


def test_report_is_submitted_after_confirmation(make_context, client, capsys):
    arguments = ["-r", "9-18", "Remote work"]

    run_report(make_context(arguments), arguments, stdin=io.StringIO("y\n"))

    today = date.today()
    client.add_time_entry.assert_called_once_with("ws-default", TimeEntry(
        start=datetime.combine(today, time(9, 0)),
        end=datetime.combine(today, time(18, 0)),
        description="Remote work",
        project_id="pr-default",
    ))
    output = capsys.readouterr().out
    assert "Message: Remote work" in output
    assert "Type 'y' to report." in output
    assert "Time reported successfully!" in output


def test_uppercase_confirmation(make_context, client):
    arguments = ["-r", "9-18", "x"]
    run_report(make_context(arguments), arguments, stdin=io.StringIO("Y\n"))
    client.add_time_entry.assert_called_once()


@pytest.mark.parametrize("answer", ["", "\n", "n\n", "yes\n", " y\n", "y \n", "y\t\n"])
def test_anything_but_y_discards(make_context, client, answer):
    arguments = ["-r", "9-18", "x"]

    with pytest.raises(CommandExit) as excinfo:
        run_report(make_context(arguments), arguments, stdin=io.StringIO(answer))

    assert excinfo.value.exit_code is ExitCode.UNCONFIRMED_REPORT
    assert excinfo.value.code == 0
    assert not excinfo.value.is_error
    client.add_time_entry.assert_not_called()


def test_invalid_input_returns_without_exit(make_context, client, capsys):
    arguments = ["-r", "whenever", "x"]

    run_report(make_context(arguments), arguments, stdin=io.StringIO("y\n"))

    assert capsys.readouterr().out.strip() == INVALID_INPUT_MESSAGE
    client.get_workspaces.assert_not_called()
    client.add_time_entry.assert_not_called()


def test_overrides_after_trigger_are_not_part_of_message(make_context, client):
    arguments = ["-r", "--project=Meetings", "9:30-18:40", "03.06", "Weekly", "--workspace-id=ws-9"]

    run_report(make_context(arguments), arguments, stdin=io.StringIO("y\n"))

    workspace_id, entry = client.add_time_entry.call_args[0]
    assert workspace_id == "ws-9"
    assert entry.project_id == "pr-2"
    assert entry.description == "Weekly"
    assert entry.start == datetime(date.today().year, 6, 3, 9, 30)
    assert entry.end == datetime(date.today().year, 6, 3, 18, 40)


def test_submission_failure(make_context, client):
    client.add_time_entry.side_effect = ClockifyError("API error 400: bad request")
    arguments = ["-r", "9-18", "x"]

    with pytest.raises(CommandExit) as excinfo:
        run_report(make_context(arguments), arguments, stdin=io.StringIO("y\n"))

    assert excinfo.value.code == 8
    assert "API error 400: bad request" in excinfo.value.message


def test_resolution_failure_stops_before_prompt(make_context, capsys):
    arguments = ["-r", "9-18", "x"]
    context = make_context(["--workspace=ghost"] + arguments)

    with pytest.raises(CommandExit) as excinfo:
        run_report(context, arguments, stdin=io.StringIO("y\n"))

    assert excinfo.value.code == 3
    assert "Type 'y'" not in capsys.readouterr().out


def test_format_summary():
    report = ReportInput(
        time_range=TimeRange(start=datetime(2026, 6, 3, 9, 30), end=datetime(2026, 6, 3, 18, 40)),
        message="Meetings",
    )

    assert format_summary(report) == (
        "Summary:\n"
        "  - From: 09:30\n"
        "  - To: 18:40\n"
        "  - Date: 03 Jun 2026\n"
        "  - Message: Meetings"
    )
