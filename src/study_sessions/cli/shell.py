"""CLI: study shell — numbered menu over a SessionLedger."""

import click
from rich.console import Console
from rich.markup import escape

from study_sessions.errors import StudySessionError
from study_sessions.formatting import DEFAULT_TIME_FORMAT, format_clock, format_duration
from study_sessions.ledger import SessionLedger
from study_sessions.models.session import Subject

MENU = """
Options:
1. Start a new study session
2. End a study session
3. View active sessions
4. View completed sessions
5. View study statistics
6. Exit"""

GOODBYE = "Thank you for using Study Session Manager. Goodbye!"


def _ask(text: str) -> str:
    # Empty answers are allowed; click would otherwise re-prompt.
    return click.prompt(text, default="", show_default=False).strip()


class StudyShell:
    def __init__(self, ledger: SessionLedger, console: Console, time_format: str = DEFAULT_TIME_FORMAT):
        self._ledger = ledger
        self._console = console
        self._time_format = time_format
        self._actions = {
            "1": self.start_session,
            "2": self.end_session,
            "3": self.view_active,
            "4": self.view_completed,
            "5": self.view_statistics,
        }

    def _say(self, text: str = "") -> None:
        self._console.print(text, markup=False, highlight=False, emoji=False)

    def run(self) -> None:
        self._say("Welcome to Study Session Manager!")
        self._say("=================================")
        try:
            while True:
                self._say(MENU)
                choice = _ask("\nEnter your choice (1-6)")
                if choice == "6":
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._say("Invalid choice. Please try again.")
                    continue
                action()
        except click.Abort:
            self._say()
        self._say(GOODBYE)

    def start_session(self) -> None:
        name = _ask("\nEnter subject name")
        description = _ask("Enter subject description")
        session = self._ledger.start_session(Subject(name=name, description=description))
        self._say(
            f"Started study session #{session.id} for {session.subject.name} "
            f"at {format_clock(session.start_time, self._time_format)}"
        )

    def end_session(self) -> None:
        active = self._ledger.get_active_sessions()
        if not active:
            self._say("No active sessions to end.")
            return

        self._say("\nActive sessions:")
        for s in active:
            self._say(f"#{s.id} - {s.subject.name} (started at {format_clock(s.start_time, self._time_format)})")

        raw_id = _ask("\nEnter session ID to end")
        try:
            session_id = int(raw_id)
        except ValueError:
            self._say("Invalid ID. Please enter a number.")
            return

        notes = _ask("Enter session notes")
        try:
            self._ledger.end_session(session_id, notes)
        except StudySessionError as e:
            self._console.print(f"[red]Error ending session: {escape(str(e))}[/red]", highlight=False)
            return

        session = self._ledger.get_session_by_id(session_id)
        self._say(
            f"Ended study session #{session_id} for {session.subject.name}. "
            f"Duration: {format_duration(session.duration)}"
        )

    def view_active(self) -> None:
        sessions = self._ledger.get_active_sessions()
        if not sessions:
            self._say("\nNo active study sessions.")
            return

        now = self._ledger.now()
        self._say("\nActive study sessions:")
        self._say("---------------------")
        for s in sessions:
            self._say(f"#{s.id} - {s.subject.name}")
            self._say(f"    Started: {format_clock(s.start_time, self._time_format)}")
            self._say(f"    Running for: {format_duration(s.elapsed(now))}")
            self._say()

    def view_completed(self) -> None:
        sessions = self._ledger.get_completed_sessions()
        if not sessions:
            self._say("\nNo completed study sessions.")
            return

        self._say("\nCompleted study sessions:")
        self._say("------------------------")
        for s in sessions:
            self._say(f"#{s.id} - {s.subject.name}")
            self._say(f"    Duration: {format_duration(s.duration)}")
            self._say(f"    Notes: {s.notes}")
            self._say()

    def view_statistics(self) -> None:
        self._say("\nStudy Statistics:")
        self._say("----------------")
        self._say(f"Total study time: {format_duration(self._ledger.get_total_study_time())}")

        self._say("\nTime by subject:")
        for name in self._ledger.get_subject_names():
            subject_time = self._ledger.get_subject_study_time(name)
            if subject_time:
                self._say(f"- {name}: {format_duration(subject_time)}")


@click.command("shell")
@click.pass_context
def shell_cmd(ctx: click.Context):
    """Interactive study session menu."""
    obj = ctx.ensure_object(dict)
    ledger = obj["ledger"] if "ledger" in obj else SessionLedger()
    cfg = obj.get("config", {})
    time_format = cfg.get("time_format")
    if not isinstance(time_format, str):
        time_format = DEFAULT_TIME_FORMAT
    console = obj.get("console") or Console(soft_wrap=True)
    StudyShell(ledger, console, time_format=time_format).run()
