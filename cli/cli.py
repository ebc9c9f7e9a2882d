"""CLI for Simple Lifts.

Edit A/B templates, generate a plan, review sessions and log actual
weights from the terminal. Data is stored as JSON per user under
SIMPLE_LIFTS_DATA_DIR.
"""

import datetime as dt
from pathlib import Path
from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from simple_lifts.config.settings import settings
from simple_lifts.core.logger import setup_logger
from simple_lifts.persistence.repository import JsonFilePlanRepository
from simple_lifts.plans.errors import PlanError
from simple_lifts.plans.queries import get_next_session_date, get_sessions_between
from simple_lifts.plans.types import LoggedExercise, SessionDay, TemplateGroup, TemplateSet
from simple_lifts.services.plan_service import PlanService

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="simple-lifts",
    help="Simple Lifts - A/B strength plan with 5% weekly progression",
    add_completion=False,
)

USER_ID_OPTION = typer.Option(None, "--user-id", "-u", help="User ID (default: SIMPLE_LIFTS_USER_ID)")
DATA_DIR_OPTION = typer.Option(None, "--data-dir", help="Data directory (default: SIMPLE_LIFTS_DATA_DIR)")


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    """Configure logging before any command runs."""
    setup_logger(level="DEBUG" if debug else settings.log_level, log_file=settings.log_file)


def _get_service(data_dir: Path | None) -> PlanService:
    repository = JsonFilePlanRepository(data_dir or settings.data_dir)
    return PlanService(repository, horizon_weeks=settings.horizon_weeks)


def _user(user_id: str | None) -> str:
    return user_id or settings.default_user_id


def _parse_group(group: str) -> TemplateGroup:
    normalized = group.strip().upper()
    if normalized == "A":
        return "A"
    if normalized == "B":
        return "B"
    raise typer.BadParameter(f"Group must be A or B, got {group!r}")


def _parse_date(value: str | None) -> dt.date:
    if value is None:
        return dt.date.today()
    try:
        return dt.date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from e


def _fail(e: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(e))}", style="bold red")
    raise typer.Exit(1) from e


def _format_exercises(day: SessionDay) -> str:
    if not day.exercises:
        return "No workouts"
    return "\n".join(f"{escape(e.name)}: {e.weight} lbs" for e in day.exercises)


def _print_templates(templates: TemplateSet) -> None:
    for label, group in (("A", templates.group_a), ("B", templates.group_b)):
        table = Table(title=f"{label} Day Workouts")
        table.add_column("#", justify="right")
        table.add_column("Lift")
        table.add_column("Weight", justify="right")
        for index, template in enumerate(group):
            table.add_row(str(index), escape(template.name), f"{template.starting_weight} lbs")
        console.print(table)


def _parse_weights(day: SessionDay, entries: list[str]) -> list[LoggedExercise]:
    """Apply NAME=WEIGHT entries to a day's exercises.

    The k-th entry for a name updates the k-th occurrence of that name.
    Exercises without an entry keep their current weight.
    """
    exercises = list(day.exercises)
    seen: dict[str, int] = {}

    for entry in entries:
        name, sep, raw_weight = entry.rpartition("=")
        name = name.strip()
        if not sep or not name:
            raise typer.BadParameter(f"Expected NAME=WEIGHT, got {entry!r}")
        try:
            weight = int(raw_weight)
        except ValueError as e:
            raise typer.BadParameter(f"Weight must be an integer, got {raw_weight!r}") from e
        if weight < 0:
            raise typer.BadParameter(f"Weight must be >= 0, got {weight}")

        occurrence = seen.get(name, 0)
        positions = [i for i, exercise in enumerate(exercises) if exercise.name == name]
        if occurrence >= len(positions):
            raise typer.BadParameter(f"'{name}' is not scheduled on {day.key}")
        seen[name] = occurrence + 1
        exercises[positions[occurrence]] = LoggedExercise(name=name, weight=weight)

    return exercises


@app.command()
def templates(
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Show the A and B day templates."""
    service = _get_service(data_dir)
    try:
        result = service.get_templates(_user(user_id))
    except PlanError as e:
        _fail(e)
    _print_templates(result)


@app.command()
def add_exercise(
    group: str = typer.Argument(..., help="Template group (A or B)"),
    name: str = typer.Argument(..., help="Lift name"),
    weight: int = typer.Argument(0, min=0, help="Starting weight in lbs"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Add a lift to a template group."""
    service = _get_service(data_dir)
    try:
        result = service.add_template_exercise(_user(user_id), _parse_group(group), name, weight)
    except PlanError as e:
        _fail(e)
    _print_templates(result)


@app.command()
def update_exercise(
    group: str = typer.Argument(..., help="Template group (A or B)"),
    index: int = typer.Argument(..., help="Position within the group (0-based)"),
    name: str | None = typer.Option(None, "--name", help="New lift name"),
    weight: int | None = typer.Option(None, "--weight", min=0, help="New starting weight in lbs"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Rename a lift or change its starting weight."""
    service = _get_service(data_dir)
    try:
        result = service.update_template_exercise(
            _user(user_id),
            _parse_group(group),
            index,
            name=name,
            starting_weight=weight,
        )
    except PlanError as e:
        _fail(e)
    _print_templates(result)


@app.command()
def remove_exercise(
    group: str = typer.Argument(..., help="Template group (A or B)"),
    index: int = typer.Argument(..., help="Position within the group (0-based)"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Remove a lift from a template group."""
    service = _get_service(data_dir)
    try:
        result = service.remove_template_exercise(_user(user_id), _parse_group(group), index)
    except PlanError as e:
        _fail(e)
    _print_templates(result)


@app.command()
def generate(
    date: str | None = typer.Option(None, "--date", help="Reference date YYYY-MM-DD (default: today)"),
    weeks: int | None = typer.Option(None, "--weeks", min=1, help="Plan length in weeks"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Generate a new plan from the current templates."""
    service = _get_service(data_dir)
    try:
        plan = service.create_plan(_user(user_id), _parse_date(date), horizon_weeks=weeks)
    except PlanError as e:
        _fail(e)

    dates = plan.sorted_dates()
    console.print(
        Panel(
            f"{len(plan)} sessions from {dates[0]} to {dates[-1]}",
            title="Plan generated",
            border_style="green",
        )
    )


@app.command()
def show(
    start: str | None = typer.Option(None, "--from", help="First date YYYY-MM-DD"),
    end: str | None = typer.Option(None, "--to", help="Last date YYYY-MM-DD"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Show plan sessions, marking the next workout."""
    service = _get_service(data_dir)
    try:
        plan = service.get_plan(_user(user_id))
    except PlanError as e:
        _fail(e)

    next_date = get_next_session_date(plan, dt.date.today())
    sessions = get_sessions_between(
        plan,
        _parse_date(start) if start else None,
        _parse_date(end) if end else None,
    )

    table = Table(title="Your Plan")
    table.add_column("Date")
    table.add_column("Day")
    table.add_column("Lifts")
    for day in sessions:
        is_next = day.key == next_date
        table.add_row(
            f"{day.key} *" if is_next else day.key,
            day.day_label,
            _format_exercises(day),
            style="bold magenta" if is_next else None,
        )
    console.print(table)


@app.command(name="next")
def next_session(
    date: str | None = typer.Option(None, "--date", help="Reference date YYYY-MM-DD (default: today)"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Show the next session on or after a date."""
    service = _get_service(data_dir)
    try:
        day = service.get_next_session(_user(user_id), _parse_date(date))
    except PlanError as e:
        _fail(e)

    if day is None:
        console.print("[yellow]No sessions left in the plan. Generate a new one.[/yellow]")
        return
    console.print(Panel(_format_exercises(day), title=f"{day.day_label} {day.key}", border_style="magenta"))


@app.command()
def log(
    date: str = typer.Argument(..., help="Session date YYYY-MM-DD"),
    weights: list[str] = typer.Argument(..., help="Actual weights as NAME=WEIGHT"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Log actual weights for a session and update later sessions."""
    service = _get_service(data_dir)
    uid = _user(user_id)
    session_date = _parse_date(date)

    try:
        day = service.get_plan(uid).get(session_date)
        if day is None:
            console.print(f"[red]Error:[/red] No session scheduled on {session_date.isoformat()}", style="bold red")
            raise typer.Exit(1)
        plan = service.log_session(uid, session_date, _parse_weights(day, weights))
    except PlanError as e:
        _fail(e)

    logger.debug("Log command finished", user_id=uid, date=session_date.isoformat())
    console.print(Panel(_format_exercises(plan[session_date]), title=f"Logged {session_date.isoformat()}", border_style="green"))


@app.command()
def history(
    name: str = typer.Argument(..., help="Lift name"),
    user_id: str | None = USER_ID_OPTION,
    data_dir: Path | None = DATA_DIR_OPTION,
) -> None:
    """Show planned weights of one lift across the plan."""
    service = _get_service(data_dir)
    try:
        entries = service.get_exercise_history(_user(user_id), name)
    except PlanError as e:
        _fail(e)

    if not entries:
        console.print(f"[yellow]'{escape(name)}' is not in the plan.[/yellow]")
        return

    table = Table(title=escape(name))
    table.add_column("Date")
    table.add_column("Weight", justify="right")
    for key, weight in entries:
        table.add_row(key, f"{weight} lbs")
    console.print(table)


if __name__ == "__main__":
    app()
