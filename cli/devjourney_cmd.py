"""
CLI command: devjourney
Quick logging and data maintenance from the terminal.
"""
import json
import sys
from pathlib import Path

import click

# Add project root to sys.path so core can be imported when run as a script
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from core.data_tools import get_data_summary, reset_all_data, write_export
from core.exceptions import DevJourneyError
from core.repositories import DailyStatsRepository, GoalRepository, WellnessRepository
from core.store import open_default_store
from core.utils import get_mood_emoji
from interface.clients import QuotesClient


def _fail(error: DevJourneyError):
    click.echo(f"❌ {error.get_user_message()}", err=True)
    sys.exit(1)


def _not_saved(what: str):
    click.echo(f"❌ {what} could not be saved; check the data directory", err=True)
    sys.exit(1)


@click.group()
def devjourney():
    """DevJourney: coding hours, goals and wellness from the terminal"""
    pass


@devjourney.command()
def summary():
    """Show counts for every stored entity group"""
    data = get_data_summary(open_default_store())
    click.echo("📊 DevJourney data summary")
    for key, value in data.items():
        click.echo(f"  {key}: {json.dumps(value) if isinstance(value, dict) else value}")


@devjourney.command()
@click.option("--out", "out_dir", type=click.Path(file_okay=False, path_type=Path),
              default=Path("."), show_default=True, help="Directory for the backup file")
def export(out_dir: Path):
    """Write a JSON backup of all data"""
    target = write_export(open_default_store(), out_dir)
    click.echo(f"✅ Data exported to {target}")


@devjourney.command()
@click.confirmation_option(prompt="⚠️ This permanently deletes all DevJourney data. Continue?")
def reset():
    """Delete all stored data"""
    removed = reset_all_data(open_default_store())
    click.echo(f"✅ All DevJourney data has been reset ({len(removed)} keys removed)")


@devjourney.command("add-hours")
@click.argument("hours", type=float)
def add_hours(hours: float):
    """Log coding hours for today"""
    try:
        stats = DailyStatsRepository(open_default_store()).add_coding_hours(hours)
    except DevJourneyError as e:
        _fail(e)
    click.echo(f"⏱️ Today: {stats.today_hours:.2f}h")


@devjourney.command("add-goal")
@click.argument("text")
@click.option("--priority", type=click.Choice(["low", "medium", "high"]), default="medium",
              show_default=True)
def add_goal(text: str, priority: str):
    """Add a coding goal"""
    try:
        goal = GoalRepository(open_default_store()).add_goal(text, priority)
    except DevJourneyError as e:
        _fail(e)
    if goal is None:
        _not_saved("Goal")
    click.echo(f"🎯 Added goal #{goal.id}: {goal.text} ({goal.priority.value})")


@devjourney.command("log-activity")
@click.argument("activity_type", type=click.Choice(["walk", "exercise", "meditation", "music"]))
@click.argument("duration", type=float)
@click.option("--mood", type=int, default=8, show_default=True, help="Mood from 1 to 10")
@click.option("--notes", default="", help="Free text notes")
def log_activity(activity_type: str, duration: float, mood: int, notes: str):
    """Log a wellness activity (duration in minutes)"""
    repo = WellnessRepository(open_default_store())
    try:
        activity = repo.add_activity(activity_type, duration, mood, notes)
    except DevJourneyError as e:
        _fail(e)
    if activity is None:
        _not_saved("Activity")
    stats = repo.get_stats()
    click.echo(f"{get_mood_emoji(mood)} Logged {activity_type} ({duration:g} min)")
    click.echo(
        f"  walks: {stats.total_walks} | distance: {stats.total_distance}km | "
        f"avg mood: {stats.average_mood}/10 | streak: {stats.streak_days}d"
    )


@devjourney.command()
def quote():
    """Print a motivational quote"""
    data = QuotesClient().fetch_random_quote()
    click.echo(f"💬 \"{data['content']}\"")
    click.echo(f"   — {data['author']}")


if __name__ == "__main__":
    devjourney()
