from click.testing import CliRunner

import cli.devjourney_cmd as devjourney_cmd
from core.repositories import GoalRepository, WellnessRepository
from core.store import KeyedStore


def _runner(store, monkeypatch):
    monkeypatch.setattr(devjourney_cmd, "open_default_store", lambda: store)
    return CliRunner()


def test_add_goal_and_summary(store, monkeypatch):
    runner = _runner(store, monkeypatch)

    result = runner.invoke(devjourney_cmd.devjourney, ["add-goal", "Read SICP", "--priority", "high"])
    assert result.exit_code == 0
    assert "Read SICP" in result.output
    assert GoalRepository(store).list_goals()[0].text == "Read SICP"

    result = runner.invoke(devjourney_cmd.devjourney, ["summary"])
    assert "codingGoals: 1" in result.output


def test_add_goal_rejects_blank_text(store, monkeypatch):
    result = _runner(store, monkeypatch).invoke(devjourney_cmd.devjourney, ["add-goal", "  "])
    assert result.exit_code == 1
    assert GoalRepository(store).list_goals() == []


def test_log_activity_reports_stats(store, monkeypatch):
    result = _runner(store, monkeypatch).invoke(
        devjourney_cmd.devjourney, ["log-activity", "walk", "30", "--mood", "8"]
    )
    assert result.exit_code == 0
    assert "distance: 1.5km" in result.output
    assert len(WellnessRepository(store).list_activities()) == 1


def test_log_activity_bad_mood_fails(store, monkeypatch):
    result = _runner(store, monkeypatch).invoke(
        devjourney_cmd.devjourney, ["log-activity", "walk", "30", "--mood", "0"]
    )
    assert result.exit_code == 1
    assert WellnessRepository(store).list_activities() == []


def test_add_hours_export_and_reset(store, monkeypatch, tmp_path):
    runner = _runner(store, monkeypatch)

    assert runner.invoke(devjourney_cmd.devjourney, ["add-hours", "2.5"]).exit_code == 0

    result = runner.invoke(devjourney_cmd.devjourney, ["export", "--out", str(tmp_path)])
    assert result.exit_code == 0
    assert list(tmp_path.glob("devjourney-backup-*.json"))

    result = runner.invoke(devjourney_cmd.devjourney, ["reset", "--yes"])
    assert result.exit_code == 0
    assert store.keys() == []


def test_refused_write_exits_with_error(refusing, monkeypatch):
    store = KeyedStore(refusing)
    refusing.refuse()
    runner = _runner(store, monkeypatch)

    result = runner.invoke(devjourney_cmd.devjourney, ["add-goal", "Read SICP"])
    assert result.exit_code == 1
    assert GoalRepository(store).list_goals() == []

    result = runner.invoke(devjourney_cmd.devjourney, ["log-activity", "walk", "30"])
    assert result.exit_code == 1
    assert WellnessRepository(store).list_activities() == []
