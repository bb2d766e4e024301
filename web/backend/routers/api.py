from fastapi import APIRouter
from pydantic import BaseModel

from core.data_tools import export_user_data, get_data_summary, reset_all_data
from core.overview import build_overview
from core.repositories import DailyStatsRepository
from web.backend import deps

router = APIRouter()


class CodingHoursRequest(BaseModel):
    hours: float


@router.get("/overview")
def get_overview():
    return build_overview(deps.get_store())


@router.get("/daily-stats")
def get_daily_stats():
    return DailyStatsRepository(deps.get_store()).get().to_dict()


@router.post("/daily-stats/hours")
def add_coding_hours(req: CodingHoursRequest):
    return DailyStatsRepository(deps.get_store()).add_coding_hours(req.hours).to_dict()


@router.get("/github/{username}")
def github_profile(username: str):
    client = deps.get_github_client()
    return {
        "profile": client.fetch_profile(username),
        "repos": client.fetch_repos(username),
        "activity": client.fetch_activity(username),
    }


@router.get("/github/trending/{language}")
def github_trending(language: str, limit: int = 5):
    return {"repos": deps.get_github_client().fetch_trending(language, limit)}


@router.get("/data/export")
def export_data():
    return export_user_data(deps.get_store())


@router.get("/data/summary")
def data_summary():
    return get_data_summary(deps.get_store())


@router.post("/data/reset")
def reset_data():
    removed = reset_all_data(deps.get_store())
    return {"success": True, "removed": removed}
