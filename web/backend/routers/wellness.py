from fastapi import APIRouter
from pydantic import BaseModel

from core.models import ActivityType
from core.repositories import WellnessRepository
from web.backend import deps

router = APIRouter()


class ActivityCreateRequest(BaseModel):
    type: ActivityType
    duration: float
    mood: int
    notes: str = ""


def _wellness() -> WellnessRepository:
    return WellnessRepository(deps.get_store())


@router.get("/activities")
def list_activities():
    repo = _wellness()
    return {
        "activities": [a.to_dict() for a in repo.list_activities()],
        "stats": repo.get_stats().to_dict(),
    }


@router.post("/activities", status_code=201)
def add_activity(req: ActivityCreateRequest):
    repo = _wellness()
    activity = deps.require_saved(
        repo.add_activity(req.type, req.duration, req.mood, req.notes), "Activity"
    )
    return {"activity": activity.to_dict(), "stats": repo.get_stats().to_dict()}


@router.delete("/activities/{activity_id}")
def delete_activity(activity_id: int):
    repo = _wellness()
    remaining = repo.delete_activity(activity_id)
    return {"remaining": len(remaining), "stats": repo.get_stats().to_dict()}


@router.get("/stats")
def get_stats():
    return _wellness().get_stats().to_dict()
