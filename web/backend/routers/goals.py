from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from core.models import GoalFilter, Priority
from core.repositories import GoalRepository, LanguageRepository, filter_goals
from web.backend import deps

router = APIRouter()


class GoalCreateRequest(BaseModel):
    text: str
    priority: Priority = Priority.MEDIUM


class LanguageCreateRequest(BaseModel):
    name: str


class ProgressUpdateRequest(BaseModel):
    value: float
    relative: bool = False


class HoursRequest(BaseModel):
    hours: float


def _goals() -> GoalRepository:
    return GoalRepository(deps.get_store())


def _languages() -> LanguageRepository:
    return LanguageRepository(deps.get_store())


@router.get("/goals")
def list_goals(filter: GoalFilter = GoalFilter.ALL):
    repo = _goals()
    goals = repo.list_goals()
    return {
        "goals": [g.to_dict() for g in filter_goals(goals, filter)],
        "summary": repo.summary(),
    }


@router.post("/goals", status_code=201)
def add_goal(req: GoalCreateRequest):
    goal = deps.require_saved(_goals().add_goal(req.text, req.priority), "Goal")
    return goal.to_dict()


@router.post("/goals/{goal_id}/toggle")
def toggle_goal(goal_id: int):
    goals = _goals().toggle_goal(goal_id)
    match = next((g for g in goals if g.id == goal_id), None)
    if match is None:
        raise HTTPException(status_code=404, detail=f"Goal {goal_id} not found")
    return match.to_dict()


@router.delete("/goals/{goal_id}")
def delete_goal(goal_id: int):
    remaining = _goals().delete_goal(goal_id)
    return {"success": True, "remaining": len(remaining)}


@router.get("/languages")
def list_languages():
    return {"languages": [l.to_dict() for l in _languages().list_languages()]}


@router.post("/languages", status_code=201)
def add_language(req: LanguageCreateRequest):
    return deps.require_saved(_languages().add_language(req.name), "Language").to_dict()


@router.put("/languages/{language_id}/progress")
def update_progress(language_id: int, req: ProgressUpdateRequest):
    lang = _languages().update_progress(language_id, req.value, relative=req.relative)
    if lang is None:
        raise HTTPException(status_code=404, detail=f"Language {language_id} not found")
    return lang.to_dict()


@router.post("/languages/{language_id}/hours")
def log_language_hours(language_id: int, req: HoursRequest):
    lang = _languages().log_hours(language_id, req.hours)
    if lang is None:
        raise HTTPException(status_code=404, detail=f"Language {language_id} not found")
    return lang.to_dict()
