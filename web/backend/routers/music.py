from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from core.repositories import MusicRepository
from web.backend import deps

router = APIRouter()


class MusicActivityRequest(BaseModel):
    type: str = "listen"
    duration: float = 0
    genre: Optional[str] = None
    artist: Optional[str] = None
    track: Optional[str] = None


@router.get("/playlists")
def playlists():
    return {"playlists": deps.get_music_client().fetch_playlists()}


@router.get("/playlists/{playlist_id}/tracks")
def playlist_tracks(playlist_id: int):
    return {"tracks": deps.get_music_client().fetch_playlist_tracks(playlist_id)}


@router.get("/search")
def search(q: str):
    return {"tracks": deps.get_music_client().search(q)}


@router.get("/recommendations")
def recommendations(activity: str = "general"):
    return {"tracks": deps.get_music_client().recommendations(activity)}


@router.get("/stats")
def listening_stats():
    return MusicRepository(deps.get_store()).get_stats().to_dict()


@router.post("/activities")
def track_activity(req: MusicActivityRequest):
    stats = MusicRepository(deps.get_store()).track_activity(
        req.type, req.duration, genre=req.genre, artist=req.artist, track=req.track
    )
    return stats.to_dict()
