from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from core.repositories import UserQuoteRepository
from web.backend import deps

router = APIRouter()


class QuoteCreateRequest(BaseModel):
    content: str
    author: str
    tags: List[str] = Field(default_factory=list)


@router.get("/random")
def random_quote():
    return deps.get_quotes_client().fetch_random_quote()


@router.get("/tag/{tag}")
def quotes_by_tag(tag: str, limit: int = 5):
    return {"quotes": deps.get_quotes_client().fetch_quotes_by_tag(tag, limit)}


@router.get("/authors/{slug}")
def author_info(slug: str):
    author: Optional[dict] = deps.get_quotes_client().fetch_author(slug)
    if author is None:
        raise HTTPException(status_code=404, detail=f"Author '{slug}' unavailable")
    return author


@router.get("/user")
def list_user_quotes():
    repo = UserQuoteRepository(deps.get_store())
    return {"quotes": [q.to_dict() for q in repo.list_quotes()]}


@router.post("/user", status_code=201)
def add_user_quote(req: QuoteCreateRequest):
    repo = UserQuoteRepository(deps.get_store())
    return deps.require_saved(repo.add_quote(req.content, req.author, req.tags), "Quote").to_dict()


@router.delete("/user/{quote_id}")
def delete_user_quote(quote_id: int):
    remaining = UserQuoteRepository(deps.get_store()).delete_quote(quote_id)
    return {"remaining": len(remaining)}
