import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.exceptions import ValidationError
from core.logger import get_logger
from web.backend.routers import api, goals, music, quotes, wellness

logger = get_logger("api")


def create_app() -> FastAPI:
    app = FastAPI(title="DevJourney API", version="1.0")

    raw_origins = os.getenv("DEVJOURNEY_ALLOWED_ORIGINS", "*")
    allow_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    allow_credentials = "*" not in allow_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "DevJourney"}

    app.include_router(api.router, prefix="/api/v1", tags=["api"])
    app.include_router(goals.router, prefix="/api/v1", tags=["coding"])
    app.include_router(wellness.router, prefix="/api/v1/wellness", tags=["wellness"])
    app.include_router(quotes.router, prefix="/api/v1/quotes", tags=["quotes"])
    app.include_router(music.router, prefix="/api/v1/music", tags=["music"])

    @app.get("/")
    async def root():
        return {
            "message": "DevJourney API is running",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
