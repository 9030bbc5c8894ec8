"""HTTP routes over the match cache."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from matchfeed.cache import MatchCache
from matchfeed.errors import NotFound
from matchfeed.logging_utils import _warn

ENDPOINTS = [
    {
        "path": "/api/matches",
        "description": "Get live football matches data",
        "parameters": {"refresh": 'Set to "true" to force refresh the data (optional)'},
    },
    {
        "path": "/api/matches/details/:id",
        "description": "Get detailed information for a specific match",
        "parameters": {"id": "Match ID (required)"},
    },
]


def _truthy(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() == "true"


def create_app(cache: MatchCache) -> FastAPI:
    app = FastAPI(title="matchfeed", description="Live Football API")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.cache = cache

    @app.get("/")
    async def index() -> dict:
        return {"message": "Live Football API", "endpoints": ENDPOINTS}

    @app.get("/api/matches")
    async def list_matches(refresh: Optional[str] = Query(None)):
        try:
            snapshot = await cache.get_matches(force_refresh=_truthy(refresh))
        except Exception as e:
            _warn(f"api error: {e}")
            return JSONResponse(status_code=500, content={"error": "Failed to fetch matches data", "message": str(e)})
        return snapshot.to_dict()

    @app.get("/api/matches/details/{match_id}")
    async def match_details(match_id: str, query_id: Optional[str] = Query(None, alias="id")):
        wanted = query_id or match_id
        if not (wanted or "").strip():
            return JSONResponse(status_code=400, content={"error": "Match ID is required"})
        try:
            payload = await cache.get_details(wanted)
        except NotFound:
            return JSONResponse(status_code=404, content={"error": "Match not found"})
        except Exception as e:
            _warn(f"match details error: {e}")
            return JSONResponse(status_code=500, content={"error": "Failed to fetch match details", "message": str(e)})
        return payload.to_dict()

    return app
