"""API v1 router aggregator."""

from fastapi import APIRouter

from app.api.v1.endpoints import forum, forum_comments

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(forum.router)
api_router.include_router(forum_comments.router)

# Unversioned base path the web client calls (`/api/forum/...`)
client_router = APIRouter(prefix="/api", include_in_schema=False)

client_router.include_router(forum.router)
client_router.include_router(forum_comments.router)

__all__ = ["api_router", "client_router"]
