"""API router aggregation. Mounted under /api by the app factory."""

from fastapi import APIRouter

from todo_api.api.endpoints import health, todos

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(todos.router, prefix="/todos", tags=["todos"])
