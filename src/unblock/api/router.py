"""Main API router."""

from fastapi import APIRouter

from unblock.api.puzzle import router as puzzle_router

api_router = APIRouter()
api_router.include_router(puzzle_router)
