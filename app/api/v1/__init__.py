"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    auth,
    exercises,
    folders,
    health,
    progression,
    recovery,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(folders.router, tags=["folders"])
api_router.include_router(exercises.router, tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(progression.router, prefix="/progression", tags=["progression"])
api_router.include_router(recovery.router, prefix="/recovery", tags=["recovery"])
