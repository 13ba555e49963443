from fastapi import FastAPI

from .activities import router as activities_router
from .auth import router as auth_router
from .notes import router as notes_router
from .notifications import router as notifications_router
from .tasks import router as tasks_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(tasks_router)
    app.include_router(notes_router)
    app.include_router(activities_router)
    app.include_router(notifications_router)
