"""
FastAPI dependencies shared by the v1 endpoints.

The services are created once per application in ``create_app`` and
kept on ``app.state``.  Handlers receive them through these
dependencies, which keeps separate app instances (e.g. in tests)
fully isolated from each other.
"""

from fastapi import Request

from ..core.config import Settings
from ..services.exhibition_service import ExhibitionService
from ..services.user_service import UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_exhibition_service(request: Request) -> ExhibitionService:
    return request.app.state.exhibition_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
