"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
application-scoped collaborators into routes.
"""

from fastapi import Request

from src.views import ViewResolver


def get_view_resolver(request: Request) -> ViewResolver:
    """
    Get view resolver from app state.

    The resolver is created by the application factory and stored in app.state.
    """
    return request.app.state.views
