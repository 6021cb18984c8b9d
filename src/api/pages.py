"""
Page routes.

Maps URL paths to logical view names rendered by the view resolver.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.api.dependencies import get_view_resolver
from src.views import ViewResolver

HOME_VIEW = "home"

router = APIRouter(tags=["pages"])


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Homepage",
    description="Render the homepage template.",
)
async def home(
    request: Request,
    views: ViewResolver = Depends(get_view_resolver),
) -> HTMLResponse:
    """Display the homepage at the root URL."""
    return views.render(request, HOME_VIEW)
