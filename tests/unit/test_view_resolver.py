"""
Unit tests for ViewResolver.

Tests view name to template mapping and failure on unknown views.
"""

from pathlib import Path

import pytest
from fastapi.templating import Jinja2Templates

from src.config.settings import FRONTEND_DIR
from src.views import ViewError, ViewNotFound, ViewResolver


@pytest.fixture
def resolver() -> ViewResolver:
    """Resolver over the packaged frontend templates."""
    return ViewResolver(Jinja2Templates(directory=FRONTEND_DIR))


class TestResolve:
    """Tests for resolve method."""

    def test_home_resolves_to_home_html(self, resolver: ViewResolver) -> None:
        """home view maps to home.html."""
        assert resolver.resolve("home") == "home.html"

    def test_unknown_view_raises(self, resolver: ViewResolver) -> None:
        """Unknown view raises ViewNotFound carrying the view name."""
        with pytest.raises(ViewNotFound) as exc_info:
            resolver.resolve("missing")
        assert exc_info.value.view_name == "missing"
        assert "missing" in str(exc_info.value)

    def test_custom_suffix(self, tmp_path: Path) -> None:
        """Suffix is appended to the view name."""
        (tmp_path / "home.jinja").write_text("<p>{{ view }}</p>")
        resolver = ViewResolver(Jinja2Templates(directory=tmp_path), suffix=".jinja")
        assert resolver.resolve("home") == "home.jinja"

    def test_suffix_is_not_optional(self, tmp_path: Path) -> None:
        """A template without the suffix does not satisfy the view."""
        (tmp_path / "home").write_text("<p>bare</p>")
        resolver = ViewResolver(Jinja2Templates(directory=tmp_path))
        with pytest.raises(ViewNotFound):
            resolver.resolve("home")


class TestExceptions:
    """Tests for view exception hierarchy."""

    def test_view_not_found_is_view_error(self) -> None:
        """ViewNotFound inherits from ViewError."""
        assert issubclass(ViewNotFound, ViewError)
        assert issubclass(ViewError, Exception)
