"""
View exceptions - Errors raised while resolving logical view names.
"""


class ViewError(Exception):
    """Base class for view resolution errors."""

    pass


class ViewNotFound(ViewError):
    """No template exists for the requested view."""

    def __init__(self, view_name: str) -> None:
        super().__init__(f"No template for view '{view_name}'")
        self.view_name = view_name
