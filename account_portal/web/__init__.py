"""Server-rendered account pages."""

from .pages import router

__all__ = ["router"]
