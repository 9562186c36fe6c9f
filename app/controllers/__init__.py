"""FastAPI routers acting as controllers in the MVC architecture."""

from . import meetings

__all__ = ["meetings"]
