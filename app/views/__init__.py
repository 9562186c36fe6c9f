"""Pydantic schemas used as views in the MVC architecture."""

from .common import ServiceStatus
from .meetings import ProcessingResponse

__all__ = [
    "ProcessingResponse",
    "ServiceStatus",
]
