"""Common response schemas."""

from typing import Optional

from pydantic import BaseModel


class ServiceStatus(BaseModel):
    status: str
    service: str
    version: str
    message: Optional[str] = None
