"""Response envelope for the meeting processing endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.services.response_contract import ProcessingResult


class ProcessingResponse(BaseModel):
    """Either ``data`` on success or ``error`` on failure, never both."""

    success: bool
    data: Optional[ProcessingResult] = None
    error: Optional[str] = None
    is_demo: Optional[bool] = Field(default=None, alias="isDemo")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def ok(cls, result: ProcessingResult, *, is_demo: bool = False) -> "ProcessingResponse":
        return cls(success=True, data=result, is_demo=True if is_demo else None)

    @classmethod
    def failure(cls, message: str) -> "ProcessingResponse":
        return cls(success=False, error=message)

    def to_payload(self) -> dict:
        """Serialise with camelCase keys, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
