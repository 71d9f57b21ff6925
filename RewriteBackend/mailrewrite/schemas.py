"""Request/response schemas for the rewrite endpoint.

Holds Pydantic models to validate the inbound ``{"text": ...}`` payload
and to shape the mutually exclusive ``{"result": ...}`` /
``{"error": ...}`` responses.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator
from pydantic import ValidationError as PydanticValidationError

from mailrewrite.errors import ValidationError


class RewriteRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: StrictStr = Field(..., min_length=1, description="Draft text to rewrite")

    @classmethod
    def from_payload(cls, payload: Any) -> "RewriteRequest":
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError("text is required") from e


class RewriteResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: Optional[str] = Field(None, description="Rewritten text on success")
    error: Optional[str] = Field(None, description="Failure description")

    @model_validator(mode="after")
    def _exactly_one(self) -> "RewriteResponse":
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result or error must be set.")
        return self

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)
