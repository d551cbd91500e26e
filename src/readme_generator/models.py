import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class GenerateReadmeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    repo_url: str = Field(alias="repoUrl")


class ReadmeResponse(BaseModel):
    readme: str


class ErrorResponse(BaseModel):
    error: str


class UsageResponse(BaseModel):
    message: str
    method: Literal["POST"] = "POST"
    body: dict[str, str] = {"repoUrl": "https://github.com/owner/repo"}


class GenerationResult(BaseModel):
    """Outcome of a single generation request.

    Exactly one of ``readme`` or the failure metadata is meaningful: when the
    provider returned no usable text, ``finish_reason`` and ``feedback`` hold
    what it said about why, untouched.
    """

    readme: str | None = None
    finish_reason: str | None = None
    feedback: Any = None

    @property
    def ok(self) -> bool:
        return bool(self.readme)

    @property
    def reason(self) -> str:
        return (
            f"Reason: {self.finish_reason or 'Unknown'}. "
            f"Feedback: {json.dumps(self.feedback, default=str)}"
        )
