from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class AssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    score: int = Field(ge=0, le=100)
    missing_keywords: List[StrictStr]
    tailored_suggestions: List[StrictStr]

    @field_validator("score", mode="before")
    @classmethod
    def _score_must_be_number(cls, value: Any) -> Any:
        # bool is an int subclass; "85" would otherwise be coerced in lax mode
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("score must be a JSON number")
        if isinstance(value, float):
            if value != value or value in (float("inf"), float("-inf")):
                raise ValueError("score must be a finite number")
            if not 0 <= value <= 100:
                raise ValueError("score must be between 0 and 100")
            return round(value)
        return value


class AssessmentResponse(BaseModel):
    success: bool
    data: Optional[AssessmentResult] = None
    error: Optional[str] = None
