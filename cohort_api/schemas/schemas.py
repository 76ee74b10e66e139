"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are camelCase because they are stored and returned verbatim.
"""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic_core import PydanticCustomError
from typing import Optional, List, Any
from datetime import datetime, timezone

from cohort_api.utils.object_id import is_valid_object_id, INVALID_ID_MESSAGE


# ============================================================
# COHORT SCHEMAS
# ============================================================

class CohortCreate(BaseModel):
    """Recognized cohort fields. Anything else in the body is ignored."""
    model_config = ConfigDict(extra="ignore")

    slug: Optional[str] = None
    name: Optional[str] = None
    program: Optional[str] = None
    languages: Optional[List[str]] = None
    format: Optional[str] = None
    campus: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    inProgress: Optional[bool] = None
    programManager: Optional[str] = None
    leadTeacher: Optional[str] = None
    totalHours: Optional[float] = None

    @field_validator("startDate", "endDate")
    @classmethod
    def dates_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        # The store keeps UTC; naive input is taken as UTC already
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class CohortUpdate(CohortCreate):
    """Same fields as create; only the ones sent are applied."""


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentBase(BaseModel):
    # Bodies are accepted verbatim, unknown fields included, except `_id`
    model_config = ConfigDict(extra="allow")

    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedinUrl: Optional[str] = None
    languages: Optional[List[str]] = None
    program: Optional[str] = None
    background: Optional[str] = None
    image: Optional[str] = None
    cohort: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def reject_identifier(cls, data: Any) -> Any:
        if isinstance(data, dict) and "_id" in data:
            raise PydanticCustomError("immutable_id", "The _id field is assigned by the store")
        return data

    @field_validator("cohort")
    @classmethod
    def cohort_must_be_object_id(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_object_id(v):
            raise PydanticCustomError("object_id", INVALID_ID_MESSAGE)
        return v


class StudentCreate(StudentBase):
    projects: List[Any] = []


class StudentUpdate(StudentBase):
    projects: Optional[List[Any]] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    error: str
