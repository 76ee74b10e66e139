"""
Schemas module - Request/Response schemas for API endpoints.
"""
from cohort_api.schemas.schemas import (
    CohortCreate, CohortUpdate, StudentCreate, StudentUpdate, ErrorResponse
)

__all__ = ["CohortCreate", "CohortUpdate", "StudentCreate", "StudentUpdate", "ErrorResponse"]
