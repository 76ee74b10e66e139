"""
Cohort Routes

GET /cohorts - List all cohorts
GET /cohorts/{cohort_id} - Get one cohort
POST /cohorts - Create cohort from recognized fields
PUT /cohorts/{cohort_id} - Partial update (204)
DELETE /cohorts/{cohort_id} - Delete (204)
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Depends, Response, status
from pymongo.database import Database
from pymongo.errors import PyMongoError

from cohort_api.api.error_handlers import store_failure
from cohort_api.db.mongodb import get_mongo_db
from cohort_api.services.mongo_service import CohortService
from cohort_api.utils.object_id import parse_object_id
from cohort_api.schemas.schemas import CohortCreate, CohortUpdate, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cohorts", tags=["Cohorts"])


def get_cohort_service(db: Database = Depends(get_mongo_db)) -> CohortService:
    return CohortService(db)


@router.get("", response_model=List[dict])
def list_cohorts(service: CohortService = Depends(get_cohort_service)):
    """All cohorts, no filter, no pagination."""
    try:
        cohorts = service.list_all()
    except PyMongoError as e:
        raise store_failure("Failed to retrieve cohorts", e)
    logger.debug("Retrieved %d cohorts", len(cohorts))
    return cohorts


@router.get(
    "/{cohort_id}",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_cohort(cohort_id: str, service: CohortService = Depends(get_cohort_service)):
    oid = parse_object_id(cohort_id)
    try:
        cohort = service.get_by_id(oid)
    except PyMongoError as e:
        raise store_failure("Failed to retrieve cohort", e)
    if cohort is None:
        raise HTTPException(status_code=404, detail="Cohort not found")
    return cohort


@router.post("")
def create_cohort(data: CohortCreate, service: CohortService = Depends(get_cohort_service)):
    """Create a cohort. Unrecognized fields are dropped, absent ones are not stored."""
    try:
        cohort = service.create(data.model_dump(exclude_unset=True))
    except PyMongoError as e:
        raise store_failure("Failed to create cohort", e)
    logger.info("Created cohort %s", cohort["_id"])
    return cohort


@router.put("/{cohort_id}", status_code=204, response_class=Response)
def update_cohort(cohort_id: str, data: CohortUpdate, service: CohortService = Depends(get_cohort_service)):
    """
    Apply the fields sent onto the cohort.

    The id format is not checked up front; an id that matches nothing
    leaves the store untouched and still answers 204.
    """
    try:
        updated = service.update(cohort_id, data.model_dump(exclude_unset=True))
    except PyMongoError as e:
        raise store_failure("Failed to update cohort", e)
    if updated is None:
        logger.info("Update matched no cohort for id %s", cohort_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{cohort_id}", status_code=204, response_class=Response)
def delete_cohort(cohort_id: str, service: CohortService = Depends(get_cohort_service)):
    try:
        service.delete(cohort_id)
    except PyMongoError as e:
        raise store_failure("Failed to delete cohort", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
