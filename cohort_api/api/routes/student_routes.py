"""
Student Routes

GET /students - List all students (cohort populated)
GET /students/cohort/{cohort_id} - List students of one cohort (cohort populated)
GET /students/{student_id} - Get one student (cohort populated)
POST /students - Create student from the request body
PUT /students/{student_id} - Partial update (204)
DELETE /students/{student_id} - Delete (204)
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Response, status
from pymongo.database import Database
from pymongo.errors import PyMongoError

from cohort_api.api.error_handlers import store_failure
from cohort_api.api.routes.cohort_routes import get_cohort_service
from cohort_api.db.mongodb import get_mongo_db
from cohort_api.services.mongo_service import CohortService, StudentService
from cohort_api.utils.object_id import parse_object_id
from cohort_api.schemas.schemas import StudentCreate, StudentUpdate, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["Students"])


def get_student_service(db: Database = Depends(get_mongo_db)) -> StudentService:
    return StudentService(db)


def _check_cohort_reference(cohort_id, cohorts: CohortService) -> None:
    """A supplied cohort reference must name an existing cohort."""
    if cohort_id is None:
        return
    if not cohorts.exists(parse_object_id(cohort_id)):
        raise HTTPException(status_code=400, detail="Specified cohort does not exist")


@router.get("")
def list_students(service: StudentService = Depends(get_student_service)):
    try:
        students = service.list_all()
    except PyMongoError as e:
        raise store_failure("Failed to retrieve students", e)
    logger.debug("Retrieved %d students", len(students))
    return students


# Registered before /{student_id} so "cohort" is never taken for a student id
@router.get("/cohort/{cohort_id}", responses={400: {"model": ErrorResponse}})
def list_students_by_cohort(cohort_id: str, service: StudentService = Depends(get_student_service)):
    oid = parse_object_id(cohort_id)
    try:
        students = service.list_by_cohort(oid)
    except PyMongoError as e:
        raise store_failure("Failed to retrieve students", e)
    logger.debug("Retrieved %d students for cohort %s", len(students), cohort_id)
    return students


@router.get(
    "/{student_id}",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_student(student_id: str, service: StudentService = Depends(get_student_service)):
    oid = parse_object_id(student_id)
    try:
        student = service.get_by_id(oid)
    except PyMongoError as e:
        raise store_failure("Failed to retrieve student", e)
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.post("", responses={400: {"model": ErrorResponse}})
def create_student(
    data: StudentCreate,
    service: StudentService = Depends(get_student_service),
    cohorts: CohortService = Depends(get_cohort_service),
):
    """
    Create a student from the body as sent.

    `projects` defaults to an empty list. A `cohort` reference must be a
    well-formed id of an existing cohort.
    """
    doc = data.model_dump(exclude_unset=True)
    doc.setdefault("projects", [])
    try:
        _check_cohort_reference(doc.get("cohort"), cohorts)
        student = service.create(doc)
    except PyMongoError as e:
        raise store_failure("Failed to create student", e)
    logger.info("Created student %s", student["_id"])
    return student


@router.put("/{student_id}", status_code=204, response_class=Response)
def update_student(
    student_id: str,
    data: StudentUpdate,
    service: StudentService = Depends(get_student_service),
    cohorts: CohortService = Depends(get_cohort_service),
):
    """Apply the fields sent onto the student. Unknown ids are a silent no-op."""
    changes = data.model_dump(exclude_unset=True)
    try:
        _check_cohort_reference(changes.get("cohort"), cohorts)
        updated = service.update(student_id, changes)
    except PyMongoError as e:
        raise store_failure("Failed to update student", e)
    if updated is None:
        logger.info("Update matched no student for id %s", student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{student_id}", status_code=204, response_class=Response)
def delete_student(student_id: str, service: StudentService = Depends(get_student_service)):
    try:
        service.delete(student_id)
    except PyMongoError as e:
        raise store_failure("Failed to delete student", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
