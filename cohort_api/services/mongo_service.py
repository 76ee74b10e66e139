"""
MongoDB Service - CRUD operations for the cohort tools collections.

Collections in this database:
1. cohorts  - Class batches with program and schedule metadata
2. students - People, each optionally referencing one cohort

Services take the Database they work on, so routes can inject it and tests
can hand in an in-memory one. Store errors (PyMongoError) are not caught
here; the routes decide how to report them.
"""

from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from cohort_api.db.mongodb import get_collection
from cohort_api.utils.object_id import id_filter


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def _serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime) and value.tzinfo is None:
        # BSON dates are UTC; a client without tz_aware hands them back naive
        return value.replace(tzinfo=timezone.utc)
    if isinstance(value, dict):
        return serialize_doc(value)
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict, nested values included."""
    if doc is None:
        return None
    for key, value in doc.items():
        doc[key] = _serialize_value(value)
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


# ============================================================
# COHORTS COLLECTION
# ============================================================

class CohortService:
    """
    Handles cohort documents.
    A null field means "no value": it is never stored, so the sparse
    unique index on slug only sees real slugs.
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "cohorts")

    def list_all(self) -> List[dict]:
        """All cohorts, in insertion order."""
        return serialize_docs(list(self.collection.find({})))

    def get_by_id(self, cohort_id: ObjectId) -> Optional[dict]:
        return serialize_doc(self.collection.find_one({"_id": cohort_id}))

    def exists(self, cohort_id: ObjectId) -> bool:
        return self.collection.find_one({"_id": cohort_id}, {"_id": 1}) is not None

    def create(self, data: Dict[str, Any]) -> dict:
        """
        Insert a cohort document.

        Returns:
            The document as read back from the store, with its generated `_id`
        """
        doc = {key: value for key, value in data.items() if value is not None}
        result = self.collection.insert_one(doc)
        return self.get_by_id(result.inserted_id)

    def update(self, cohort_id: str, changes: Dict[str, Any]) -> Optional[dict]:
        """
        Partially update a cohort. Fields set to None are removed.
        Unknown ids match nothing and return None.
        """
        update = {}
        to_set = {key: value for key, value in changes.items() if value is not None}
        to_unset = {key: "" for key, value in changes.items() if value is None}
        if to_set:
            update["$set"] = to_set
        if to_unset:
            update["$unset"] = to_unset
        if not update:
            return serialize_doc(self.collection.find_one(id_filter(cohort_id)))
        doc = self.collection.find_one_and_update(
            id_filter(cohort_id),
            update,
            return_document=ReturnDocument.AFTER,
        )
        return serialize_doc(doc)

    def delete(self, cohort_id: str) -> bool:
        """Hard delete. Students referencing the cohort are left as they are."""
        result = self.collection.delete_one(id_filter(cohort_id))
        return result.deleted_count > 0


# ============================================================
# STUDENTS COLLECTION
# Reads populate the referenced cohort inline
# ============================================================

class StudentService:
    """
    Handles student documents.
    `cohort` is stored as an ObjectId and replaced by the full cohort
    document on every read.
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection(db, "students")
        self.cohorts: Collection = get_collection(db, "cohorts")

    def _populate_cohorts(self, students: List[dict]) -> List[dict]:
        """Replace each student's cohort reference with the cohort document."""
        refs = {s["cohort"] for s in students if isinstance(s.get("cohort"), ObjectId)}
        cohorts = {}
        if refs:
            cohorts = {c["_id"]: c for c in self.cohorts.find({"_id": {"$in": list(refs)}})}
        for student in students:
            if "cohort" in student and student["cohort"] is not None:
                # Dangling references populate to None
                student["cohort"] = cohorts.get(student["cohort"])
        return serialize_docs(students)

    def list_all(self) -> List[dict]:
        return self._populate_cohorts(list(self.collection.find({})))

    def list_by_cohort(self, cohort_id: ObjectId) -> List[dict]:
        """Students whose stored cohort reference equals cohort_id."""
        return self._populate_cohorts(list(self.collection.find({"cohort": cohort_id})))

    def get_by_id(self, student_id: ObjectId) -> Optional[dict]:
        doc = self.collection.find_one({"_id": student_id})
        if doc is None:
            return None
        return self._populate_cohorts([doc])[0]

    def create(self, data: Dict[str, Any]) -> dict:
        """
        Insert a student document.

        Args:
            data: Student fields; `cohort`, when present, is a hex id string

        Returns:
            The stored document as read back, `_id` and `cohort` as strings (not populated)
        """
        result = self.collection.insert_one(_with_cohort_ref(data))
        return serialize_doc(self.collection.find_one({"_id": result.inserted_id}))

    def update(self, student_id: str, changes: Dict[str, Any]) -> Optional[dict]:
        """Partially update a student. Unknown ids match nothing and return None."""
        if not changes:
            return serialize_doc(self.collection.find_one(id_filter(student_id)))
        doc = self.collection.find_one_and_update(
            id_filter(student_id),
            {"$set": _with_cohort_ref(changes)},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_doc(doc)

    def delete(self, student_id: str) -> bool:
        result = self.collection.delete_one(id_filter(student_id))
        return result.deleted_count > 0


def _with_cohort_ref(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of data with a string cohort id converted to ObjectId."""
    doc = dict(data)
    if isinstance(doc.get("cohort"), str):
        doc["cohort"] = ObjectId(doc["cohort"])
    return doc
