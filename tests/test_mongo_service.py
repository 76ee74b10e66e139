"""Document serialization — ObjectIds become strings wherever they sit."""

from datetime import datetime, timezone

from bson import ObjectId

from cohort_api.services.mongo_service import serialize_doc


def test_serialize_converts_nested_object_ids():
    oid = ObjectId()
    doc = {
        "_id": oid,
        "cohort": {"_id": oid, "languages": ["English"]},
        "projects": [oid, {"owner": oid}, ["inner", oid], "plain"],
    }

    assert serialize_doc(doc) == {
        "_id": str(oid),
        "cohort": {"_id": str(oid), "languages": ["English"]},
        "projects": [str(oid), {"owner": str(oid)}, ["inner", str(oid)], "plain"],
    }


def test_serialize_marks_naive_dates_as_utc():
    doc = serialize_doc({"startDate": datetime(2023, 7, 3, 8, 0)})
    assert doc["startDate"] == datetime(2023, 7, 3, 8, 0, tzinfo=timezone.utc)
    assert doc["startDate"].tzinfo is not None


def test_serialize_none_is_none():
    assert serialize_doc(None) is None
