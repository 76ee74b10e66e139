"""Seed script — loads the sample JSON and links students to cohorts by slug."""

import importlib.util
from pathlib import Path

from bson import ObjectId

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "seed_data.py"


def _load_seed_module():
    spec = importlib.util.spec_from_file_location("seed_data", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_seed_links_students_to_cohorts(db):
    seed_data = _load_seed_module()

    counts = seed_data.seed(db)

    assert counts == {"cohorts": 2, "students": 3}
    paris = db.cohorts.find_one({"slug": "ft-wd-paris-2023-07-03"})
    christine = db.students.find_one({"firstName": "Christine"})
    assert christine["cohort"] == paris["_id"]
    assert isinstance(christine["cohort"], ObjectId)
    assert "cohortSlug" not in christine
    lena = db.students.find_one({"firstName": "Lena"})
    assert "cohort" not in lena
    assert lena["projects"] == []


def test_seed_with_drop_replaces_existing_data(db):
    seed_data = _load_seed_module()

    seed_data.seed(db)
    seed_data.seed(db, drop=True)

    assert db.cohorts.count_documents({}) == 2
    assert db.students.count_documents({}) == 3
