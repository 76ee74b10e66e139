#!/usr/bin/env python3
"""
Seed Script

Loads sample cohorts and students into MongoDB.
Students name their cohort by `cohortSlug`; it is resolved to the new
cohort's id before insert.

Run: python scripts/seed_data.py [--drop]
"""
import argparse
import json
from pathlib import Path

from cohort_api.db.mongodb import get_mongo_db, init_mongo_indexes, get_collection
from cohort_api.schemas.schemas import CohortCreate, StudentCreate
from cohort_api.services.mongo_service import CohortService, StudentService

DATA_DIR = Path(__file__).parent / "data"


def load(name: str) -> list:
    with open(DATA_DIR / name, encoding="utf-8") as f:
        return json.load(f)


def seed(db, drop: bool = False) -> dict:
    """Insert the sample data. Returns how many documents went in per collection."""
    if drop:
        get_collection(db, "students").delete_many({})
        get_collection(db, "cohorts").delete_many({})
    init_mongo_indexes(db)

    cohort_service = CohortService(db)
    student_service = StudentService(db)

    slug_to_id = {}
    for raw in load("cohorts.json"):
        cohort = cohort_service.create(CohortCreate(**raw).model_dump(exclude_unset=True))
        slug_to_id[cohort["slug"]] = cohort["_id"]

    students = 0
    for raw in load("students.json"):
        raw = dict(raw)
        slug = raw.pop("cohortSlug", None)
        if slug is not None:
            raw["cohort"] = slug_to_id[slug]
        doc = StudentCreate(**raw).model_dump(exclude_unset=True)
        doc.setdefault("projects", [])
        student_service.create(doc)
        students += 1

    return {"cohorts": len(slug_to_id), "students": students}


def main():
    parser = argparse.ArgumentParser(description="Seed the cohort tools database")
    parser.add_argument("--drop", action="store_true", help="delete existing cohorts and students first")
    args = parser.parse_args()

    counts = seed(get_mongo_db(), drop=args.drop)
    print(f"✅ Inserted {counts['cohorts']} cohorts and {counts['students']} students")


if __name__ == "__main__":
    main()
