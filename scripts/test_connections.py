#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the MongoDB connection is working.
Usage: python scripts/test_connections.py
"""
from cohort_api.db.mongodb import test_mongo_connection, get_mongo_db, COLLECTIONS
from cohort_api.core.config import get_settings


def main():
    settings = get_settings()
    print("=" * 50)
    print("COHORT TOOLS API - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if not test_mongo_connection():
        print("    ❌ MongoDB: FAILED")
        return 1
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Counting documents...")
    db = get_mongo_db()
    for name in COLLECTIONS.values():
        print(f"    {name}: {db[name].count_documents({})}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
