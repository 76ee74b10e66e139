"""
Cohort Tools API
REST API for bootcamp cohorts and the students enrolled in them.

Architecture:
- MongoDB: cohorts and students collections
- Students reference a cohort by ObjectId; reads populate it inline
"""

__version__ = "1.0.0"
