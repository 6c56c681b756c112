"""
StudyConnect Backend
Opportunity board where organizations publish posts and students browse them.

Architecture:
- MongoDB: students (credentials + CV), organizations, posts
- FastAPI routers under /api, one per resource
"""

__version__ = "1.0.0"
