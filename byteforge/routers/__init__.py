"""
API routers - All API endpoints
"""
from byteforge.routers import categories
from byteforge.routers import subtopics
from byteforge.routers import topics

__all__ = [
    "categories",
    "subtopics",
    "topics",
]
