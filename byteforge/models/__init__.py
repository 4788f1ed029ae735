"""
Database models - Export all models
"""
from byteforge.models.category import Category
from byteforge.models.topic import Topic, TopicLevel
from byteforge.models.subtopic import SubTopic

__all__ = [
    # Content
    "Category",
    "Topic",
    "SubTopic",

    # Enums
    "TopicLevel",
]
