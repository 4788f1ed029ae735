"""
Schemas package initialization - Export all Pydantic schemas
"""
from byteforge.schemas.common import CamelModel, Slug, SLUG_PATTERN

# Category schemas
from byteforge.schemas.category import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryDeleteResponse
)

# Topic schemas
from byteforge.schemas.topic import (
    TopicCreate, TopicUpdate, TopicResponse, TopicDeleteResponse,
    TopicBulkError, TopicBulkResponse
)

# SubTopic schemas
from byteforge.schemas.subtopic import (
    ContentBlock, ContentBlockType, CodeExample, Resource, ResourceType, QuizQuestion,
    SubTopicUpsert, SubTopicUpdate, SubTopicResponse,
    SubTopicUpsertResponse, SubTopicDeleteResponse
)

__all__ = [
    # Common
    "CamelModel", "Slug", "SLUG_PATTERN",

    # Category
    "CategoryCreate", "CategoryUpdate", "CategoryResponse", "CategoryDeleteResponse",

    # Topic
    "TopicCreate", "TopicUpdate", "TopicResponse", "TopicDeleteResponse",
    "TopicBulkError", "TopicBulkResponse",

    # SubTopic
    "ContentBlock", "ContentBlockType", "CodeExample", "Resource", "ResourceType", "QuizQuestion",
    "SubTopicUpsert", "SubTopicUpdate", "SubTopicResponse",
    "SubTopicUpsertResponse", "SubTopicDeleteResponse",
]
