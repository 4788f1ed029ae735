"""
Services - Business Logic Layer

Each service wraps the queries for one entity and keeps the cross-entity
invariants:
- category_service: CRUD, unique business key, ordering
- topic_service: CRUD + keeps Category.topics[] in sync with Topic.category
- subtopic_service: CRUD + create-or-update under an existing topic
"""
from byteforge.services.category_service import CategoryService, category_service
from byteforge.services.topic_service import TopicService, topic_service
from byteforge.services.subtopic_service import SubTopicService, UpsertResult, subtopic_service

__all__ = [
    "CategoryService", "category_service",
    "TopicService", "topic_service",
    "SubTopicService", "UpsertResult", "subtopic_service",
]
