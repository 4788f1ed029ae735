"""
Topics Router - API endpoints for topics

=== WHAT IT SOLVES ===
1. Topic browser lists every topic, or the topics of one category
2. Topic detail page loads one topic by its business key
3. Content tooling creates, moves and deletes topics

=== LOGIC ===
- POST /topics → topic id is appended to its category's `topics`
- PUT /topics/{id} with a new `category` → topic moves between categories
- DELETE /topics/{id} → topic id is pulled from its category
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from byteforge.database import get_db
from byteforge.schemas.topic import (
    TopicCreate, TopicUpdate, TopicResponse, TopicDeleteResponse,
    TopicBulkError, TopicBulkResponse
)
from byteforge.services import topic_service

router = APIRouter(
    prefix="/topics",
    tags=["Topics"]
)


# ============================================================
# GET /topics - List topics
# ============================================================
@router.get("", response_model=List[TopicResponse])
def get_topics(db: Session = Depends(get_db)):
    """
    📋 LIST TOPICS

    Most recently updated first. An empty store returns [].
    """
    return [TopicResponse.model_validate(t) for t in topic_service.list(db)]


# ============================================================
# GET /topics/category/{category_id} - Topics of a category
# ============================================================
@router.get("/category/{category_id}", response_model=List[TopicResponse])
def get_topics_by_category(category_id: str, db: Session = Depends(get_db)):
    """
    📂 TOPICS OF ONE CATEGORY

    Logic:
    1. 404 if the category does not exist
    2. Topics whose `category` equals category_id, newest first

    Note: reads `Topic.category`, not `Category.topics[]`.
    """
    return [TopicResponse.model_validate(t) for t in topic_service.list_by_category(db, category_id)]


# ============================================================
# GET /topics/{topic_id} - Topic detail
# ============================================================
@router.get("/{topic_id}", response_model=TopicResponse)
def get_topic(topic_id: str, db: Session = Depends(get_db)):
    """📖 GET ONE TOPIC (404 if missing)"""
    return TopicResponse.model_validate(topic_service.get_by_id(db, topic_id))


# ============================================================
# POST /topics - Create topic
# ============================================================
@router.post("", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
def create_topic(topic_data: TopicCreate, db: Session = Depends(get_db)):
    """
    ➕ CREATE TOPIC

    Logic:
    1. 409 if the topic id exists
    2. 404 if the category does not exist (nothing written)
    3. Insert topic + append its id to the category, one transaction
    """
    topic = topic_service.create(db, topic_data.model_dump(mode="json"))
    return TopicResponse.model_validate(topic)


@router.post("/bulk", response_model=TopicBulkResponse)
def create_topics_bulk(topics_data: List[TopicCreate], db: Session = Depends(get_db)):
    """
    📦 CREATE MANY TOPICS

    Each topic is created on its own; failures are reported per id and
    do not stop the rest.
    """
    results = topic_service.create_many(db, [t.model_dump(mode="json") for t in topics_data])
    return TopicBulkResponse(
        created=[TopicResponse.model_validate(t) for t in results["created"]],
        errors=[TopicBulkError(**e) for e in results["errors"]]
    )


@router.put("/{topic_id}", response_model=TopicResponse)
def update_topic(topic_id: str, topic_data: TopicUpdate, db: Session = Depends(get_db)):
    """
    ✏️ UPDATE TOPIC

    A different `category` moves the topic: pulled from the old category,
    appended to the new one (404 if the new one does not exist).
    """
    topic = topic_service.update(db, topic_id, topic_data.model_dump(mode="json", exclude_unset=True))
    return TopicResponse.model_validate(topic)


@router.delete("/{topic_id}", response_model=TopicDeleteResponse)
def delete_topic(topic_id: str, db: Session = Depends(get_db)):
    """🗑️ DELETE TOPIC - also removed from its category; subtopics stay"""
    topic = topic_service.delete(db, topic_id)
    return TopicDeleteResponse(
        message="Topic deleted successfully",
        deleted_topic=TopicResponse.model_validate(topic)
    )
