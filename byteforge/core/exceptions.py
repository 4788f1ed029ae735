"""
Domain errors raised by the content services

The HTTP layer maps each kind to a status code (see byteforge.main):
- NotFoundError          -> 404
- DuplicateKeyError      -> 409
- ContentValidationError -> 400
"""
from typing import List, Optional


class ContentError(Exception):
    """Base class for content service errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ContentError):
    """A record looked up by business key does not exist"""

    entity = "Record"

    def __init__(self, key: Optional[str] = None, message: Optional[str] = None):
        self.key = key
        if message is None:
            message = f"{self.entity} not found" if key is None else f"{self.entity} with ID {key} not found"
        super().__init__(message)


class CategoryNotFound(NotFoundError):
    entity = "Category"


class TopicNotFound(NotFoundError):
    entity = "Topic"


class SubTopicNotFound(NotFoundError):
    entity = "Subtopic"


class DuplicateKeyError(ContentError):
    """A record with the same business key already exists"""

    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with ID {key} already exists")


class ContentValidationError(ContentError):
    """Input is missing required fields or is otherwise unusable"""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        self.fields = fields or []
        super().__init__(message)
