"""
Shared schema building blocks

- Slug: validated business key (Category.id, Topic.id, SubTopic.subtopicId).
  Human readable and stable across re-seeding, e.g. "java-basics".
- CamelModel: base model that reads snake_case or camelCase and writes
  camelCase, matching the JSON the frontend sends and expects.
"""
from pydantic import BaseModel, StringConstraints
from pydantic.alias_generators import to_camel
from typing import Annotated


SLUG_PATTERN = r"^[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*$"

Slug = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100, pattern=SLUG_PATTERN),
]


class CamelModel(BaseModel):
    """Base schema with camelCase aliases on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True