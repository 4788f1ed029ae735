"""
SubTopic schemas - Request/response bodies for subtopic routes

A subtopic is one lesson page of a topic. Its body is an ordered list of
typed content blocks, plus optional code examples, external resources and
quiz questions:

- content[]: {type: text|code|image|video, content, language?, url?, caption?, alt?}
- codeExamples[]: {title, code, language, description}
- resources[]: {title, url, type: tutorial|video|article|documentation|other, description, level}
- quizQuestions[]: {question, options[], correctAnswer (index into options), explanation, difficulty, timeLimit}
"""
from pydantic import Field, model_validator
from typing import Optional, List
from datetime import datetime
import enum

from byteforge.schemas.common import CamelModel, Slug


class ContentBlockType(str, enum.Enum):
    TEXT = "text"
    CODE = "code"
    IMAGE = "image"
    VIDEO = "video"


class ResourceType(str, enum.Enum):
    TUTORIAL = "tutorial"
    VIDEO = "video"
    ARTICLE = "article"
    DOCUMENTATION = "documentation"
    OTHER = "other"


# ============= NESTED DOCUMENTS =============

class ContentBlock(CamelModel):
    """One block of lesson content; media blocks may carry url/caption/alt"""
    type: ContentBlockType
    content: str
    language: Optional[str] = None  # code blocks
    url: Optional[str] = None       # image/video blocks
    caption: Optional[str] = None
    alt: Optional[str] = None


class CodeExample(CamelModel):
    title: Optional[str] = None
    code: Optional[str] = None
    language: Optional[str] = None
    description: Optional[str] = None


class Resource(CamelModel):
    title: Optional[str] = None
    url: Optional[str] = None
    type: Optional[ResourceType] = None
    description: Optional[str] = None
    level: Optional[str] = None


class QuizQuestion(CamelModel):
    question: str = Field(..., min_length=1)
    options: List[str] = Field(default_factory=list)
    correct_answer: int = Field(..., ge=0)
    explanation: Optional[str] = None
    difficulty: Optional[str] = None
    time_limit: Optional[int] = Field(None, ge=1, description="Seconds")

    @model_validator(mode="after")
    def answer_within_options(self):
        """correctAnswer must point at one of the options"""
        if self.options and self.correct_answer >= len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self


# ============= REQUEST SCHEMAS =============

class SubTopicUpsert(CamelModel):
    """
    Schema for POST /topics/{topicId}/subtopics

    The topic comes from the path; a `topicId` in the body is ignored.
    """
    subtopic_id: Slug = Field(..., examples=["introduction"])
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    estimated_time: str = Field(..., min_length=1, max_length=100, examples=["30 minutes"])
    content: List[ContentBlock] = Field(default_factory=list)
    code_examples: List[CodeExample] = Field(default_factory=list)
    resources: List[Resource] = Field(default_factory=list)
    quiz_questions: List[QuizQuestion] = Field(default_factory=list)


class SubTopicUpdate(CamelModel):
    """Schema for PUT /topics/subtopics/{id}; keys cannot change"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    estimated_time: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[List[ContentBlock]] = None
    code_examples: Optional[List[CodeExample]] = None
    resources: Optional[List[Resource]] = None
    quiz_questions: Optional[List[QuizQuestion]] = None


# ============= RESPONSE SCHEMAS =============

class SubTopicResponse(CamelModel):
    """SubTopic as returned by the API"""
    subtopic_id: str
    topic_id: str
    title: str
    description: str
    estimated_time: str
    content: List[ContentBlock] = []
    code_examples: List[CodeExample] = []
    resources: List[Resource] = []
    quiz_questions: List[QuizQuestion] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SubTopicUpsertResponse(CamelModel):
    """Body returned by POST /topics/{topicId}/subtopics"""
    subtopic: SubTopicResponse
    message: str


class SubTopicDeleteResponse(CamelModel):
    """Body returned by DELETE /topics/subtopics/{id}"""
    message: str
    subtopic: SubTopicResponse
