"""
Questions API Router.

Endpoints for the analysis engine:
- Classify a single question
- Build topic insights and summary over a question snapshot

Stateless: the caller sends the full snapshot on every insights request.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from config import get_settings
from tutor_insights.analysis import (
    DifficultyTier,
    InsightAggregator,
    Question,
    Theme,
    classify,
    summarize,
)

router = APIRouter()


# ========================================
# Request/Response Models
# ========================================


class ClassifyRequest(BaseModel):
    """Request model for classifying a question."""

    content: str = Field(..., min_length=1, description="Question text")
    theme: str | None = Field(None, description="Theme id, e.g. pure-math")


class ClassificationResponse(BaseModel):
    """Response model for a classification."""

    category: str
    difficulty: DifficultyTier
    concepts: list[str]


class QuestionPayload(BaseModel):
    """A question in an insights request; classified here if concepts are missing."""

    content: str = Field(..., min_length=1)
    theme: str | None = None
    id: str | None = None
    category: str | None = None
    difficulty: DifficultyTier | None = None
    concepts: list[str] | None = None


class InsightsRequest(BaseModel):
    """Request model for topic insights."""

    questions: list[QuestionPayload] = Field(default_factory=list)


class TopicInsightResponse(BaseModel):
    concept: str
    frequency: int
    difficulty: DifficultyTier
    common_questions: list[str]
    suggested_introduction: str


class SummaryResponse(BaseModel):
    total_questions: int
    unique_concepts: int
    categories: int
    category_counts: dict[str, int]
    difficulty_counts: dict[str, int]
    trending_topics: int


class InsightsResponse(BaseModel):
    insights: list[TopicInsightResponse]
    summary: SummaryResponse


# ========================================
# Helpers
# ========================================


def _to_question(payload: QuestionPayload, default_theme: str) -> Question:
    theme = Theme.parse(payload.theme or default_theme)
    extra = {"id": payload.id} if payload.id else {}

    if payload.concepts is None:
        return Question.from_classification(
            payload.content, theme, classify(payload.content, theme), **extra
        )

    return Question(
        content=payload.content,
        theme=theme,
        category=payload.category,
        difficulty=payload.difficulty,
        concepts=tuple(payload.concepts),
        **extra,
    )


# ========================================
# Endpoints
# ========================================


@router.post("/classify", response_model=ClassificationResponse)
def classify_question(request: ClassifyRequest) -> ClassificationResponse:
    """Classify a question under a theme."""
    theme = request.theme or get_settings().default_theme
    result = classify(request.content, theme)
    return ClassificationResponse(**result.to_dict())


@router.post("/insights", response_model=InsightsResponse)
def question_insights(request: InsightsRequest) -> InsightsResponse:
    """Aggregate a question snapshot into ranked topic insights."""
    settings = get_settings()
    questions = [_to_question(q, settings.default_theme) for q in request.questions]

    aggregator = InsightAggregator(sample_size=settings.insight_sample_size)
    insights = aggregator.analyze(questions)
    summary = summarize(questions, insights, settings.trending_threshold)

    return InsightsResponse(
        insights=[TopicInsightResponse(**insight.to_dict()) for insight in insights],
        summary=SummaryResponse(**summary.to_dict()),
    )
