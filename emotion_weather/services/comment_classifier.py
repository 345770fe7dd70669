"""Keyword-based sentiment buckets for citizen comments.

This is a lexical heuristic, not a trained model: each lexicon scores one
point per keyword found anywhere in the lower-cased text, and a question mark
counts as half a suggestion.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from emotion_weather.core.stats import rounded_percent
from emotion_weather.models.comment import (
    ClassifiedComment,
    Comment,
    CommentSummary,
    SentimentBucket,
)

NEGATIVE_KEYWORDS = (
    "concerned", "worry", "worried", "problem", "issue", "cost", "expensive", "waste",
    "against", "disagree", "oppose", "bad", "wrong", "terrible", "awful", "disappointed",
    "frustrated", "angry", "outraged", "unacceptable", "ridiculous", "stupid",
)

POSITIVE_KEYWORDS = (
    "great", "excellent", "amazing", "wonderful", "perfect", "love", "like", "support",
    "approve", "fantastic", "brilliant", "awesome", "good", "better", "best", "helpful",
    "beneficial", "important", "necessary", "exactly", "right", "correct", "smart",
)

SUGGESTION_KEYWORDS = (
    "suggest", "recommend", "should", "could", "might", "perhaps", "maybe", "consider",
    "what about", "why not", "how about", "idea", "proposal", "alternative", "instead",
    "better if", "improve", "enhancement", "modify", "change", "add", "include",
)

QUESTION_WEIGHT = 0.5


@dataclass(frozen=True)
class SentimentScores:
    negative: float
    positive: float
    suggestion: float


def _keyword_hits(text: str, keywords: Iterable[str]) -> int:
    return sum(1 for keyword in keywords if keyword in text)


def score_text(text: str) -> SentimentScores:
    content = text.lower()
    suggestion = float(_keyword_hits(content, SUGGESTION_KEYWORDS))
    if "?" in content:
        suggestion += QUESTION_WEIGHT
    return SentimentScores(
        negative=_keyword_hits(content, NEGATIVE_KEYWORDS),
        positive=_keyword_hits(content, POSITIVE_KEYWORDS),
        suggestion=suggestion,
    )


def classify_text(text: str) -> SentimentBucket:
    scores = score_text(text)
    if scores.suggestion > scores.negative and scores.suggestion > scores.positive:
        return SentimentBucket.SUGGESTION
    if scores.negative > scores.positive:
        return SentimentBucket.NEGATIVE
    # Equal nonzero negative and positive scores land here as positive.
    if scores.positive > 0:
        return SentimentBucket.POSITIVE
    return SentimentBucket.NEUTRAL


def classify_comment(comment: Comment) -> ClassifiedComment:
    return ClassifiedComment(**comment.model_dump(), category=classify_text(comment.content))


def summarize_comments(comments: list[Comment]) -> CommentSummary:
    """Group comments by bucket and report the share of each.

    The stored ``sentiment`` of each comment is ignored and left unchanged.
    """
    buckets: dict[SentimentBucket, list[ClassifiedComment]] = {
        bucket: [] for bucket in SentimentBucket
    }
    for comment in comments:
        classified = classify_comment(comment)
        buckets[classified.category].append(classified)

    total = len(comments)
    denominator = total or 1
    return CommentSummary(
        total=total,
        negative=buckets[SentimentBucket.NEGATIVE],
        positive=buckets[SentimentBucket.POSITIVE],
        suggestion=buckets[SentimentBucket.SUGGESTION],
        neutral=buckets[SentimentBucket.NEUTRAL],
        positive_percent=rounded_percent(len(buckets[SentimentBucket.POSITIVE]), denominator),
        concern_percent=rounded_percent(len(buckets[SentimentBucket.NEGATIVE]), denominator),
        suggestion_percent=rounded_percent(len(buckets[SentimentBucket.SUGGESTION]), denominator),
    )
