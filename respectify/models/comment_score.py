"""Comment evaluation data models."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict


class CommentScore(BaseModel):
    """Evaluation of a single comment against a topic.

    The phrase and fallacy lists hold the service's entries exactly as
    decoded. Validation is strict: "yes", 0 or "2" are rejected rather
    than coerced to bool or int.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    logical_fallacies: List[Any]
    objectionable_phrases: List[Any]
    negative_tone_phrases: List[Any]
    appears_low_effort: bool
    is_spam: bool
    overall_score: int
