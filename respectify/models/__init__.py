"""Data models for the Respectify client."""

from .comment_score import CommentScore
from .credentials import CredentialCheckResult
from .http import RawResponse
from .topic import TopicHandle, is_valid_uuid

__all__ = [
    # Topic models
    "TopicHandle",
    "is_valid_uuid",
    # Evaluation models
    "CommentScore",
    # Credential models
    "CredentialCheckResult",
    # Transport models
    "RawResponse",
]
