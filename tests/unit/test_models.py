"""Unit tests for Respectify data models."""

import pytest
from pydantic import ValidationError

from respectify.models import CommentScore, CredentialCheckResult, RawResponse, is_valid_uuid


@pytest.mark.parametrize("value", [
    "2b38cb35-e3d7-492f-b600-c3858f186300",
    "2B38CB35-E3D7-492F-B600-C3858F186300",
    "{2b38cb35-e3d7-492f-b600-c3858f186300}",
])
def test_is_valid_uuid(value):
    """Test UUID-formatted handles are accepted."""
    assert is_valid_uuid(value) is True


@pytest.mark.parametrize("value", [
    "1234",
    "",
    "2b38cb35e3d7492fb600c3858f186300",
    "2b38cb35-e3d7-492f-b600-c3858f18630g",
    None,
])
def test_is_valid_uuid_rejects(value):
    """Test malformed handles are rejected."""
    assert is_valid_uuid(value) is False


def test_comment_score_is_frozen():
    """Test CommentScore cannot be modified after construction."""
    score = CommentScore(
        logical_fallacies=[],
        objectionable_phrases=[],
        negative_tone_phrases=[],
        appears_low_effort=False,
        is_spam=False,
        overall_score=3,
    )

    with pytest.raises(ValidationError):
        score.overall_score = 5


def test_comment_score_requires_all_fields():
    """Test CommentScore has no optional fields."""
    with pytest.raises(ValidationError):
        CommentScore(logical_fallacies=[], overall_score=3)


def test_credential_check_result_is_a_pair():
    """Test CredentialCheckResult unpacks and compares as a tuple."""
    result = CredentialCheckResult(success=True, info="")

    success, info = result
    assert success is True
    assert info == ""
    assert result == (True, "")


def test_raw_response_success_range():
    """Test is_success covers exactly the 2xx range."""
    assert RawResponse(status_code=200).is_success
    assert RawResponse(status_code=299).is_success
    assert not RawResponse(status_code=199).is_success
    assert not RawResponse(status_code=300).is_success
