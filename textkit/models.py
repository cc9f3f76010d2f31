"""Pydantic models for request/response schemas."""
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from textkit.settings import settings


# Validation
class ValidationIssue(BaseModel):
    """One problem found by a schema validator."""

    message: str
    field: Optional[Union[str, List[Union[str, int]]]] = None
    type: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of validating one piece of request data."""

    success: bool
    errors: List[ValidationIssue] = []


# Similarity
class SimilarityRequest(BaseModel):
    """Similarity request body."""

    first: str = Field(..., max_length=settings.max_input_length)
    second: str = Field(..., max_length=settings.max_input_length)
    substring_length: Optional[int] = Field(None, ge=1)
    case_sensitive: Optional[bool] = None


class SimilarityResponse(BaseModel):
    """Similarity response."""

    request_id: str
    similarity: float
    matches: int
    adjusted_length: int
    substring_length: int
    case_sensitive: bool
    timing_ms: Dict[str, float]


# Sorting
class SortRequest(BaseModel):
    """Sort request body."""

    items: List[Dict[str, Any]] = Field(..., max_length=settings.max_sort_items)
    sort_key: str = Field(..., min_length=1)


class SortResponse(BaseModel):
    """Sort response."""

    request_id: str
    items: List[Dict[str, Any]]


# Puzzles
class MaxPathSumRequest(BaseModel):
    """Grid path sum request body."""

    matrix: List[List[float]]


class MaxPathSumResponse(BaseModel):
    """Grid path sum response."""

    request_id: str
    max_sum: float


class TwoSumRequest(BaseModel):
    """Two-sum request body."""

    nums: List[float]
    target: float


class TwoSumResponse(BaseModel):
    """Two-sum response."""

    request_id: str
    indices: Optional[Tuple[int, int]] = None
