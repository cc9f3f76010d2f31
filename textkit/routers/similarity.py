"""Similarity endpoints."""
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from textkit.logging import get_logger, log_operation_result
from textkit.models import SimilarityRequest, SimilarityResponse
from textkit.settings import settings
from textkit.similarity import ngram_match, ngrams
from textkit.validation import (
    CallableValidator,
    PydanticModelValidator,
    create_request_validator,
)

logger = get_logger()
router = APIRouter()


class NgramQuery(BaseModel):
    """Query string of the n-gram listing endpoint."""

    substring_length: int = Field(settings.default_substring_length, ge=1)


def _check_text_param(params: Dict[str, Any]) -> List[str]:
    text = params.get("text", "")
    if len(text) > settings.max_input_length:
        return [f"text is longer than {settings.max_input_length} characters"]
    return []


similarity_validator = create_request_validator(PydanticModelValidator(SimilarityRequest))
ngram_query_validator = create_request_validator(PydanticModelValidator(NgramQuery))
ngram_params_validator = create_request_validator(CallableValidator(_check_text_param))


def _score(request: Request, first: str, second: str,
           substring_length: Optional[int], case_sensitive: Optional[bool]) -> SimilarityResponse:
    start_time = time.time()
    request_id = request.state.request_id

    if substring_length is None:
        substring_length = settings.default_substring_length
    if case_sensitive is None:
        case_sensitive = settings.default_case_sensitive

    result = ngram_match(first, second, substring_length, case_sensitive)
    timing_ms = {"total": (time.time() - start_time) * 1000}

    log_operation_result(
        logger=logger,
        request_id=request_id,
        upstream_trace_id=request.state.upstream_trace_id,
        operation="similarity",
        timing_ms=timing_ms,
        score=result.score,
        input_lens=[len(first), len(second)],
    )

    return SimilarityResponse(
        request_id=request_id,
        similarity=result.score,
        matches=result.matches,
        adjusted_length=result.adjusted_length,
        substring_length=substring_length,
        case_sensitive=case_sensitive,
        timing_ms=timing_ms,
    )


@router.post(
    "/similarity",
    response_model=SimilarityResponse,
    dependencies=[Depends(similarity_validator.validate_body)],
)
async def similarity_from_body(request: Request, body: SimilarityRequest) -> SimilarityResponse:
    """Score two strings passed in the JSON body."""
    return _score(request, body.first, body.second, body.substring_length, body.case_sensitive)


@router.get(
    "/similarity",
    response_model=SimilarityResponse,
    dependencies=[Depends(similarity_validator.validate_query)],
)
async def similarity_from_query(
    request: Request,
    first: str,
    second: str,
    substring_length: Optional[int] = None,
    case_sensitive: Optional[bool] = None,
) -> SimilarityResponse:
    """Score two strings passed in the query string."""
    return _score(request, first, second, substring_length, case_sensitive)


@router.get(
    "/ngrams/{text}",
    dependencies=[
        Depends(ngram_params_validator.validate_params),
        Depends(ngram_query_validator.validate_query),
    ],
)
async def list_ngrams(
    request: Request, text: str, substring_length: int = settings.default_substring_length
) -> Dict[str, Any]:
    """List the n-grams of a single string."""
    return {
        "request_id": request.state.request_id,
        "substring_length": substring_length,
        "ngrams": ngrams(text, substring_length),
    }
