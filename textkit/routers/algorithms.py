"""Sorting and puzzle endpoints."""
import time
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request

from textkit.logging import get_logger, log_operation_result
from textkit.models import (
    MaxPathSumRequest,
    MaxPathSumResponse,
    SortRequest,
    SortResponse,
    TwoSumRequest,
    TwoSumResponse,
)
from textkit.puzzles import max_path_sum, two_sum
from textkit.settings import settings
from textkit.sorting import insertion_sort
from textkit.validation import (
    CallableValidator,
    TypeAdapterValidator,
    create_request_validator,
)

logger = get_logger()
router = APIRouter()


def _check_sort_body(data: Any) -> List[Dict[str, Any]]:
    """Every item must be an object carrying ``sort_key``."""
    if not isinstance(data, dict):
        return [{"message": "Body must be a JSON object", "type": "dict_type"}]

    issues = []
    sort_key = data.get("sort_key")
    items = data.get("items")
    if not isinstance(sort_key, str) or not sort_key:
        issues.append({"message": "sort_key must be a non-empty string", "field": ["sort_key"]})
    if not isinstance(items, list):
        issues.append({"message": "items must be a list", "field": ["items"], "type": "list_type"})
    if issues:
        return issues
    if len(items) > settings.max_sort_items:
        return [
            {
                "message": f"At most {settings.max_sort_items} items can be sorted, got {len(items)}",
                "field": ["items"],
                "type": "too_long",
            }
        ]

    for index, item in enumerate(items):
        if not isinstance(item, dict):
            issues.append(
                {"message": "Item must be an object", "field": ["items", index], "type": "dict_type"}
            )
        elif sort_key not in item:
            issues.append(
                {
                    "message": f"Item has no key {sort_key!r}",
                    "field": ["items", index, sort_key],
                    "type": "missing",
                }
            )
    return issues


def _check_matrix_body(data: Any) -> List[str]:
    """The matrix must be a non-empty rectangle of numbers."""
    matrix = data.get("matrix") if isinstance(data, dict) else None
    if not isinstance(matrix, list) or not matrix:
        return ["matrix must be a non-empty list of rows"]
    if not all(isinstance(row, list) for row in matrix):
        return ["every row of matrix must be a list"]
    widths = {len(row) for row in matrix}
    if 0 in widths:
        return ["matrix rows must not be empty"]
    if len(widths) > 1:
        return ["matrix rows must all have the same length"]
    for row in matrix:
        if any(isinstance(cell, bool) or not isinstance(cell, (int, float)) for cell in row):
            return ["matrix cells must be numbers"]
    return []


sort_validator = create_request_validator(CallableValidator(_check_sort_body))
matrix_validator = create_request_validator(CallableValidator(_check_matrix_body))
two_sum_validator = create_request_validator(TypeAdapterValidator(TwoSumRequest))


@router.post(
    "/sort",
    response_model=SortResponse,
    dependencies=[Depends(sort_validator.validate_body)],
)
async def sort_items(request: Request, body: SortRequest) -> SortResponse:
    """Insertion-sort objects by one of their keys."""
    start_time = time.time()
    request_id = request.state.request_id

    items = insertion_sort(body.items, body.sort_key)

    log_operation_result(
        logger=logger,
        request_id=request_id,
        upstream_trace_id=request.state.upstream_trace_id,
        operation="sort",
        timing_ms={"total": (time.time() - start_time) * 1000},
        item_count=len(items),
    )
    return SortResponse(request_id=request_id, items=items)


@router.post(
    "/puzzles/max-path-sum",
    response_model=MaxPathSumResponse,
    dependencies=[Depends(matrix_validator.validate_body)],
)
async def grid_max_path_sum(request: Request, body: MaxPathSumRequest) -> MaxPathSumResponse:
    """Largest left-to-right path total through a grid."""
    start_time = time.time()
    request_id = request.state.request_id

    result = max_path_sum(body.matrix)

    log_operation_result(
        logger=logger,
        request_id=request_id,
        upstream_trace_id=request.state.upstream_trace_id,
        operation="max_path_sum",
        timing_ms={"total": (time.time() - start_time) * 1000},
        item_count=len(body.matrix),
    )
    return MaxPathSumResponse(request_id=request_id, max_sum=result)


@router.post(
    "/puzzles/two-sum",
    response_model=TwoSumResponse,
    dependencies=[Depends(two_sum_validator.validate_body)],
)
async def pair_two_sum(request: Request, body: TwoSumRequest) -> TwoSumResponse:
    """Indices of two numbers adding up to the target."""
    start_time = time.time()
    request_id = request.state.request_id

    indices = two_sum(body.nums, body.target)

    log_operation_result(
        logger=logger,
        request_id=request_id,
        upstream_trace_id=request.state.upstream_trace_id,
        operation="two_sum",
        timing_ms={"total": (time.time() - start_time) * 1000},
        item_count=len(body.nums),
    )
    return TwoSumResponse(request_id=request_id, indices=indices)
