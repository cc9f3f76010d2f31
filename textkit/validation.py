"""Request validation dependencies backed by pluggable schema validators.

A validator is anything with ``validate(data) -> ValidationResult``. Three
adapters are provided: pydantic models, arbitrary types through
``pydantic.TypeAdapter``, and plain check functions.

``create_request_validator`` turns a validator into FastAPI dependencies::

    checker = create_request_validator(PydanticModelValidator(SimilarityRequest))

    @router.post("/similarity", dependencies=[Depends(checker.validate_body)])
    async def compute(...): ...
"""
import json
from typing import Any, Callable, Iterable, List, Literal, Optional, Protocol, Type, Union

from fastapi import Request
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from textkit import errors
from textkit.logging import get_logger
from textkit.models import ValidationIssue, ValidationResult

logger = get_logger()

RequestLocation = Literal["body", "params", "query"]

IssueLike = Union[ValidationIssue, dict, str]


class SchemaValidator(Protocol):
    """Validation contract every adapter satisfies."""

    def validate(self, data: Any) -> ValidationResult:
        ...


def _issues_from_pydantic(exc: PydanticValidationError) -> List[ValidationIssue]:
    return [
        ValidationIssue(message=err["msg"], field=list(err["loc"]), type=err["type"])
        for err in exc.errors(include_url=False)
    ]


class PydanticModelValidator:
    """Validate data against a pydantic model."""

    def __init__(self, model: Type[BaseModel]):
        self.model = model

    def validate(self, data: Any) -> ValidationResult:
        try:
            self.model.model_validate(data)
        except PydanticValidationError as e:
            return ValidationResult(success=False, errors=_issues_from_pydantic(e))
        return ValidationResult(success=True)


class TypeAdapterValidator:
    """Validate data against any type pydantic understands (``Dict[str, int]`` etc.)."""

    def __init__(self, tp: Any):
        self.adapter = TypeAdapter(tp)

    def validate(self, data: Any) -> ValidationResult:
        try:
            self.adapter.validate_python(data)
        except PydanticValidationError as e:
            return ValidationResult(success=False, errors=_issues_from_pydantic(e))
        return ValidationResult(success=True)


class CallableValidator:
    """
    Validate data with a plain function.

    The function returns the problems it found (issues, dicts or messages);
    ``None`` or an empty iterable means the data is valid. A ``ValueError``
    raised by the function is reported as a single issue.
    """

    def __init__(self, check: Callable[[Any], Optional[Iterable[IssueLike]]]):
        self.check = check

    def validate(self, data: Any) -> ValidationResult:
        try:
            found = self.check(data)
        except ValueError as e:
            return ValidationResult(
                success=False,
                errors=[ValidationIssue(message=str(e), type="value_error")],
            )

        issues = [_to_issue(item) for item in (found or [])]
        return ValidationResult(success=not issues, errors=issues)


def _to_issue(item: IssueLike) -> ValidationIssue:
    if isinstance(item, ValidationIssue):
        return item
    if isinstance(item, str):
        return ValidationIssue(message=item)
    return ValidationIssue.model_validate(item)


async def _read_location(request: Request, location: RequestLocation) -> Any:
    if location == "params":
        return dict(request.path_params)
    if location == "query":
        return dict(request.query_params)

    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise errors.RequestValidationFailed(
            location,
            [{"message": f"Malformed JSON: {e.msg}", "type": "json_invalid"}],
        ) from None


class RequestValidator:
    """FastAPI dependencies that run one validator over parts of a request."""

    def __init__(self, validator: SchemaValidator):
        self.validator = validator

    async def _check(self, request: Request, location: RequestLocation) -> None:
        data = await _read_location(request, location)
        request_id = getattr(request.state, "request_id", None)

        try:
            result = self.validator.validate(data)
        except Exception:
            logger.exception(
                "Validator raised", extra={"request_id": request_id, "location": location}
            )
            raise errors.ValidatorCrashedError(location)

        if not result.success:
            logger.info(
                "Request validation failed",
                extra={
                    "request_id": request_id,
                    "location": location,
                    "errors_count": len(result.errors),
                },
            )
            raise errors.RequestValidationFailed(
                location, [issue.model_dump() for issue in result.errors]
            )

    async def validate_body(self, request: Request) -> None:
        """Validate the JSON body."""
        await self._check(request, "body")

    async def validate_params(self, request: Request) -> None:
        """Validate the path parameters."""
        await self._check(request, "params")

    async def validate_query(self, request: Request) -> None:
        """Validate the query string."""
        await self._check(request, "query")

    async def validate_all(self, request: Request) -> None:
        """Validate body, then path parameters, then query; stop at the first failure."""
        for location in ("body", "params", "query"):
            await self._check(request, location)


def create_request_validator(validator: SchemaValidator) -> RequestValidator:
    return RequestValidator(validator)
