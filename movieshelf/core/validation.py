# movieshelf/core/validation.py

import re
from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError
from movieshelf.core.exceptions import ValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)

_INT_PATTERN = re.compile(r"^-?\d+$")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def coerce_int(value: Any, message: str) -> int:
    """Accept ints and integer strings; reject bools, floats and everything else."""
    if isinstance(value, bool):
        raise PydanticCustomError("integer", message)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.match(value.strip()):
        return int(value.strip())
    raise PydanticCustomError("integer", message)


def required_int(value: Any, required_message: str, integer_message: str) -> int:
    if _is_blank(value):
        raise PydanticCustomError("required", required_message)
    return coerce_int(value, integer_message)


def optional_positive_int(value: Any, default: int, message: str) -> int:
    if _is_blank(value):
        return default
    number = coerce_int(value, message)
    if number < 1:
        raise PydanticCustomError("positive", message)
    return number


def required_string(value: Any, required_message: str, string_message: str) -> str:
    if _is_blank(value):
        raise PydanticCustomError("required", required_message)
    if not isinstance(value, str):
        raise PydanticCustomError("string", string_message)
    return value


def required_choice(
    value: Any,
    choices: Iterable[str],
    required_message: str,
    string_message: str,
    choice_message: str,
) -> str:
    value = required_string(value, required_message, string_message)
    if value not in choices:
        raise PydanticCustomError("choice", choice_message)
    return value


def collect_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group pydantic errors by field name, the way the error envelope reports them."""
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "__root__"
        errors.setdefault(field, []).append(err["msg"])
    return errors


def validate_or_raise(
    model: Type[ModelT],
    data: Mapping[str, Any],
    code: str,
    message: str = "Validation failed",
    status_code: int = 422,
) -> ModelT:
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        raise ValidationFailed(
            message, code=code, status_code=status_code, errors=collect_errors(exc)
        ) from exc
