"""
Parameter validation for MCP tool handlers.

Parses raw call arguments into the tool's pydantic model. Bad input never
raises out of here; it comes back as a validation ToolFailure whose message
names each offending parameter.
"""

from typing import Any, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError

from .error_helpers import ToolFailure, validation_error
from .schemas import ToolParams

P = TypeVar("P", bound=ToolParams)


def _param_name(loc: Tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Turn pydantic errors into one readable line per problem."""
    messages = []
    for err in exc.errors():
        name = _param_name(err.get("loc", ()))
        if err.get("type") == "missing":
            messages.append(f"Missing required parameter: '{name}'")
        else:
            messages.append(f"Invalid parameter '{name}': {err.get('msg', 'invalid value')}")
    return messages


def validate_params(
    model: Type[P],
    arguments: Optional[Mapping[str, Any]],
) -> Tuple[Optional[P], Optional[ToolFailure]]:
    """
    Validate arguments against a parameter model.

    Args:
        model: ToolParams subclass for the tool
        arguments: Raw arguments from the request (None is treated as empty)

    Returns:
        Tuple of (params, error). Exactly one of them is None.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        return None, validation_error(
            f"Arguments must be an object, got {type(arguments).__name__}"
        )
    try:
        return model.model_validate(dict(arguments)), None
    except ValidationError as e:
        return None, validation_error("; ".join(format_validation_errors(e)))
