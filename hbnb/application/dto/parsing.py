"""
Request Parsing
===============

Turns a caller's plain mapping into a request DTO, reporting shape errors
(missing field, wrong type, unknown field) as the domain ValidationError.
"""
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hbnb.domain.exceptions import ValidationError

RequestType = TypeVar("RequestType", bound=BaseModel)


def parse_request(model: Type[RequestType], data: Any) -> RequestType:
    """
    Validate data against a request model.

    Raises:
        ValidationError: naming the first offending field
    """
    if not isinstance(data, Mapping):
        raise ValidationError("body", "request data must be a mapping")
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as e:
        error = e.errors()[0]
        # Union members and list items extend loc; report the top-level field
        field = str(error["loc"][0]) if error["loc"] else "body"
        raise ValidationError(field, f"{field}: {error['msg']}") from e
