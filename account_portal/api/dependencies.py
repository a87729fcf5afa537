"""Request body parsing shared by the API endpoints."""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from ..exceptions import ServerFault

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_payload(request: Request, schema: type[SchemaT]) -> SchemaT:
    """
    Parse the JSON request body into a schema.

    The body is read by hand instead of through a typed endpoint parameter so
    that missing fields reach the service rules (400) while bodies that cannot
    be parsed at all are reported as server faults (500).

    Args:
        request: Incoming request
        schema: Pydantic schema for the body

    Returns:
        Parsed schema instance

    Raises:
        ServerFault: if the body is not a JSON object matching the schema's types
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise ServerFault(f"Request body is not valid JSON: {e}") from e

    if not isinstance(body, dict):
        raise ServerFault(f"Request body must be a JSON object, got {type(body).__name__}")

    try:
        return schema.model_validate(body)
    except ValidationError as e:
        raise ServerFault(f"Request body has invalid field types: {e.error_count()} error(s)") from e
