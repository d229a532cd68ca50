"""OpenAPI 3.x specification models."""

from apistub.openapi.v3.v3 import (
    HTTP_METHODS,
    Components,
    Info,
    MediaType,
    OpenAPI,
    Operation,
    Parameter,
    PathItem,
    Reference,
    RequestBody,
    Schema,
    SchemaOrRef,
    Type,
)

__all__ = [
    'HTTP_METHODS',
    'Components',
    'Info',
    'MediaType',
    'OpenAPI',
    'Operation',
    'Parameter',
    'PathItem',
    'Reference',
    'RequestBody',
    'Schema',
    'SchemaOrRef',
    'Type',
]
