"""OpenAPI 3.0/3.1 object model, limited to what code generation reads."""

from apistub.openapi.v3 import OpenAPI, Reference, Schema, SchemaOrRef

__all__ = [
    'OpenAPI',
    'Reference',
    'Schema',
    'SchemaOrRef',
]
