"""Code generation module for apistub.

This module turns an OpenAPI document into TypeScript sources.

Main Components:
    - Codegen: The orchestrator: load, render, emit
    - resolve_type: Maps one schema node to a TypeScript type expression
    - SchemaHandlerChain: Renders named schemas through ordered handlers
    - collect_endpoints / render_api: Build the per-tag API classes
    - SchemaLoader: Loads OpenAPI documents from URLs or files
    - CodeEmitter: Handles output of generated code

Example:
    >>> from apistub.codegen import Codegen
    >>> from apistub.config import DocumentConfig
    >>>
    >>> config = DocumentConfig(source="./openapi.json", output="./src/api")
    >>> Codegen(config).generate()
"""

from apistub.codegen.chain import SchemaHandlerChain, render_models
from apistub.codegen.codegen import Codegen, GeneratedSources, generate_sources
from apistub.codegen.emitter import CodeEmitter, FileEmitter, StringEmitter
from apistub.codegen.endpoints import (
    Endpoint,
    Parameter,
    collect_endpoints,
    render_api,
    render_endpoint,
)
from apistub.codegen.handlers import (
    DEFAULT_HANDLERS,
    Handler,
    SchemaHandler,
    common_handler,
    enum_handler,
    object_handler,
)
from apistub.codegen.schema_loader import SchemaLoader
from apistub.codegen.types import resolve_type

__all__ = [
    # Main codegen class
    'Codegen',
    'GeneratedSources',
    'generate_sources',
    # Type resolution
    'resolve_type',
    # Schema handlers
    'DEFAULT_HANDLERS',
    'Handler',
    'SchemaHandler',
    'SchemaHandlerChain',
    'common_handler',
    'enum_handler',
    'object_handler',
    'render_models',
    # Endpoints
    'Endpoint',
    'Parameter',
    'collect_endpoints',
    'render_api',
    'render_endpoint',
    # Loading and emission
    'SchemaLoader',
    'CodeEmitter',
    'FileEmitter',
    'StringEmitter',
]
