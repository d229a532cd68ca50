"""apistub - Generate TypeScript API clients from OpenAPI documents.

apistub reads an OpenAPI 3.x document and writes TypeScript sources: a
models module for ``components.schemas``, one class of static request
builders per operation tag, and a small axios-based runtime.

Quick Start:
    >>> from apistub import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(
    ...     source="https://api.example.com/openapi.json",
    ...     output="./src/api"
    ... )
    >>> Codegen(config).generate()

CLI Usage:
    $ apistub get ./openapi.json --dir ./src/api
    $ apistub --version
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('apistub')
except PackageNotFoundError:
    __version__ = 'unknown'

from apistub.codegen.chain import SchemaHandlerChain
from apistub.codegen.codegen import Codegen
from apistub.codegen.schema_loader import SchemaLoader
from apistub.codegen.types import resolve_type
from apistub.config import DocumentConfig, get_config
from apistub.exceptions import (
    ApistubError,
    CodeGenerationError,
    ConfigurationError,
    OperationValidationError,
    OutputError,
    SchemaError,
    SchemaLoadError,
    SchemaReferenceError,
    SchemaValidationError,
)

__all__ = [
    '__version__',
    # Main classes
    'Codegen',
    'SchemaHandlerChain',
    'SchemaLoader',
    'resolve_type',
    # Configuration
    'DocumentConfig',
    'get_config',
    # Exceptions
    'ApistubError',
    'SchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'SchemaReferenceError',
    'CodeGenerationError',
    'OperationValidationError',
    'ConfigurationError',
    'OutputError',
]
