"""Code generation module for apistub.

This module provides the main Codegen class that orchestrates the generation
of TypeScript models and API classes from an OpenAPI document.
"""

import dataclasses
import logging

from apistub.codegen.chain import render_models
from apistub.codegen.emitter import CodeEmitter, FileEmitter
from apistub.codegen.endpoints import collect_endpoints, render_api
from apistub.codegen.schema_loader import SchemaLoader
from apistub.codegen.utils import module_specifier
from apistub.config import DocumentConfig
from apistub.exceptions import ConfigurationError, SchemaValidationError
from apistub.openapi.v3 import OpenAPI

__all__ = ['Codegen', 'GeneratedSources', 'generate_sources']

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GeneratedSources:
    models: str
    api: str


def generate_sources(
    document: OpenAPI, config: DocumentConfig | None = None
) -> GeneratedSources:
    """Render the models and API modules for a document, in memory.

    Raises:
        SchemaValidationError: If the document declares no ``openapi`` version.
        OperationValidationError: If an operation lacks an operationId or tags.
    """
    config = config or DocumentConfig()
    if document.openapi is None:
        raise SchemaValidationError(
            config.source or '<document>', ['OpenAPI version is not defined']
        )

    endpoints = collect_endpoints(document, prefix=config.models_namespace)
    logger.debug(f'Collected {len(endpoints)} operations')

    schemas = document.components.schemas if document.components else None
    models = render_models(schemas)

    api = render_api(
        endpoints,
        models_namespace=config.models_namespace,
        models_module=module_specifier(config.models_file, config.api_file),
        request_module=module_specifier(config.request_file, config.api_file),
    )
    return GeneratedSources(models=models, api=api)


class Codegen:
    """Main code generator for TypeScript clients from OpenAPI documents.

    Generation happens in two phases: everything is rendered in memory, then
    written. A validation error in the first phase leaves the output
    directory untouched.

    Example:
        >>> from apistub.config import DocumentConfig
        >>> from apistub.codegen.codegen import Codegen
        >>>
        >>> config = DocumentConfig(
        ...     source="https://api.example.com/openapi.json",
        ...     output="./src/api"
        ... )
        >>> Codegen(config).generate()
        # Creates models.ts, api.ts, request.ts and config.ts in ./src/api/
    """

    def __init__(
        self,
        config: DocumentConfig,
        schema_loader: SchemaLoader | None = None,
        emitter: CodeEmitter | None = None,
    ):
        """Initialize the code generator.

        Args:
            config: Configuration specifying source document and output location.
            schema_loader: Optional custom schema loader.
            emitter: Optional custom emitter; defaults to writing files into
                ``config.output``.
        """
        self.config = config
        self.openapi: OpenAPI | None = None
        self._schema_loader = schema_loader or SchemaLoader()
        self._emitter = emitter or FileEmitter(config.output)

    def _load_schema(self) -> None:
        if not self.config.source:
            raise ConfigurationError('No OpenAPI source given', field='source')
        self.openapi = self._schema_loader.load(self.config.source)

    def generate(self) -> list[str]:
        """Load the document, render all modules and write them.

        Returns:
            The files written, in write order.
        """
        self._load_schema()

        assert self.openapi is not None

        sources = generate_sources(self.openapi, self.config)

        generated_files = [
            self._emitter.emit_models(sources.models, self.config.models_file),
            self._emitter.emit_api(sources.api, self.config.api_file),
        ]
        generated_files.extend(
            self._emitter.emit_runtime(
                self.config.request_file, self.config.http_config_file
            )
        )
        return [path for path in generated_files if path is not None]
