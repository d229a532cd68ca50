"""Code emitter interfaces and implementations for generated TypeScript.

This module provides the CodeEmitter interface and concrete implementations
for emitting generated sources to disk or keeping them in memory.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from upath import UPath

from apistub.codegen.templates import HTTP_CONFIG_TEMPLATE, render_request_module
from apistub.codegen.utils import module_specifier
from apistub.exceptions import OutputError

__all__ = ['CodeEmitter', 'FileEmitter', 'StringEmitter']

logger = logging.getLogger(__name__)

MODELS_HEADER = '// Generated models from OpenAPI schema.\n\n'
API_HEADER = '// Generated API endpoints from OpenAPI schema.\n\n'


class CodeEmitter(ABC):
    """Abstract base class for code emitters.

    A CodeEmitter takes generated source text and outputs it somewhere.
    Subclasses only implement :meth:`emit_file`.
    """

    @abstractmethod
    def emit_file(
        self, filename: str, content: str, overwrite: bool = True
    ) -> str | None:
        """Emit one file.

        Args:
            filename: Name of the file relative to the output location.
            content: The file content.
            overwrite: Whether an existing file is replaced.

        Returns:
            The path or name of the emitted file, or None when an existing
            file was kept.
        """
        pass

    def emit_models(self, source: str, filename: str = 'models.ts') -> str | None:
        return self.emit_file(filename, MODELS_HEADER + source)

    def emit_api(self, source: str, filename: str = 'api.ts') -> str | None:
        return self.emit_file(filename, API_HEADER + source)

    def emit_runtime(
        self, request_file: str = 'request.ts', http_config_file: str = 'config.ts'
    ) -> list[str]:
        """Emit the request builder and, if absent, the HTTP client configuration.

        The configuration module is meant to be edited by hand, so an
        existing one is never overwritten. The request builder imports it
        relative to its own location.
        """
        config_module = module_specifier(http_config_file, request_file)
        written = [self.emit_file(request_file, render_request_module(config_module))]
        written.append(
            self.emit_file(http_config_file, HTTP_CONFIG_TEMPLATE, overwrite=False)
        )
        return [path for path in written if path is not None]


class FileEmitter(CodeEmitter):
    """Emits generated code to files in an output directory.

    The directory may be any ``upath`` location, local or remote.
    """

    def __init__(self, output_dir: str | Path | UPath):
        self.output_dir = UPath(output_dir)
        self._written_files: list[str] = []

    def emit_file(
        self, filename: str, content: str, overwrite: bool = True
    ) -> str | None:
        file_path = self.output_dir / filename
        try:
            if not overwrite and file_path.exists():
                logger.info(f'Keeping existing {file_path}')
                return None

            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(file_path), cause=e)

        logger.info(f'Wrote {file_path}')
        self._written_files.append(str(file_path))
        return str(file_path)

    def get_written_files(self) -> list[str]:
        """Get list of all files written by this emitter."""
        return self._written_files.copy()


class StringEmitter(CodeEmitter):
    """Keeps generated files in memory.

    This emitter is useful for testing or when you need to manipulate
    the generated code before writing it.
    """

    def __init__(self, existing: dict[str, str] | None = None):
        """Initialize the string emitter.

        Args:
            existing: Files considered already present, by name.
        """
        self._files: dict[str, str] = dict(existing or {})

    def emit_file(
        self, filename: str, content: str, overwrite: bool = True
    ) -> str | None:
        if not overwrite and filename in self._files:
            return None
        self._files[filename] = content
        return filename

    def get_file(self, filename: str) -> str | None:
        return self._files.get(filename)

    def get_all_files(self) -> dict[str, str]:
        return self._files.copy()
