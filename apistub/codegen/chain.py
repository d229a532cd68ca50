"""Ordered handler chain that renders ``components.schemas`` into one module."""

import logging
from collections.abc import Iterable, Mapping

from apistub.codegen.handlers import DEFAULT_HANDLERS, Handler
from apistub.openapi.v3 import SchemaOrRef

__all__ = ['SchemaHandlerChain', 'render_models']

logger = logging.getLogger(__name__)


class SchemaHandlerChain:
    """Runs registered handlers over named schemas, first match wins.

    For every schema name, in the mapping's iteration order, the handlers
    are tried in registration order; the first one returning a declaration
    is used and the rest are not called. Schemas no handler recognises are
    skipped. Callers wanting alphabetical or dependency order must sort the
    mapping themselves.

    Example:
        >>> chain = SchemaHandlerChain().register(object_handler).register(enum_handler)
        >>> chain.render({'Color': Schema(type='string', enum=['RED'])})
        "export enum Color {\\n  RED = 'RED',\\n}"
    """

    def __init__(self, handlers: Iterable[Handler] = ()):
        self._handlers: list[Handler] = list(handlers)

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return tuple(self._handlers)

    def register(self, handler: Handler) -> 'SchemaHandlerChain':
        self._handlers.append(handler)
        return self

    def render_one(self, name: str, schema: SchemaOrRef) -> str | None:
        for handler in self._handlers:
            declaration = handler(name, schema)
            if declaration is not None:
                return declaration
        return None

    def render(self, schemas: Mapping[str, SchemaOrRef]) -> str:
        declarations = []
        for name, schema in schemas.items():
            declaration = self.render_one(name, schema)
            if declaration is None:
                logger.debug(f'No declaration produced for schema {name!r}')
                continue
            declarations.append(declaration)
        return '\n\n'.join(declarations)


def render_models(schemas: Mapping[str, SchemaOrRef] | None) -> str:
    """Render the models module text with the default handlers."""
    text = SchemaHandlerChain(DEFAULT_HANDLERS).render(schemas or {})
    return f'{text}\n' if text else ''
