"""Schema classifier handlers for ``components.schemas``.

Each handler recognises one schema shape and renders it as a named
TypeScript declaration:

- ``object_handler``: ``type: object`` -> ``export class``
- ``enum_handler``: ``enum`` present -> ``export enum`` (strings) or a
  literal union type alias (numbers)
- ``common_handler``: primitives and arrays -> ``export type`` alias

A handler returns None for schemas it does not recognise, so handlers can be
tried in order until one produces a declaration (see
:class:`apistub.codegen.chain.SchemaHandlerChain`).
"""

import dataclasses
from collections.abc import Callable

from apistub.codegen.types import is_optional, render_fields, resolve_type
from apistub.codegen.utils import (
    INDENT,
    binding_name,
    indent,
    member_access,
    property_name,
    string_literal,
    ts_literal,
)
from apistub.openapi.v3 import Reference, Schema, SchemaOrRef, Type as DataType

__all__ = [
    'DEFAULT_HANDLERS',
    'Handler',
    'SchemaHandler',
    'common_handler',
    'enum_handler',
    'object_handler',
]

Handler = Callable[[str, SchemaOrRef], str | None]

ALIAS_KINDS = frozenset(
    {
        DataType.array,
        DataType.boolean,
        DataType.integer,
        DataType.null,
        DataType.number,
        DataType.string,
    }
)


@dataclasses.dataclass(frozen=True)
class SchemaHandler:
    """A predicate over schema shapes paired with the renderer for that shape.

    Calling the handler returns the rendered declaration, or None when the
    node is a reference or does not match.
    """

    name: str
    matches: Callable[[Schema], bool]
    render: Callable[[str, Schema], str | None]

    def __call__(self, name: str, node: SchemaOrRef) -> str | None:
        if isinstance(node, Reference) or not self.matches(node):
            return None
        return self.render(name, node)


def _default_literal(schema: SchemaOrRef) -> str | None:
    if isinstance(schema, Schema) and isinstance(schema.default, (str, int, float)):
        return ts_literal(schema.default)
    return None


def _render_class(name: str, schema: Schema) -> str:
    properties = schema.properties or {}
    if not properties:
        return f'export class {name} {{\n{INDENT}constructor() {{}}\n}}'

    fields = render_fields(properties)

    params = []
    assignments = []
    for prop_name, prop in properties.items():
        binding = binding_name(prop_name)
        param = binding
        if binding != prop_name:
            param = f'{property_name(prop_name)}: {binding}'
        default = _default_literal(prop)
        if default is not None:
            param = f'{param} = {default}'
        params.append(f'{param},')
        assignments.append(f'{member_access("this", prop_name)} = {binding};')

    # An all-optional input may be omitted entirely
    fallback = '' if any(not is_optional(p) for p in properties.values()) else ' = {}'

    constructor = '\n'.join(
        [
            'constructor({',
            indent('\n'.join(params)),
            '}: {',
            indent(fields),
            f'}}{fallback}) {{',
            indent('\n'.join(assignments)),
            '}',
        ]
    )
    return f'export class {name} {{\n{indent(fields)}\n\n{indent(constructor)}\n}}'


def _enum_member_name(value: str) -> str:
    # TypeScript rejects numeric member names, even quoted
    try:
        float(value)
    except ValueError:
        return property_name(value)
    return property_name(f'_{value}')


def _render_enum(name: str, schema: Schema) -> str | None:
    if schema.type is DataType.string:
        members = [
            f'{_enum_member_name(str(value))} = {string_literal(str(value))},'
            for value in schema.enum
            if value is not None
        ]
        if not members:
            return f'export enum {name} {{}}'
        body = indent('\n'.join(members))
        return f'export enum {name} {{\n{body}\n}}'
    if schema.type in (DataType.number, DataType.integer):
        return f'export type {name} = {resolve_type(schema)};'
    return None


def _render_alias(name: str, schema: Schema) -> str | None:
    type_ = resolve_type(schema)
    if type_ is None:
        return None
    return f'export type {name} = {type_};'


object_handler = SchemaHandler(
    name='object',
    matches=lambda schema: schema.type is DataType.object,
    render=_render_class,
)

enum_handler = SchemaHandler(
    name='enum',
    matches=lambda schema: schema.enum is not None,
    render=_render_enum,
)

common_handler = SchemaHandler(
    name='common',
    matches=lambda schema: schema.type in ALIAS_KINDS,
    render=_render_alias,
)

# Object first, so an object schema is never rendered as an alias.
DEFAULT_HANDLERS: tuple[Handler, ...] = (object_handler, enum_handler, common_handler)
