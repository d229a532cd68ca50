"""Translation of OpenAPI schema nodes into TypeScript type expressions.

``resolve_type`` is a pure recursive walk over a schema tree:

- references render as the referenced component name, optionally
  qualified with a namespace prefix (``Models.Pet``)
- primitives map to ``string``/``number``/``boolean``/``Blob``
- enums become unions of literals in declared order
- arrays become ``T[]``
- objects with properties become record literals ``{ name?: T; }``

References are rendered by name and never followed, so cyclic component
graphs cannot cause unbounded recursion.
"""

from apistub.codegen.utils import (
    doc_comment,
    indent,
    property_name,
    string_literal,
    ts_literal,
)
from apistub.openapi.v3 import Reference, Schema, SchemaOrRef, Type as DataType

__all__ = [
    'ANY',
    'is_optional',
    'render_fields',
    'resolve_type',
]

ANY = 'any'

_PRIMITIVE_TYPE_MAP = {
    (DataType.string, None): 'string',
    (DataType.string, 'binary'): 'Blob',
    (DataType.boolean, None): 'boolean',
    (DataType.integer, None): 'number',
    (DataType.number, None): 'number',
    (DataType.null, None): 'null',
}

_ENUM_KINDS = (DataType.string, DataType.integer, DataType.number)


def resolve_type(node: SchemaOrRef, prefix: str | None = None) -> str | None:
    """Resolve a schema node to a TypeScript type expression.

    Args:
        node: The schema or reference to resolve.
        prefix: Optional namespace for referenced names, e.g. ``'Models'``.

    Returns:
        The type expression, or None when the node has no renderable type
        (an object without properties, or a schema without a type).
    """
    if isinstance(node, Reference):
        return f'{prefix}.{node.name}' if prefix else node.name

    kind = node.type
    if kind is None:
        return None

    if node.enum is not None and kind in _ENUM_KINDS:
        return _literal_union(node.enum, quoted=kind is DataType.string)

    if kind is DataType.array:
        return _array_type(node, prefix)

    if kind is DataType.object:
        return _object_type(node, prefix)

    fmt = node.format if (kind, node.format) in _PRIMITIVE_TYPE_MAP else None
    return _PRIMITIVE_TYPE_MAP[(kind, fmt)]


def is_optional(node: SchemaOrRef) -> bool:
    """A property is optional unless its schema says ``nullable: false``."""
    return not (isinstance(node, Schema) and node.nullable is False)


def render_fields(properties: dict[str, SchemaOrRef], prefix: str | None = None) -> str:
    """Render ``name?: type;`` lines for each property in insertion order."""
    fields = []
    for name, prop in properties.items():
        type_ = resolve_type(prop, prefix) or ANY
        field = f'{property_name(name)}{"?" if is_optional(prop) else ""}: {type_};'
        description = prop.description if isinstance(prop, Schema) else None
        if description:
            field = f'{doc_comment(description)}\n{field}'
        fields.append(field)
    return '\n'.join(fields)


def _literal_union(values: list, quoted: bool) -> str:
    if not values:
        return 'never'
    if quoted:
        literals = [ts_literal(v) if v is None else string_literal(str(v)) for v in values]
    else:
        literals = [ts_literal(v) for v in values]
    return ' | '.join(literals)


def _array_type(node: Schema, prefix: str | None) -> str:
    element = resolve_type(node.items, prefix) if node.items is not None else None
    if element is None:
        return f'{ANY}[]'
    if ' | ' in element and not element.startswith('{'):
        element = f'({element})'
    return f'{element}[]'


def _object_type(node: Schema, prefix: str | None) -> str | None:
    if node.properties is None:
        return None
    if not node.properties:
        return '{}'
    return '{\n' + indent(render_fields(node.properties, prefix)) + '\n}'
