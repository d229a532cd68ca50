"""API surface generation: one static request-builder method per operation.

The walker visits every path+method operation of a document, validates it,
collects its parameters and request body into an :class:`Endpoint`, and the
renderer turns endpoints into TypeScript classes grouped by tag.
"""

import dataclasses
import logging
from typing import Literal

from apistub.codegen.types import resolve_type
from apistub.codegen.utils import (
    doc_comment,
    indent,
    is_identifier,
    member_access,
    property_name,
    sanitize_identifier,
    string_literal,
)
from apistub.exceptions import OperationValidationError, SchemaReferenceError
from apistub.openapi.v3 import (
    OpenAPI,
    Operation,
    Parameter as OpenAPIParameter,
    Reference,
    RequestBody as OpenAPIRequestBody,
    Schema,
)

__all__ = [
    'DEFAULT_CONTENT_TYPE',
    'Endpoint',
    'Parameter',
    'collect_endpoints',
    'render_api',
    'render_endpoint',
]

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = 'application/json'

PARAMETER_LOCATIONS = ('query', 'path', 'header')

# Signatures longer than this are laid out one group per line.
MAX_INLINE_SIGNATURE = 100


@dataclasses.dataclass
class Parameter:
    name: str
    location: Literal['query', 'path', 'header']
    required: bool
    type: str
    description: str | None = None


@dataclasses.dataclass
class Endpoint:
    """An operation reduced to what its request-builder method needs.

    Attributes:
        operation_id: The method name.
        method: Lower-case HTTP method.
        path: URL path template, e.g. ``/users/{id}``.
        tags: Classes the method is rendered into.
        parameters: Query, path and header parameters in declared order.
        body_type: TypeScript type of the request body, if there is one.
        content_type: Content type sent with the request body.
    """

    operation_id: str
    method: str
    path: str
    tags: list[str]
    parameters: list[Parameter] = dataclasses.field(default_factory=list)
    body_type: str | None = None
    content_type: str | None = None
    summary: str | None = None
    deprecated: bool = False

    def params_in(self, location: str) -> list[Parameter]:
        return [p for p in self.parameters if p.location == location]

    @property
    def takes_input(self) -> bool:
        return bool(self.parameters) or self.body_type is not None


def collect_endpoints(
    document: OpenAPI, prefix: str | None = 'Models'
) -> list[Endpoint]:
    """Walk every path+method operation of the document.

    Args:
        document: The loaded OpenAPI document.
        prefix: Namespace the generated API module imports the models under.

    Returns:
        One Endpoint per operation, in document order.

    Raises:
        OperationValidationError: If an operation has no operationId or no tags.
        SchemaReferenceError: If a parameter or request body reference
            does not point at a component.
    """
    endpoints = []
    for path, path_item in (document.paths or {}).items():
        for method, operation in path_item.operations.items():
            endpoints.append(
                _build_endpoint(
                    document, path, method, operation, prefix, path_item.parameters
                )
            )
    return endpoints


def _build_endpoint(
    document: OpenAPI,
    path: str,
    method: str,
    operation: Operation,
    prefix: str | None,
    path_parameters: list | None = None,
) -> Endpoint:
    if not operation.operationId:
        raise OperationValidationError(
            path,
            method,
            'operationId is not defined, see '
            'https://swagger.io/specification/#operation-object',
        )
    if not operation.tags:
        raise OperationValidationError(
            path,
            method,
            "operation's tags are not defined, see "
            'https://swagger.io/specification/#operation-object',
            operation_id=operation.operationId,
        )
    if not is_identifier(operation.operationId):
        raise OperationValidationError(
            path,
            method,
            f'operationId {operation.operationId!r} is not a valid method name',
            operation_id=operation.operationId,
        )

    parameters = []
    for param in _merge_parameters(document, operation.parameters, path_parameters):
        parameter = _extract_parameter(param, prefix)
        if parameter is not None:
            parameters.append(parameter)

    body_type = None
    content_type = None
    if operation.requestBody is not None:
        body = _resolve_request_body(document, operation.requestBody)
        content_type = DEFAULT_CONTENT_TYPE
        if body.content:
            # First declared content type, no preference for JSON
            content_type, media_type = next(iter(body.content.items()))
            if media_type.schema_ is not None:
                body_type = resolve_type(media_type.schema_, prefix)

    return Endpoint(
        operation_id=operation.operationId,
        method=method,
        path=path,
        tags=list(operation.tags),
        parameters=parameters,
        body_type=body_type,
        content_type=content_type,
        summary=operation.summary or operation.description,
        deprecated=bool(operation.deprecated),
    )


def _merge_parameters(
    document: OpenAPI,
    operation_parameters: list | None,
    path_parameters: list | None,
) -> list[OpenAPIParameter]:
    """Resolve operation parameters plus the path-level ones they inherit.

    Operation parameters override path-level parameters with the same
    name and location.
    """
    merged = [_resolve_parameter(document, p) for p in operation_parameters or []]
    seen = {(p.name, p.in_) for p in merged}
    for param_or_ref in path_parameters or []:
        param = _resolve_parameter(document, param_or_ref)
        if (param.name, param.in_) not in seen:
            merged.append(param)
            seen.add((param.name, param.in_))
    return merged


def _extract_parameter(param: OpenAPIParameter, prefix: str | None) -> Parameter | None:
    if param.in_ not in PARAMETER_LOCATIONS:
        logger.debug(f'Skipping {param.in_} parameter {param.name!r}')
        return None
    if param.schema_ is None:
        return None

    type_ = resolve_type(param.schema_, prefix)
    if type_ is None:
        return None

    nullable = param.schema_.nullable if isinstance(param.schema_, Schema) else None
    return Parameter(
        name=param.name,
        location=param.in_,
        required=param.required is True or nullable is not None,
        type=type_,
        description=param.description,
    )


def _lookup_component(components: dict | None, reference: Reference, kind: str):
    expected = f'#/components/{kind}/'
    if not reference.ref.startswith(expected):
        raise SchemaReferenceError(
            reference.ref, f'expected a reference into {expected}'
        )
    if not components or reference.name not in components:
        raise SchemaReferenceError(reference.ref, 'component not found')
    return components[reference.name]


def _resolve_parameter(
    document: OpenAPI, param: OpenAPIParameter | Reference
) -> OpenAPIParameter:
    seen = set()
    components = document.components.parameters if document.components else None
    while isinstance(param, Reference):
        if param.ref in seen:
            raise SchemaReferenceError(param.ref, 'circular reference')
        seen.add(param.ref)
        param = _lookup_component(components, param, 'parameters')
    return param


def _resolve_request_body(
    document: OpenAPI, body: OpenAPIRequestBody | Reference
) -> OpenAPIRequestBody:
    seen = set()
    components = document.components.requestBodies if document.components else None
    while isinstance(body, Reference):
        if body.ref in seen:
            raise SchemaReferenceError(body.ref, 'circular reference')
        seen.add(body.ref)
        body = _lookup_component(components, body, 'requestBodies')
    return body


def _member(name: str, required: bool) -> str:
    return f'{name}{"" if required else "?"}'


def _group_type(params: list[Parameter], multiline: bool) -> str:
    members = [f'{_member(property_name(p.name), p.required)}: {p.type}' for p in params]
    if multiline:
        return '{\n' + indent('\n'.join(f'{m};' for m in members)) + '\n}'
    return '{ ' + '; '.join(members) + ' }'


def _input_groups(endpoint: Endpoint, multiline: bool) -> list[tuple[str, str, bool]]:
    """(name, type, required) for each non-empty argument group."""
    groups = []
    query = endpoint.params_in('query')
    if query:
        required = any(p.required for p in query)
        groups.append(('query', _group_type(query, multiline), required))
    if endpoint.body_type is not None:
        groups.append(('body', endpoint.body_type, True))
    path = endpoint.params_in('path')
    if path:
        groups.append(('path', _group_type(path, multiline), True))
    header = endpoint.params_in('header')
    if header:
        required = any(p.required for p in header)
        groups.append(('header', _group_type(header, multiline), required))
    return groups


def _signature(endpoint: Endpoint) -> str:
    name = endpoint.operation_id
    if not endpoint.takes_input:
        return f'static {name}()'

    groups = _input_groups(endpoint, multiline=False)
    fallback = '' if any(required for _, _, required in groups) else ' = {}'
    names = ', '.join(group for group, _, _ in groups)
    members = '; '.join(f'{_member(g, req)}: {type_}' for g, type_, req in groups)
    inline = f'static {name}({{ {names} }}: {{ {members} }}{fallback})'
    if '\n' not in inline and len(inline) <= MAX_INLINE_SIGNATURE:
        return inline

    groups = _input_groups(endpoint, multiline=True)
    names = indent('\n'.join(f'{group},' for group, _, _ in groups))
    members = indent('\n'.join(f'{_member(g, req)}: {type_};' for g, type_, req in groups))
    return f'static {name}({{\n{names}\n}}: {{\n{members}\n}}{fallback})'


def _url_expression(endpoint: Endpoint) -> str:
    path_params = endpoint.params_in('path')
    if not path_params:
        return string_literal(endpoint.path)
    url = endpoint.path.replace('\\', '\\\\').replace('`', '\\`').replace('${', '\\${')
    for param in path_params:
        access = member_access('path', param.name)
        url = url.replace(f'{{{param.name}}}', f'${{{access}}}')
    return f'`{url}`'


def _header_access(name: str, optional: bool) -> str:
    if not optional:
        return member_access('header', name)
    if is_identifier(name):
        return f'header?.{name}'
    return f'header?.[{string_literal(name)}]'


def render_endpoint(endpoint: Endpoint) -> str:
    """Render the static request-builder method for one endpoint."""
    options = [
        f'url: {_url_expression(endpoint)},',
        f'method: {string_literal(endpoint.method)},',
    ]
    if endpoint.params_in('query'):
        options.append('params: query,')
    if endpoint.body_type is not None:
        options.append('data: body,')

    body = ['const request = new Request({', indent('\n'.join(options)), '});']

    header_params = endpoint.params_in('header')
    headers = []
    if endpoint.content_type is not None:
        headers.append(f"'Content-Type': {string_literal(endpoint.content_type)},")
    optional_header = not any(p.required for p in header_params)
    for param in header_params:
        access = _header_access(param.name, optional_header)
        headers.append(f'{string_literal(param.name)}: {access},')
    if headers:
        body.extend(['request.headers({', indent('\n'.join(headers)), '});'])
    body.append('return request;')

    statements = indent('\n'.join(body))
    method = f'{_signature(endpoint)} {{\n{statements}\n}}'
    if endpoint.summary or endpoint.deprecated:
        extra_tags = ('@deprecated',) if endpoint.deprecated else ()
        method = f'{doc_comment(endpoint.summary, extra_tags=extra_tags)}\n{method}'
    return method


def render_api(
    endpoints: list[Endpoint],
    models_namespace: str = 'Models',
    models_module: str = './models',
    request_module: str = './request',
) -> str:
    """Render the API module: one class per tag, one method per operation.

    An operation with several tags is rendered into each of their classes.
    Classes appear in the order their tag is first seen. A tag whose class
    name would shadow an imported name gets an ``Api`` suffix.
    """
    imported = {'Request', models_namespace}
    classes: dict[str, dict[str, str]] = {}
    class_tags: dict[str, list[str]] = {}
    for endpoint in endpoints:
        rendered = render_endpoint(endpoint)
        for tag in endpoint.tags:
            class_name = sanitize_identifier(tag)
            if class_name in imported:
                class_name = f'{class_name}Api'
            tags = class_tags.setdefault(class_name, [])
            if tag not in tags:
                if tags:
                    logger.warning(
                        f'Tags {tags[0]!r} and {tag!r} both map to class {class_name}, '
                        'merging their operations'
                    )
                tags.append(tag)
            methods = classes.setdefault(class_name, {})
            if endpoint.operation_id in methods:
                logger.warning(
                    f'Duplicate operationId {endpoint.operation_id!r} in tag {tag!r}, '
                    f'keeping {endpoint.method.upper()} {endpoint.path}'
                )
            methods[endpoint.operation_id] = rendered

    parts = [
        f'import {{ Request }} from {string_literal(request_module)};\n'
        f'import * as {models_namespace} from {string_literal(models_module)};'
    ]
    for class_name, methods in classes.items():
        body = indent('\n\n'.join(methods.values()))
        parts.append(f'export class {class_name} {{\n{body}\n}}')
    return '\n\n'.join(parts) + '\n'
