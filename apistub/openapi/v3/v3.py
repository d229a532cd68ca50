from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')


class Reference(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    ref: str = Field(..., alias='$ref')

    @property
    def name(self) -> str:
        """The referenced component name, the last segment of the pointer."""
        return self.ref.split('/')[-1]


class Type(Enum):
    array = 'array'
    boolean = 'boolean'
    integer = 'integer'
    null = 'null'
    number = 'number'
    object = 'object'
    string = 'string'


class Info(BaseModel):
    model_config = ConfigDict(extra='ignore')

    title: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None


class Schema(BaseModel):
    model_config = ConfigDict(extra='ignore')

    title: Optional[str] = None
    type: Optional[Type] = None
    format: Optional[str] = None
    enum: Optional[List[Any]] = None
    items: Optional[SchemaOrRef] = None
    properties: Optional[Dict[str, SchemaOrRef]] = None
    required: Optional[List[str]] = None
    nullable: Optional[bool] = None
    description: Optional[str] = None
    default: Optional[Any] = None
    deprecated: Optional[bool] = None

    @model_validator(mode='before')
    @classmethod
    def _collapse_type_list(cls, data: Any) -> Any:
        # OpenAPI 3.1 spells nullability as a type list: ["string", "null"]
        if isinstance(data, dict) and isinstance(data.get('type'), list):
            data = dict(data)
            types = [t for t in data['type'] if t != 'null']
            if len(types) != len(data['type']):
                data.setdefault('nullable', True)
            data['type'] = types[0] if types else 'null'
        return data


def _schema_or_reference(data: Any) -> str:
    if isinstance(data, dict):
        return 'ref' if '$ref' in data else 'schema'
    return 'ref' if isinstance(data, Reference) else 'schema'


SchemaOrRef = Annotated[
    Union[Annotated[Schema, Tag('schema')], Annotated[Reference, Tag('ref')]],
    Discriminator(_schema_or_reference),
]


class Parameter(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    name: str
    in_: str = Field(..., alias='in')
    description: Optional[str] = None
    required: Optional[bool] = None
    deprecated: Optional[bool] = None
    schema_: Optional[SchemaOrRef] = Field(None, alias='schema')


class MediaType(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    schema_: Optional[SchemaOrRef] = Field(None, alias='schema')


class RequestBody(BaseModel):
    model_config = ConfigDict(extra='ignore')

    description: Optional[str] = None
    content: Optional[Dict[str, MediaType]] = None
    required: Optional[bool] = None


class Operation(BaseModel):
    model_config = ConfigDict(extra='ignore')

    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    operationId: Optional[str] = None
    parameters: Optional[List[Union[Reference, Parameter]]] = None
    requestBody: Optional[Union[Reference, RequestBody]] = None
    deprecated: Optional[bool] = None


class PathItem(BaseModel):
    model_config = ConfigDict(extra='ignore')

    summary: Optional[str] = None
    description: Optional[str] = None
    parameters: Optional[List[Union[Reference, Parameter]]] = None
    operations: Dict[str, Operation] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def _collect_operations(cls, data: Any) -> Any:
        # Keep the per-method operations in the order the document declares them
        if isinstance(data, dict) and 'operations' not in data:
            data = dict(data)
            data['operations'] = {
                method: data.pop(method) for method in list(data) if method in HTTP_METHODS
            }
        return data


class Components(BaseModel):
    model_config = ConfigDict(extra='ignore')

    schemas: Optional[Dict[str, SchemaOrRef]] = None
    parameters: Optional[Dict[str, Union[Reference, Parameter]]] = None
    requestBodies: Optional[Dict[str, Union[Reference, RequestBody]]] = None


class OpenAPI(BaseModel):
    model_config = ConfigDict(extra='ignore')

    openapi: Optional[str] = None
    info: Optional[Info] = None
    paths: Optional[Dict[str, PathItem]] = None
    components: Optional[Components] = None


Schema.model_rebuild()
Parameter.model_rebuild()
MediaType.model_rebuild()
Components.model_rebuild()
OpenAPI.model_rebuild()
