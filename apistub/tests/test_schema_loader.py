"""Tests for loading and validating OpenAPI documents."""

import json
from unittest.mock import patch

import httpx
import pytest
import yaml

from apistub.codegen.schema_loader import SchemaLoader, validate_document
from apistub.exceptions import SchemaLoadError, SchemaValidationError

from .fixtures import PETSTORE_SPEC, USER_SPEC


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestFileLoading:
    """Tests for loading documents from the filesystem."""

    def test_json_file(self, tmp_path):
        path = tmp_path / 'openapi.json'
        path.write_text(json.dumps(USER_SPEC))

        document = SchemaLoader().load(str(path))

        assert document.openapi == '3.0.0'
        assert list(document.components.schemas) == ['User', 'Color']

    def test_yaml_file(self, tmp_path):
        path = tmp_path / 'openapi.yaml'
        path.write_text(yaml.safe_dump(PETSTORE_SPEC, sort_keys=False))

        document = SchemaLoader().load(str(path))

        assert list(document.paths) == list(PETSTORE_SPEC['paths'])

    def test_relative_path_uses_base_path(self, tmp_path):
        (tmp_path / 'openapi.json').write_text(json.dumps(USER_SPEC))

        document = SchemaLoader(base_path=tmp_path).load('openapi.json')

        assert document.info.title == 'User API'

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            SchemaLoader().load(str(tmp_path / 'missing.json'))
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / 'openapi.json'
        path.write_text('{"openapi": ')

        with pytest.raises(SchemaLoadError) as exc_info:
            SchemaLoader().load(str(path))
        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    def test_missing_openapi_version(self, tmp_path):
        path = tmp_path / 'openapi.json'
        path.write_text(json.dumps({'info': {'title': 'No version'}, 'paths': {}}))

        with pytest.raises(SchemaValidationError) as exc_info:
            SchemaLoader().load(str(path))
        assert exc_info.value.errors == ['OpenAPI version is not defined']


class TestUrlLoading:
    """Tests for loading documents over HTTP."""

    def test_json_url(self):
        def handler(request):
            assert request.url == 'https://example.com/openapi.json'
            return httpx.Response(200, json=USER_SPEC)

        document = SchemaLoader(http_client=_client(handler)).load(
            'https://example.com/openapi.json'
        )
        assert document.paths['/users/{id}'].operations['get'].operationId == 'getUser'

    def test_yaml_by_content_type(self):
        def handler(request):
            return httpx.Response(
                200,
                text=yaml.safe_dump(USER_SPEC),
                headers={'content-type': 'application/yaml'},
            )

        document = SchemaLoader(http_client=_client(handler)).load(
            'https://example.com/spec'
        )
        assert document.info.title == 'User API'

    def test_http_error(self):
        def handler(request):
            return httpx.Response(404, text='not found')

        with pytest.raises(SchemaLoadError) as exc_info:
            SchemaLoader(http_client=_client(handler)).load('https://example.com/openapi.json')
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
        assert exc_info.value.source == 'https://example.com/openapi.json'

    def test_default_client(self):
        response = httpx.Response(
            200,
            json=USER_SPEC,
            request=httpx.Request('GET', 'https://example.com/openapi.json'),
        )
        with patch(
            'apistub.codegen.schema_loader.httpx.get', return_value=response
        ) as mock_get:
            SchemaLoader().load('https://example.com/openapi.json')

        mock_get.assert_called_once_with(
            'https://example.com/openapi.json', follow_redirects=True, timeout=30.0
        )


class TestValidateDocument:
    """Tests for validating parsed documents."""

    def test_not_a_mapping(self):
        with pytest.raises(SchemaValidationError):
            validate_document(['openapi'])

    def test_invalid_shape(self):
        spec = dict(USER_SPEC, paths={'/x': {'get': {'parameters': [{'name': 'id'}]}}})
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_document(spec, 'spec.json')
        assert exc_info.value.source == 'spec.json'
        assert exc_info.value.errors

    def test_openapi_31_type_lists(self):
        spec = dict(
            USER_SPEC,
            openapi='3.1.0',
            components={'schemas': {'Name': {'type': ['string', 'null']}}},
        )
        schema = validate_document(spec).components.schemas['Name']
        assert schema.type.value == 'string'
        assert schema.nullable is True
