"""Tests for configuration loading."""

import json

import pytest

from apistub.config import DocumentConfig, get_config
from apistub.exceptions import ConfigurationError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ('SOURCE', 'OUTPUT', 'MODELS_NAMESPACE'):
        monkeypatch.delenv(f'APISTUB_{name}', raising=False)
    return tmp_path


class TestDocumentConfig:
    """Tests for the settings model."""

    def test_defaults(self, workdir):
        config = DocumentConfig()

        assert config.source is None
        assert config.output == './'
        assert config.models_file == 'models.ts'
        assert config.api_file == 'api.ts'
        assert config.request_file == 'request.ts'
        assert config.http_config_file == 'config.ts'
        assert config.models_namespace == 'Models'

    def test_environment_overrides(self, workdir, monkeypatch):
        monkeypatch.setenv('APISTUB_OUTPUT', './generated')
        assert DocumentConfig().output == './generated'

    def test_unknown_fields_rejected(self, workdir):
        path = workdir / 'apistub.yaml'
        path.write_text('source: ./openapi.json\nlanguage: typescript\n')

        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))
        assert exc_info.value.config_path == str(path)


class TestGetConfig:
    """Tests for configuration file discovery."""

    def test_explicit_yaml(self, workdir):
        path = workdir / 'custom.yaml'
        path.write_text('source: ./openapi.json\noutput: ./src/api\n')

        config = get_config(str(path))

        assert config.source == './openapi.json'
        assert config.output == './src/api'

    def test_explicit_json(self, workdir):
        path = workdir / 'custom.json'
        path.write_text(json.dumps({'source': 'spec.yaml', 'models_namespace': 'Types'}))

        config = get_config(str(path))

        assert config.source == 'spec.yaml'
        assert config.models_namespace == 'Types'

    def test_explicit_path_must_exist(self, workdir):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(workdir / 'missing.yaml'))
        assert 'Configuration file not found' in str(exc_info.value)

    def test_default_file_in_cwd(self, workdir):
        (workdir / 'apistub.yml').write_text('output: ./client\n')
        assert get_config().output == './client'

    def test_pyproject_section(self, workdir):
        (workdir / 'pyproject.toml').write_text(
            '[tool.apistub]\nsource = "openapi.json"\napi_file = "endpoints.ts"\n'
        )

        config = get_config()

        assert config.source == 'openapi.json'
        assert config.api_file == 'endpoints.ts'

    def test_pyproject_without_section(self, workdir):
        (workdir / 'pyproject.toml').write_text('[project]\nname = "x"\n')
        assert get_config() == DocumentConfig()

    def test_no_configuration(self, workdir):
        assert get_config() == DocumentConfig()


class TestEnvironmentExpansion:
    """Tests for ``${VAR}`` expansion in configuration files."""

    def test_expands_variables(self, workdir, monkeypatch):
        monkeypatch.setenv('SPEC_HOST', 'api.example.com')
        (workdir / 'apistub.yaml').write_text(
            'source: https://${SPEC_HOST}/openapi.json\noutput: ${OUT_DIR:-./out}\n'
        )

        config = get_config()

        assert config.source == 'https://api.example.com/openapi.json'
        assert config.output == './out'

    def test_unset_variable(self, workdir, monkeypatch):
        monkeypatch.delenv('APISTUB_TEST_UNSET', raising=False)
        (workdir / 'apistub.yaml').write_text('source: ${APISTUB_TEST_UNSET}\n')

        with pytest.raises(ConfigurationError) as exc_info:
            get_config()
        assert 'APISTUB_TEST_UNSET' in str(exc_info.value)
