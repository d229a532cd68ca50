import json
import os
import re
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from apistub.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['apistub.yaml', 'apistub.yml']

_ENV_VAR_RE = re.compile(r'\$\{([^}:]+)(?::-([^}]*))?\}')


class DocumentConfig(BaseSettings):
    """Settings for generating code from one OpenAPI document.

    Every field can also be set through an ``APISTUB_`` environment
    variable, e.g. ``APISTUB_OUTPUT=./src/api``.
    """

    model_config = SettingsConfigDict(env_prefix='APISTUB_', extra='forbid')

    source: str | None = Field(None, description='Path or URL to the OpenAPI document.')

    output: str = Field('./', description='Output directory for the generated code.')

    models_file: str = Field('models.ts', description='File name for generated models.')

    api_file: str = Field(
        'api.ts', description='File name for the generated API classes.'
    )

    request_file: str = Field(
        'request.ts', description='File name for the request builder.'
    )

    http_config_file: str = Field(
        'config.ts',
        description='File name for the HTTP client configuration, written only once.',
    )

    models_namespace: str = Field(
        'Models', description='Namespace the API module imports the models under.'
    )


def _expand_env_vars(value: str) -> str:
    """Expand ``${VAR}`` and ``${VAR:-default}`` references."""

    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        resolved = os.environ.get(name, default)
        if resolved is None:
            raise ConfigurationError(f'Environment variable {name} is not set')
        return resolved

    return _ENV_VAR_RE.sub(replace, value)


def _expand_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return _expand_env_vars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars_recursive(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars_recursive(item) for item in data]
    return data


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.safe_load(Path(path).read_text()) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load_file(path: str | Path) -> dict:
    if Path(path).suffix.lower() == '.json':
        return load_json(path)
    return load_yaml(path)


def _validate(data: dict, config_path: str) -> DocumentConfig:
    try:
        return DocumentConfig(**_expand_env_vars_recursive(data))
    except ValidationError as e:
        raise ConfigurationError(str(e), config_path=config_path)


def get_config(path: str | None = None) -> DocumentConfig:
    """Load configuration from a file, or fall back to defaults.

    Lookup order: the given path, ``apistub.yaml``/``apistub.yml`` in the
    current directory, ``[tool.apistub]`` in ``pyproject.toml``, defaults.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(_load_file(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(load_yaml(candidate), str(candidate))

    pyproject_path = Path(cwd) / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if 'apistub' in tools:
            return _validate(tools['apistub'], str(pyproject_path))

    return DocumentConfig()
