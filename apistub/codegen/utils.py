import json
import posixpath
import re
import textwrap
import unicodedata
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse

__all__ = (
    'binding_name',
    'doc_comment',
    'indent',
    'is_identifier',
    'is_url',
    'member_access',
    'module_specifier',
    'property_name',
    'sanitize_identifier',
    'string_literal',
    'ts_literal',
)

INDENT = '  '

_IDENTIFIER_RE = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')

# Words that cannot name a class or a binding in TypeScript.
TS_RESERVED_WORDS = frozenset(
    {
        'break', 'case', 'catch', 'class', 'const', 'continue', 'debugger',
        'default', 'delete', 'do', 'else', 'enum', 'export', 'extends', 'false',
        'finally', 'for', 'function', 'if', 'import', 'in', 'instanceof', 'new',
        'null', 'return', 'super', 'switch', 'this', 'throw', 'true', 'try',
        'typeof', 'var', 'void', 'while', 'with', 'implements', 'interface',
        'let', 'package', 'private', 'protected', 'public', 'static', 'yield',
    }
)


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except (ValueError, AttributeError):
        return False


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def sanitize_identifier(name: str) -> str:
    """Convert a string into a valid TypeScript class name.

    - Replace spaces, hyphens and other separators, joining the parts in PascalCase
    - Remove other invalid characters
    - Ensure it doesn't start with a digit or collide with a reserved word
    """
    if not name:
        return 'Unnamed'

    parts = re.sub(r'[^A-Za-z0-9]+', '_', remove_accents(name)).split('_')

    if len(parts) == 1:
        sanitized = parts[0]
    else:
        sanitized = ''.join(capitalize(part) for part in parts if part)

    if sanitized and sanitized[0].isdigit():
        sanitized = '_' + sanitized

    if sanitized in TS_RESERVED_WORDS:
        sanitized = f'{sanitized}_'

    return sanitized or 'Unnamed'


def string_literal(value: str) -> str:
    """Render a single-quoted TypeScript string literal."""
    escaped = (
        str(value)
        .replace('\\', '\\\\')
        .replace("'", "\\'")
        .replace('\n', '\\n')
        .replace('\r', '\\r')
    )
    return f"'{escaped}'"


def ts_literal(value: Any) -> str:
    """Render a JSON scalar as a TypeScript literal."""
    if isinstance(value, str):
        return string_literal(value)
    if value is None:
        return 'null'
    # bool before numbers: json spells booleans the TypeScript way
    return json.dumps(value)


def property_name(name: str) -> str:
    """Property key for an object type or class field, quoted when needed."""
    return name if is_identifier(name) else string_literal(name)


def member_access(target: str, name: str) -> str:
    return f'{target}.{name}' if is_identifier(name) else f'{target}[{string_literal(name)}]'


def doc_comment(
    text: str | None, tag: str = '@description', extra_tags: tuple[str, ...] = ()
) -> str:
    """Render a JSDoc block; ``*/`` in the text is neutralised."""
    body = []
    if text is not None:
        lines = text.replace('*/', '*\\/').splitlines() or ['']
        body.append(f' * {tag} {lines[0]}'.rstrip())
        body.extend(f' * {line}'.rstrip() for line in lines[1:])
    body.extend(f' * {extra}' for extra in extra_tags)
    return '\n'.join(['/**', *body, ' */'])


def indent(text: str, level: int = 1) -> str:
    return textwrap.indent(text, INDENT * level, lambda line: bool(line.strip()))


def binding_name(name: str) -> str:
    """A local variable name for a property, used when destructuring."""
    if is_identifier(name) and name not in TS_RESERVED_WORDS:
        return name
    sanitized = re.sub(r'[^A-Za-z0-9_$]', '_', remove_accents(name))
    if not sanitized or sanitized[0].isdigit() or sanitized in TS_RESERVED_WORDS:
        sanitized = f'_{sanitized}'
    return sanitized


def module_specifier(filename: str, importer: str | None = None) -> str:
    """Relative import path of a generated module: ``models.ts`` -> ``./models``.

    With ``importer``, the path is relative to that file's directory.
    """
    target = str(PurePosixPath(filename).with_suffix(''))
    start = posixpath.dirname(importer) if importer else ''
    relative = posixpath.relpath(target, start or '.')
    return relative if relative.startswith('../') else f'./{relative}'
