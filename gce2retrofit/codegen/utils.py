import re
import unicodedata
from urllib.parse import urlparse

__all__ = (
    'get_package_name',
    'get_path',
    'interface_name',
    'is_url',
    'sanitize_java_identifier',
)

JAVA_KEYWORDS = frozenset(
    {
        'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch',
        'char', 'class', 'const', 'continue', 'default', 'do', 'double',
        'else', 'enum', 'extends', 'false', 'final', 'finally', 'float',
        'for', 'goto', 'if', 'implements', 'import', 'instanceof', 'int',
        'interface', 'long', 'native', 'new', 'null', 'package', 'private',
        'protected', 'public', 'return', 'short', 'static', 'strictfp',
        'super', 'switch', 'synchronized', 'this', 'throw', 'throws',
        'transient', 'true', 'try', 'void', 'volatile', 'while',
    }
)


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except (TypeError, ValueError):
        return False


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def sanitize_java_identifier(name: str) -> str:
    """Sanitize a name to be a valid Java identifier.

    - Replace invalid characters with underscores
    - Ensure it doesn't start with a digit
    - Suffix Java keywords with an underscore
    """
    if not name:
        raise ValueError('Name cannot be empty')

    sanitized = re.sub(r'[^A-Za-z0-9_$]', '_', remove_accents(name))
    if sanitized[0].isdigit():
        sanitized = '_' + sanitized
    if sanitized in JAVA_KEYWORDS:
        sanitized += '_'
    return sanitized


def interface_name(resource_name: str) -> str:
    """Derive the interface type name of a resource.

    Words are separated by underscores; each word is capitalized (first
    letter upper case, the rest lower case) and the words are concatenated.

    Examples:
        >>> interface_name('my_resource')
        'MyResource'
        >>> interface_name('targetHttpProxies')
        'Targethttpproxies'
    """
    return ''.join(word.capitalize() for word in resource_name.split('_'))


def get_package_name(base_url: str) -> str:
    """Derive the root Java package from an API base URL.

    The host labels are reversed, lower cased and each made a valid Java
    identifier, following the reverse-domain convention.

    Examples:
        >>> get_package_name('https://www.googleapis.com/compute/v1/projects/')
        'com.googleapis.www'

    Raises:
        ValueError: If the URL has no host.
    """
    host = urlparse(base_url).hostname
    if not host:
        raise ValueError(f"Base URL '{base_url}' has no host")
    labels = [label for label in host.lower().split('.') if label]
    return '.'.join(sanitize_java_identifier(label) for label in reversed(labels))


def get_path(package_name: str, file_name: str) -> str:
    """Relative path of ``file_name`` inside the directory of ``package_name``."""
    return '/'.join(package_name.split('.') + [file_name])
