"""
Themed asset URLs.

``asset_url('css/app.css', 'dark', 'https://cdn.example.com/')`` gives
``https://cdn.example.com/themes/dark/css/app.css``.

When no base URL is passed one is guessed from the request metadata. That
guess is meant for development; production deployments should always pass
the base URL explicitly.
"""

import posixpath
from typing import Any, Mapping, Optional

DEFAULT_BASE_URL = 'http://localhost'


def _is_asgi_scope(request: Mapping[str, Any]) -> bool:
    return request.get('type') in ('http', 'websocket') and 'headers' in request


def _asgi_header(scope: Mapping[str, Any], name: bytes) -> Optional[str]:
    for key, value in scope.get('headers') or []:
        if bytes(key).lower() == name:
            return bytes(value).decode('latin-1')
    return None


def _detect_from_asgi(scope: Mapping[str, Any]) -> str:
    scheme = scope.get('scheme') or 'http'
    if scheme == 'wss':
        scheme = 'https'
    elif scheme == 'ws':
        scheme = 'http'

    host = _asgi_header(scope, b'host')
    if not host:
        server = scope.get('server')
        host = f"{server[0]}:{server[1]}" if server else 'localhost'

    prefix = (scope.get('root_path') or '').rstrip('/')
    return f"{scheme}://{host}{prefix}"


def _detect_from_environ(environ: Mapping[str, Any]) -> str:
    https = environ.get('HTTPS')
    secure = https is not None and str(https).lower() != 'off'
    scheme = 'https' if secure else 'http'

    host = environ.get('HTTP_HOST') or 'localhost'
    script = environ.get('SCRIPT_NAME') or ''
    prefix = posixpath.dirname(script).rstrip('/\\') if script else ''
    return f"{scheme}://{host}{prefix}"


def detect_base_url(request: Optional[Mapping[str, Any]] = None) -> str:
    """Guess the site base URL from request metadata.

    ``request`` is a WSGI/CGI environ (``HTTPS``, ``HTTP_HOST``,
    ``SCRIPT_NAME``) or an ASGI HTTP scope. Without one the result is
    ``http://localhost``.
    """
    if not request:
        return DEFAULT_BASE_URL
    if _is_asgi_scope(request):
        return _detect_from_asgi(request)
    return _detect_from_environ(request)


def asset_url(path: str, active_theme: str, base_url: Optional[str] = None,
              request: Optional[Mapping[str, Any]] = None) -> str:
    """Build the public URL of a file inside the active theme"""
    base = base_url if base_url is not None else detect_base_url(request)
    return base.rstrip('/') + '/' + f"themes/{active_theme}/{path}".strip('/')
