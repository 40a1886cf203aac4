"""Path compiler — turns route specs into literal keys or compiled patterns.

Only ``:name`` tokens trigger pattern compilation. A string without
tokens is an exact-match key, even if it contains regex metacharacters.
"""

import re

from hashrouter.errors import InvalidRouteSpec
from hashrouter.routing.route import LiteralSpec, PatternSpec, RawPatternSpec, RouteSpec

# ``:name`` where name is one or more of [A-Za-z0-9_$]
PARAM_TOKEN = re.compile(r":([A-Za-z0-9_$]+)")

# Each token captures exactly one non-empty segment
SEGMENT_CAPTURE = r"([^/]+)"


def param_names(path: str) -> tuple[str, ...]:
    """Return the ``:name`` tokens of *path*, left to right."""
    return tuple(PARAM_TOKEN.findall(path))


def compile_template(path: str) -> re.Pattern[str]:
    """Compile a ``:name`` template into an anchored regex.

    Examples::

        "/user/:id"          -> ^/user/([^/]+)$
        "/user/:id/:action"  -> ^/user/([^/]+)/([^/]+)$
        "/v1.0/:file"        -> ^/v1\\.0/([^/]+)$
    """
    parts: list[str] = []
    last = 0
    for token in PARAM_TOKEN.finditer(path):
        parts.append(re.escape(path[last : token.start()]))
        parts.append(SEGMENT_CAPTURE)
        last = token.end()
    parts.append(re.escape(path[last:]))
    return re.compile("^" + "".join(parts) + "$")


def compile_spec(spec: object) -> RouteSpec:
    """Compile a route spec.

    - ``re.Pattern``  -> ``RawPatternSpec`` (passed through unchanged)
    - ``str`` with ``:name`` tokens -> ``PatternSpec``
    - ``str`` without tokens -> ``LiteralSpec`` (whitespace trimmed)

    Raises ``InvalidRouteSpec`` for anything else.
    """
    if isinstance(spec, re.Pattern):
        # Paths are str; a bytes pattern could never match one
        if not isinstance(spec.pattern, str):
            raise InvalidRouteSpec(spec)
        return RawPatternSpec(regex=spec)
    if not isinstance(spec, str):
        raise InvalidRouteSpec(spec)

    path = spec.strip()
    names = param_names(path)
    if not names:
        return LiteralSpec(path=path)
    return PatternSpec(regex=compile_template(path), names=names, template=path)
