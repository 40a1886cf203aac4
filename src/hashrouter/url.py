"""Fragment URL parsing — path component and decoded query parameters.

``QueryParams`` implements ``Mapping[str, str]``; duplicate keys keep
the last value.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from urllib.parse import unquote


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Decoded query string as field name -> value.
    """

    _data: dict[str, str]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        object.__setattr__(self, "_data", dict(data or {}))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"QueryParams({{{items}}})"

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return value as int, or *default* if missing or not numeric."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Return value as bool (``true``/``1``/``yes``/``on`` → True)."""
        value = self.get(key)
        if value is None:
            return default
        return value.lower() in ("true", "1", "yes", "on")


def _decode(text: str) -> str:
    """Percent-decode *text* as UTF-8, degrading to one char per escape."""
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        return unquote(text, encoding="latin-1")


def parse_query(qs: object) -> QueryParams:
    """Parse a query string into ``QueryParams``.

    ``+`` is a space. Each pair splits on its first ``=`` only, so values
    may contain further ``=``. A pair without ``=`` is a value under the
    empty key, and an empty segment sets ``""`` to ``""``. Malformed
    escapes never raise.

    Examples::

        "x=1&y=2"        -> {"x": "1", "y": "2"}
        "q=a+b&q=c"      -> {"q": "c"}
        "expr=a%3Db=c"   -> {"expr": "a=b=c"}
        "flag"           -> {"": "flag"}
    """
    if not isinstance(qs, str) or not qs:
        return QueryParams()

    data: dict[str, str] = {}
    for pair in qs.split("&"):
        pair = pair.replace("+", "%20")
        eq = pair.find("=")
        key = pair[:eq] if eq >= 0 else ""
        value = pair[eq + 1 :]
        data[_decode(key)] = _decode(value)
    return QueryParams(data)


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    """A fragment split into path and query."""

    path: str
    query: QueryParams = field(default_factory=QueryParams)


def parse_url(url: str) -> ParsedUrl:
    """Split *url* at the first ``?`` into path and parsed query.

    Examples::

        "/a/b?x=1&y=2" -> ParsedUrl(path="/a/b", query={"x": "1", "y": "2"})
        "/a/b"         -> ParsedUrl(path="/a/b", query={})
    """
    path, sep, qs = url.partition("?")
    if not sep:
        return ParsedUrl(path=url)
    return ParsedUrl(path=path, query=parse_query(qs))
