"""Route spec variants, CompiledRoute and RouteMatch frozen dataclasses."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

from hashrouter._internal.types import Handler, Params

# Position reported for literal matches. A terminal match ends the dispatch loop.
TERMINAL = -1


@dataclass(frozen=True, slots=True)
class LiteralSpec:
    """An exact-match path such as ``/about``."""

    path: str


@dataclass(frozen=True, slots=True)
class PatternSpec:
    """A ``:name`` template compiled to a regex.

    ``names`` are in the order the capturing groups appear.
    """

    regex: re.Pattern[str]
    names: tuple[str, ...]
    template: str = ""


@dataclass(frozen=True, slots=True)
class RawPatternSpec:
    """A caller-supplied pattern. Captures are exposed positionally."""

    regex: re.Pattern[str]


RouteSpec: TypeAlias = LiteralSpec | PatternSpec | RawPatternSpec


def pattern_key(regex: re.Pattern[str]) -> tuple[str, int]:
    """Textual form of a pattern, used to find identical routes on removal."""
    return (regex.pattern, regex.flags)


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """A registered route.

    Created by ``RouteRegistry.add`` and owned by the registry until removed.
    """

    spec: RouteSpec
    handler: Handler
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> Literal["literal", "pattern"]:
        if isinstance(self.spec, LiteralSpec):
            return "literal"
        return "pattern"

    @property
    def param_names(self) -> tuple[str, ...] | None:
        """Declared parameter names, or ``None`` for positional capture."""
        match self.spec:
            case PatternSpec(names=names):
                return names
            case RawPatternSpec():
                return None
            case _:
                return ()

    @property
    def display(self) -> str:
        """Human readable path or pattern, as registered."""
        match self.spec:
            case LiteralSpec(path=path):
                return path
            case PatternSpec(template=template, regex=regex):
                return template or regex.pattern
            case RawPatternSpec(regex=regex):
                return regex.pattern


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful registry query.

    ``position`` is ``TERMINAL`` for literal matches, otherwise the index
    of the matched entry in the pattern table.
    """

    position: int
    route: CompiledRoute
    params: Params

    @property
    def handler(self) -> Handler:
        return self.route.handler

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self.route.metadata

    @property
    def terminal(self) -> bool:
        return self.position == TERMINAL
