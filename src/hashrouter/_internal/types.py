"""Shared type aliases used across hashrouter modules."""

import re
from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: called with a single NavigationContext
Handler: TypeAlias = Callable[..., Any]

# What callers may pass to add()/remove()
RouteSpecInput: TypeAlias = str | re.Pattern[str]

# Captured path parameters: named for ``:name`` templates, positional for raw patterns
Params: TypeAlias = dict[str, str] | tuple[str, ...]
