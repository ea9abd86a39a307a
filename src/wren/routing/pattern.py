"""Pattern parsing and matching.

A pattern is a ``/``-delimited path template. Segments starting with
``:`` are parameters and match one non-empty run of non-``/``
characters; every other segment must match literally::

    "/user/:id"  matches "/user/42"  -> captures ("42",)

Matching is purely syntactic. Captured values are always strings, and
are percent-decoded when bound to parameter names.
"""

import re
from dataclasses import dataclass
from urllib.parse import quote, unquote

from wren.errors import ConfigurationError
from wren.routing.route import PathSegment

PARAM_PREFIX = ":"

# Characters that would suggest wildcard or regex support
_RESERVED = frozenset("*?()[]{}<>+|")

_PARAM_REGEX = r"([^/]+)"


def normalize_path(path: str) -> str:
    """Reduce a concrete location to the path the router matches on.

    Drops any query string or fragment, guarantees a leading ``/`` and
    removes a single trailing ``/`` (except for the root path).
    """
    path = path.split("#", 1)[0].split("?", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Parse a route pattern into segments.

    Examples::

        "/"           -> []
        "/users"      -> [PathSegment("users")]
        "/user/:id"   -> [PathSegment("user"), PathSegment(":id", is_param=True, param_name="id")]

    Raises ``ConfigurationError`` for patterns the matcher cannot honour.
    """
    if not pattern.startswith("/"):
        msg = f"Route pattern {pattern!r} must start with '/'."
        raise ConfigurationError(msg)

    body = pattern[1:]
    if body.endswith("/"):
        body = body[:-1]
    if not body:
        return []

    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in body.split("/"):
        if not part:
            msg = f"Route pattern {pattern!r} contains an empty segment."
            raise ConfigurationError(msg)
        reserved = _RESERVED.intersection(part)
        if reserved:
            msg = (
                f"Route pattern {pattern!r} uses unsupported characters "
                f"{''.join(sorted(reserved))!r}. Only literal and ':name' segments are allowed."
            )
            raise ConfigurationError(msg)

        if not part.startswith(PARAM_PREFIX):
            segments.append(PathSegment(value=part))
            continue

        name = part[len(PARAM_PREFIX) :]
        if not name.isidentifier():
            msg = f"Route pattern {pattern!r} has an invalid parameter name {name!r}."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route pattern {pattern!r} declares parameter {name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))

    return segments


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A validated pattern with its anchored regex and parameter names."""

    pattern: str
    segments: tuple[PathSegment, ...]
    param_names: tuple[str, ...]
    regex: re.Pattern[str]

    def match(self, path: str) -> tuple[str, ...] | None:
        """Return the positional captures for *path*, or ``None``."""
        m = self.regex.fullmatch(normalize_path(path))
        if m is None:
            return None
        return m.groups()

    def bind(self, captures: tuple[str, ...]) -> dict[str, str]:
        """Zip declared parameter names against captures, in order.

        Captures are raw path segments; bound values are percent-decoded.
        """
        return dict(zip(self.param_names, (unquote(c) for c in captures), strict=True))

    def build(self, params: dict[str, str]) -> str:
        """Substitute *params* into the pattern to produce a concrete path.

        Values are percent-encoded, ``/`` included, so each one stays a
        single segment and resolves back to the same ParamMap.
        """
        missing = [name for name in self.param_names if name not in params]
        if missing:
            msg = f"Missing parameters {missing!r} for route pattern {self.pattern!r}."
            raise ConfigurationError(msg)
        parts = [
            quote(str(params[seg.param_name]), safe="")
            if seg.is_param and seg.param_name
            else seg.value
            for seg in self.segments
        ]
        return "/" + "/".join(parts)


def compile_pattern(pattern: str) -> CompiledPattern:
    """Parse *pattern* and build its matcher."""
    segments = parse_pattern(pattern)
    pieces = [_PARAM_REGEX if seg.is_param else re.escape(seg.value) for seg in segments]
    source = "/" + "/".join(pieces)
    return CompiledPattern(
        pattern=pattern,
        segments=tuple(segments),
        param_names=tuple(seg.param_name for seg in segments if seg.param_name),
        regex=re.compile(source),
    )
