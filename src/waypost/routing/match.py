"""Path matching — compare a ``:name`` pattern against a request path.

Both strings are split on ``/`` with empty segments preserved, so the
leading slash, doubled slashes, and a trailing slash all count as
segments. Matching is all-or-nothing:

    match_path("/users/:user_id", "/users/42")   -> {"user_id": "42"}
    match_path("/users/:user_id", "/users/42/")  -> None
    match_path("/", "/")                         -> {}

Captured values are raw path text: no percent-decoding, no type
conversion.
"""

PARAM_PREFIX = ":"


def split_segments(path: str) -> list[str]:
    """Split *path* on ``/``, keeping empty segments."""
    return path.split("/")


def is_param(segment: str) -> bool:
    """True if a pattern segment is a ``:name`` placeholder."""
    return segment.startswith(PARAM_PREFIX)


def param_names(pattern: str) -> list[str]:
    """Parameter names declared by *pattern*, in order, without the ``:``."""
    return [seg[1:] for seg in split_segments(pattern) if is_param(seg)]


def match_path(pattern: str, path: str) -> dict[str, str] | None:
    """Match *path* against *pattern*.

    Returns the captured parameters (possibly empty) on a match, or
    ``None`` when the segment counts differ or a literal segment differs.
    A repeated parameter name keeps the value of its last occurrence.
    A bare ``:`` segment captures under the empty-string key.
    """
    pattern_segments = split_segments(pattern)
    path_segments = split_segments(path)

    if len(pattern_segments) != len(path_segments):
        return None

    params: dict[str, str] = {}
    for expected, actual in zip(pattern_segments, path_segments, strict=True):
        if is_param(expected):
            params[expected[1:]] = actual
        elif expected != actual:
            return None

    return params
