"""Path template and route key helpers."""

import re

HTTP_METHODS = ("GET", "POST", "PATCH", "PUT", "DELETE")

# Methods whose input travels in the query string rather than a request body
QUERY_METHODS = frozenset({"GET", "DELETE"})

PATH_PARAMETER_RE = re.compile(r"\{(.+?)\}")


def get_path_parameters(path: str) -> list[str]:
    """Placeholder names of a path template, in order of first appearance.

    Example:
        >>> get_path_parameters("/users/{id}/posts/{postId}")
        ['id', 'postId']
    """
    names: list[str] = []
    for name in PATH_PARAMETER_RE.findall(path):
        if name not in names:
            names.append(name)
    return names


def normalize_path(path: str) -> str:
    """Strip a single trailing slash; the root path is left alone."""
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path


def route_key(method: str, path: str) -> tuple[str, str]:
    return method.upper(), normalize_path(path)
