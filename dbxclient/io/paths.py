from typing import Optional, Tuple, Union

from dbxclient.domain.types.root import Root

RootLike = Union[Root, str]


def resolve_root(root: Optional[RootLike], default: RootLike) -> str:
    """
    Returns the root a call runs against.

    An explicit ``root`` wins over ``default`` and is forwarded verbatim,
    known value or not.
    """
    if root is None:
        root = default
    return root.value if isinstance(root, Root) else root


def canonical_path(path: str) -> str:
    """
    Strips every leading slash from ``path``. Nothing else is touched:
    ``..``, repeated inner slashes and percent-escapes are passed through.
    """
    return path.lstrip("/")


def resource_path(prefix: str, root: str, path: str = "") -> str:
    """
    Joins an operation prefix, a root and a user path.

     .. code-block:: python

        resource_path("metadata", "sandbox", "/docs/a.txt")
        # Output: 'metadata/sandbox/docs/a.txt'
    """
    return f"{prefix.rstrip('/')}/{root}/{canonical_path(path)}"


def split_upload_path(path: str) -> Tuple[str, str]:
    """
    Splits a target path into ``(directory, filename)``.

    A path without a directory part yields ``"."`` as its directory, and a
    trailing slash is ignored, so ``"docs/reports/"`` uploads ``reports``
    into ``docs``.
    """
    stripped = path.rstrip("/")
    if not stripped:
        return ("/" if path else "."), ""
    head, sep, filename = stripped.rpartition("/")
    if not sep:
        return ".", filename
    return head.rstrip("/") or "/", filename


def upload_directory(directory: str) -> str:
    """
    Normalizes the directory segment of an upload URL: the current-directory
    marker becomes an empty string, then surrounding slashes are trimmed.
    """
    if directory == ".":
        directory = ""
    return directory.strip("/")
