"""
Upload payloads: a file named by path, or a stream the caller already opened.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import IO, Any, Union

from dbxclient.io.network_exceptions import InvalidArgumentError


@dataclass(frozen=True)
class FilePath:
    """Local file opened, read and closed by the upload call."""

    path: Union[str, os.PathLike]

    def read(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read()


@dataclass(frozen=True)
class OpenStream:
    """Readable stream owned by the caller; it is read but never closed."""

    handle: IO[Any]

    def read(self) -> bytes:
        data = self.handle.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return data


UploadPayload = Union[FilePath, OpenStream]


def as_payload(file: Any) -> UploadPayload:
    """
    Resolves the ``file`` argument of an upload into a payload variant.

    :param file: Path (``str`` or ``os.PathLike``), readable stream, or an
        already-built :class:`FilePath` / :class:`OpenStream`.
    :raises InvalidArgumentError: ``file`` is none of the above.
    """
    if isinstance(file, (FilePath, OpenStream)):
        return file
    if isinstance(file, (str, os.PathLike)):
        return FilePath(file)
    if callable(getattr(file, "read", None)):
        if getattr(file, "closed", False):
            raise InvalidArgumentError("File stream is already closed")
        return OpenStream(file)
    raise InvalidArgumentError(
        f"File must be a path or an open stream, got {type(file).__name__}"
    )
