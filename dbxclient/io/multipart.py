"""
Multipart/form-data encoding for file uploads.

The upload endpoint expects one ``file`` part whose filename is also sent as
a query parameter, so the encoder here is deliberately minimal and its output
is byte-for-byte predictable for a given boundary.
"""

from __future__ import annotations

import secrets
from email.message import Message
from typing import Callable, Dict, Tuple

from requests_toolbelt.multipart.decoder import MultipartDecoder

from dbxclient.io.network_exceptions import InvalidArgumentError

FIXED_BOUNDARY = "R50hrfBj5JYyfR3vF3wR96GPCC9Fd2q2pVMERvEaOE3D8LZTgLLbRpNwXek3"

BoundaryFactory = Callable[[], str]


def fixed_boundary() -> str:
    """Always returns :data:`FIXED_BOUNDARY`."""
    return FIXED_BOUNDARY


def random_boundary() -> str:
    """Returns a fresh 60-character boundary token."""
    return secrets.token_hex(30)


def content_type_header(boundary: str) -> Dict[str, str]:
    return {"Content-Type": f"multipart/form-data; boundary={boundary}"}


def build_multipart_body(filename: str, content: bytes, boundary: str) -> bytes:
    """
    Encodes ``content`` as the single ``file`` part of a multipart body.

    :param filename: Name reported in the ``Content-Disposition`` line.
    :type filename: str
    :param content: Raw file bytes.
    :type content: bytes
    :param boundary: Boundary token, without the leading dashes.
    :type boundary: str
    :return: Encoded body
    :rtype: :class:`bytes`
    :Usage example:

     .. code-block:: python

        build_multipart_body("a.txt", b"hi", "B")
        # Output: b'--B\\r\\nContent-Disposition: form-data; name=file; filename=a.txt\\r\\n'
        #         b'Content-type: application/octet-stream\\r\\n\\r\\nhi\\r\\n--B--'
    """
    if not boundary:
        raise InvalidArgumentError("Multipart boundary must not be empty")
    head = (
        f"--{boundary}\r\n"
        f"Content-Disposition: form-data; name=file; filename={filename}\r\n"
        "Content-type: application/octet-stream\r\n"
        "\r\n"
    )
    tail = f"\r\n--{boundary}--"
    return head.encode("utf-8") + content + tail.encode("utf-8")


def parse_multipart_body(body: bytes, content_type: str) -> Tuple[str, bytes]:
    """
    Decodes a body produced by :func:`build_multipart_body`.

    :param body: Encoded body.
    :param content_type: Value of the ``Content-Type`` header sent with it.
    :return: ``(filename, content)`` of the single file part.
    :rtype: :class:`tuple`
    """
    decoder = MultipartDecoder(body, content_type)
    if len(decoder.parts) != 1:
        raise InvalidArgumentError(f"Expected one multipart part, found {len(decoder.parts)}")
    part = decoder.parts[0]
    disposition = part.headers.get(b"Content-Disposition", b"").decode("utf-8")
    msg = Message()
    msg["Content-Disposition"] = disposition
    filename = msg.get_param("filename", header="Content-Disposition")
    if filename is None:
        raise InvalidArgumentError("Multipart part has no filename")
    return str(filename), part.content
