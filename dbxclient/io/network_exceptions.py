"""
Exceptions raised by the Dropbox client and helpers for turning transport
failures into them.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests


class DropboxApiError(Exception):
    """Base class for every error raised by dbxclient."""


class InvalidArgumentError(DropboxApiError, ValueError):
    """Raised when a call receives an argument it cannot work with."""


class TransportError(DropboxApiError):
    """
    Raised when the transport fails to perform a request.

    :param message: Error description.
    :type message: str
    :param status_code: HTTP status code, if a response was received.
    :type status_code: int, optional
    :param response: Raw response object, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class DecodeError(DropboxApiError, ValueError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, content: bytes = b""):
        super().__init__(message)
        self.content = content


def process_requests_exception(
    logger: logging.Logger,
    exc: requests.RequestException,
    method: str,
    url: str,
) -> TransportError:
    """
    Log a failed request and build the :class:`TransportError` to raise for it.

    :param logger: Logger to report the failure to.
    :param exc: Exception raised by :mod:`requests`.
    :param method: HTTP method of the failed request.
    :param url: Requested URL.
    :return: Error wrapping ``exc``.
    :rtype: :class:`TransportError`
    """
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    logger.warning(
        "%s %s failed: %s",
        method,
        url,
        exc,
        extra={"method": method, "url": url, "status_code": status_code},
    )
    return TransportError(str(exc), status_code=status_code, response=response)
