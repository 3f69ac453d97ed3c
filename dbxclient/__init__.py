"""
Public package interface for the Dropbox API client.

`Api` maps each API operation to one call on an authenticated transport;
`HttpTransport` is the bundled `requests` implementation of that transport.
"""

from __future__ import annotations

from dbxclient.api.api import Api
from dbxclient.api.transport import HttpTransport, Transport
from dbxclient.domain.types.request import ApiRequest
from dbxclient.domain.types.root import ROOT_DROPBOX, ROOT_SANDBOX, Root
from dbxclient.io.credentials import DropboxSettings
from dbxclient.io.multipart import (
    FIXED_BOUNDARY,
    build_multipart_body,
    parse_multipart_body,
    random_boundary,
)
from dbxclient.io.network_exceptions import (
    DecodeError,
    DropboxApiError,
    InvalidArgumentError,
    TransportError,
)
from dbxclient.io.payload import FilePath, OpenStream

__all__ = [
    "Api",
    "ApiRequest",
    "DecodeError",
    "DropboxApiError",
    "DropboxSettings",
    "FIXED_BOUNDARY",
    "FilePath",
    "HttpTransport",
    "InvalidArgumentError",
    "OpenStream",
    "ROOT_DROPBOX",
    "ROOT_SANDBOX",
    "Root",
    "Transport",
    "TransportError",
    "build_multipart_body",
    "parse_multipart_body",
    "random_boundary",
]
