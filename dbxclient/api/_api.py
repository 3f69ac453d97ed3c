# coding: utf-8
"""Request dispatch shared by every Dropbox API module."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from dbxclient.api.transport import Transport
from dbxclient.domain.types.request import ApiRequest
from dbxclient.domain.types.root import ROOT_SANDBOX
from dbxclient.io.credentials import DEFAULT_CONTENT_URL, _normalize_url
from dbxclient.io.multipart import BoundaryFactory, fixed_boundary
from dbxclient.io.network_exceptions import DecodeError, InvalidArgumentError
from dbxclient.io.paths import RootLike, resolve_root

logger = logging.getLogger(__name__)

JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class _Api:
    """
    Dropbox API connection: a transport plus the defaults every call falls back on.

    :param transport: Authenticated fetch used for every request.
    :type transport: :class:`Transport`
    :param root: Default root, ``sandbox`` or ``dropbox``.
    :type root: str or :class:`Root`
    :param content_url: Base URL of the content host (file and thumbnail transfers).
    :type content_url: str
    :param boundary_factory: Returns the multipart boundary for each upload.
    :type boundary_factory: callable, optional
    :param legacy_metadata_params: Send metadata requests the legacy way,
        where ``file_limit`` takes the value of ``hash`` and no parameters are sent.
    :type legacy_metadata_params: bool
    """

    def __init__(
        self,
        transport: Transport,
        root: RootLike = ROOT_SANDBOX,
        content_url: str = DEFAULT_CONTENT_URL,
        boundary_factory: Optional[BoundaryFactory] = None,
        legacy_metadata_params: bool = False,
    ):
        if not isinstance(transport, Transport):
            raise InvalidArgumentError(
                f"Transport must provide a fetch() method, got {type(transport).__name__}"
            )
        if root is None:
            raise InvalidArgumentError("Default root must be set, e.g. 'sandbox' or 'dropbox'")
        self._transport = transport
        self._root = resolve_root(None, root)
        self._content_url = _normalize_url(content_url)
        self._boundary_factory = boundary_factory or fixed_boundary
        self._legacy_metadata_params = legacy_metadata_params

        self.logger = logger

    @property
    def root(self) -> str:
        """Default root used when a call does not override it."""
        return self._root

    @property
    def content_url(self) -> str:
        return self._content_url

    @property
    def legacy_metadata_params(self) -> bool:
        return self._legacy_metadata_params

    @property
    def transport(self) -> Transport:
        return self._transport

    def resolve_root(self, root: Optional[RootLike] = None) -> str:
        return resolve_root(root, self._root)

    def content_uri(self, resource: str) -> str:
        """Absolute URL of ``resource`` on the content host."""
        return self._content_url + resource

    def new_boundary(self) -> str:
        return self._boundary_factory()

    def send(self, request: ApiRequest) -> bytes:
        """
        Hands ``request`` to the transport exactly once and returns the raw body.

        :raises TransportError: whatever the transport raised, unchanged.
        """
        self.logger.debug(f"{request.method} {request.uri}")
        return self._transport.fetch(
            request.uri, request.payload, request.method, dict(request.headers)
        )

    def send_json(self, request: ApiRequest) -> JsonValue:
        return _Api.decode_json(self.send(request))

    def send_json_or_raw(self, request: ApiRequest) -> Union[JsonValue, bytes]:
        """
        Like :meth:`send_json`, but a body that is not JSON is returned as
        the raw bytes the transport produced.
        """
        content = self.send(request)
        try:
            return _Api.decode_json(content)
        except DecodeError:
            self.logger.debug(f"Non-JSON response to {request.method} {request.uri}, returning raw body")
            return content

    @staticmethod
    def decode_json(content: Union[bytes, str]) -> JsonValue:
        """
        Decodes a JSON response body without looking at its structure.

        :raises DecodeError: body is not valid JSON.
        """
        try:
            return json.loads(content)
        except (TypeError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodeError(f"Response is not valid JSON: {exc}", content=content) from exc
