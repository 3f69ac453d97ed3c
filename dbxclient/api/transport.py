from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

import requests
from requests.auth import AuthBase

from dbxclient.io.credentials import DEFAULT_API_URL
from dbxclient.io.network_exceptions import TransportError, process_requests_exception

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, Any], bytes, str, None]


@runtime_checkable
class Transport(Protocol):
    """
    Authenticated HTTP fetch used by the client.

    Implementations sign the request, send it once and return the raw body;
    any failure is raised as :class:`TransportError`.
    """

    def fetch(
        self,
        uri: str,
        params: Params = None,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
    ) -> bytes: ...


class HttpTransport:
    """
    :class:`Transport` on top of :mod:`requests`.

    :param api_url: Base URL that relative resource paths are joined onto.
    :type api_url: str
    :param auth: Request signer, e.g. ``requests_oauthlib.OAuth1``.
    :type auth: :class:`requests.auth.AuthBase`, optional
    :param token: OAuth access token sent as a bearer ``Authorization`` header.
    :type token: str, optional
    :param timeout: Seconds to wait for the server.
    :type timeout: float, optional
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        auth: Optional[AuthBase] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._api_url = api_url if api_url.endswith("/") else api_url + "/"
        self._auth = auth
        self._timeout = timeout
        self._headers = {"Authorization": f"Bearer {token}"} if token else {}

    def fetch(
        self,
        uri: str,
        params: Params = None,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
    ) -> bytes:
        """
        Performs one request and returns the response body.

        :param uri: Resource path relative to the API URL, or an absolute URL.
        :type uri: str
        :param params: Query parameters for GET, form fields for POST, or a raw body.
        :type params: dict or bytes, optional
        :param method: ``GET`` or ``POST``.
        :type method: str
        :param headers: Extra request headers.
        :type headers: dict, optional
        :return: Response body
        :rtype: :class:`bytes`
        :raises TransportError: request failed or status is not 2xx.
        """
        url = self._prepare_url(uri)
        method = method.upper()
        headers = {**self._headers, **(headers or {})}
        logger.info(f"{method} {url}")

        try:
            if method == "GET":
                response = requests.get(
                    url,
                    params=_encode_params(params),
                    headers=headers,
                    auth=self._auth,
                    timeout=self._timeout,
                )
            elif method == "POST":
                response = requests.post(
                    url,
                    data=_encode_params(params),
                    headers=headers,
                    auth=self._auth,
                    timeout=self._timeout,
                )
            else:
                raise TransportError(f"Unsupported method type: {method}. Supported types: 'GET', 'POST'")

            if not 200 <= response.status_code < 300:
                HttpTransport._raise_for_status(response)
            return response.content
        except requests.RequestException as exc:
            raise process_requests_exception(logger, exc, method, url) from exc

    def _prepare_url(self, uri: str) -> str:
        """
        Prepares the request URL: absolute URLs are kept, relative paths go under the API URL.
        """
        if uri.startswith(("http://", "https://")):
            return uri
        return self._api_url + uri

    @staticmethod
    def _raise_for_status(response: requests.Response):
        """
        Raise error with the status code, reason and body of a failed response.
        :param response: Request class object
        """
        http_error_msg = ""
        if isinstance(response.reason, bytes):
            try:
                reason = response.reason.decode("utf-8")
            except UnicodeDecodeError:
                reason = response.reason.decode("iso-8859-1")
        else:
            reason = response.reason

        body = response.content.decode("utf-8", errors="replace")
        if 400 <= response.status_code < 500:
            http_error_msg = "%s Client Error: %s for url: %s (%s)" % (
                response.status_code,
                reason,
                response.url,
                body,
            )
        elif 500 <= response.status_code < 600:
            http_error_msg = "%s Server Error: %s for url: %s (%s)" % (
                response.status_code,
                reason,
                response.url,
                body,
            )
        else:
            http_error_msg = "%s Unexpected Status: %s for url: %s" % (
                response.status_code,
                reason,
                response.url,
            )

        raise requests.exceptions.HTTPError(http_error_msg, response=response)


def _encode_params(params: Params) -> Params:
    """Booleans are sent as ``true``/``false``; everything else as-is."""
    if not isinstance(params, Mapping):
        return params
    return {
        key: (str(value).lower() if isinstance(value, bool) else value)
        for key, value in params.items()
    }
