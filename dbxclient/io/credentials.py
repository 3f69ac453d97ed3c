"""
Settings used to build a client from the environment.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from dbxclient.domain.types.root import ROOT_SANDBOX

DEFAULT_API_URL = "https://api.dropbox.com/0/"
DEFAULT_CONTENT_URL = "https://api-content.dropbox.com/0/"


def _normalize_url(url: Optional[str]) -> str:
    """_normalize_url"""
    if url is None:
        return ""
    parsed_url = urlparse(url)
    if not parsed_url.scheme:
        url = "https://" + url
    if not url.endswith("/"):
        url += "/"
    return url


class DropboxSettings(BaseSettings):
    """
    Settings model read from ``DROPBOX_*`` environment variables
    or the ``dropbox.env`` file.
    """

    ROOT: str = Field(default=ROOT_SANDBOX, description="Default root for every call")
    API_URL: str = Field(default=DEFAULT_API_URL, description="Base URL of the API host")
    CONTENT_URL: str = Field(default=DEFAULT_CONTENT_URL, description="Base URL of the content host")
    ACCESS_TOKEN: Optional[SecretStr] = None
    TIMEOUT: Optional[float] = None

    model_config = SettingsConfigDict(
        env_prefix="DROPBOX_",
        env_file="dropbox.env",
        extra="ignore",
    )

    def api_url(self) -> str:
        return _normalize_url(self.API_URL)

    def content_url(self) -> str:
        return _normalize_url(self.CONTENT_URL)

    def access_token(self) -> Optional[str]:
        if self.ACCESS_TOKEN is None:
            return None
        return self.ACCESS_TOKEN.get_secret_value()
