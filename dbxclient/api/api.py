from pathlib import Path
from typing import Any, Optional, Union

from dbxclient.api._api import JsonValue, _Api
from dbxclient.api.account_api import AccountApi
from dbxclient.api.file_api import FileApi
from dbxclient.api.fileops_api import FileOpsApi
from dbxclient.api.metadata_api import MetadataApi
from dbxclient.api.transport import HttpTransport, Transport
from dbxclient.domain.types.root import ROOT_SANDBOX
from dbxclient.io.credentials import DEFAULT_CONTENT_URL, DropboxSettings
from dbxclient.io.env import load_env
from dbxclient.io.multipart import BoundaryFactory
from dbxclient.io.paths import RootLike


class Api(_Api):
    """
    Dropbox API client.

    Every path-based call accepts ``root`` to override the default root for
    that call only.

    :Usage example:

     .. code-block:: python

        from dbxclient import Api, HttpTransport, Root

        api = Api(HttpTransport(token="sl.B0a..."), root=Root.DROPBOX)
        api.put_file("/reports/q3.pdf", "q3.pdf")
        print(api.get_metadata("/reports")["contents"])
    """

    def __init__(
        self,
        transport: Transport,
        root: RootLike = ROOT_SANDBOX,
        content_url: str = DEFAULT_CONTENT_URL,
        boundary_factory: Optional[BoundaryFactory] = None,
        legacy_metadata_params: bool = False,
    ):
        super().__init__(
            transport=transport,
            root=root,
            content_url=content_url,
            boundary_factory=boundary_factory,
            legacy_metadata_params=legacy_metadata_params,
        )

        self.account = AccountApi(self)
        self.files = FileApi(self)
        self.fileops = FileOpsApi(self)
        self.metadata = MetadataApi(self)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None, **kwargs) -> "Api":
        """
        Create API client from ``DROPBOX_*`` environment variables,
        after loading ``env_file`` (``~/dropbox.env`` by default).
        """
        load_env(env_file)
        settings = DropboxSettings()
        transport = HttpTransport(
            api_url=settings.api_url(),
            token=settings.access_token(),
            timeout=settings.TIMEOUT,
        )
        return cls(
            transport=transport,
            root=settings.ROOT,
            content_url=settings.content_url(),
            **kwargs,
        )

    # --- Account --------------------------------------------------
    def get_account_info(self) -> JsonValue:
        return self.account.get_info()

    # --- Files ----------------------------------------------------
    def get_file(self, path: str = "", root: Optional[RootLike] = None) -> bytes:
        return self.files.get(path, root=root)

    def put_file(
        self, path: str, file: Any, root: Optional[RootLike] = None
    ) -> Union[JsonValue, bytes]:
        return self.files.put(path, file, root=root)

    def get_thumbnail(
        self, path: str, size: str = "small", root: Optional[RootLike] = None
    ) -> bytes:
        return self.files.thumbnail(path, size=size, root=root)

    # --- File operations ------------------------------------------
    def copy(self, from_path: str, to_path: str, root: Optional[RootLike] = None) -> JsonValue:
        return self.fileops.copy(from_path, to_path, root=root)

    def create_folder(self, path: str, root: Optional[RootLike] = None) -> JsonValue:
        return self.fileops.create_folder(path, root=root)

    def delete(self, path: str, root: Optional[RootLike] = None) -> bytes:
        return self.fileops.delete(path, root=root)

    def move(self, from_path: str, to_path: str, root: Optional[RootLike] = None) -> JsonValue:
        return self.fileops.move(from_path, to_path, root=root)

    # --- Metadata -------------------------------------------------
    def get_links(self, path: str, root: Optional[RootLike] = None) -> JsonValue:
        return self.metadata.links(path, root=root)

    def get_metadata(
        self,
        path: str,
        list: bool = True,
        hash: Optional[str] = None,
        file_limit: Optional[int] = None,
        root: Optional[RootLike] = None,
    ) -> JsonValue:
        return self.metadata.get(path, list=list, hash=hash, file_limit=file_limit, root=root)
