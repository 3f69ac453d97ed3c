from dbxclient.api._api import JsonValue
from dbxclient.api.module_api import ModuleApi
from dbxclient.domain.types.request import ApiRequest


class AccountApi(ModuleApi):

    @staticmethod
    def _endpoint_prefix() -> str:
        return "account"

    def get_info(self) -> JsonValue:
        """Information about the current account."""
        return self._api.send_json(ApiRequest(uri=f"{self._endpoint_prefix()}/info"))
