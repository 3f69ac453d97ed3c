from typing import Any, Dict, Literal, Optional, Union

from pydantic import Field, model_validator

from dbxclient.domain.types.base import BaseInfo


class ApiRequest(BaseInfo):
    """A single transport call, fully shaped but not yet sent."""

    uri: str = Field(..., description="Relative resource path or absolute URL")
    params: Optional[Dict[str, Any]] = Field(default=None, description="Named parameters")
    body: Optional[bytes] = Field(default=None, description="Raw request body")
    method: Literal["GET", "POST"] = Field(default="GET", description="HTTP method")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers")

    @model_validator(mode="after")
    def check_single_payload(self) -> "ApiRequest":
        if self.params is not None and self.body is not None:
            raise ValueError("A request carries either params or a raw body, not both")
        return self

    @property
    def payload(self) -> Union[Dict[str, Any], bytes, None]:
        """Second argument of ``Transport.fetch``."""
        return self.body if self.body is not None else self.params
