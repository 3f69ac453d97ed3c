from pydantic import BaseModel, ConfigDict


class BaseInfo(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
    )
