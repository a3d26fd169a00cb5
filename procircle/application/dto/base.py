from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """DTO base serialized with camelCase keys; accepts either spelling on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """DTO for a bare confirmation message"""
    message: str
