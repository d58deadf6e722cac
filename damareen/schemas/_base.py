from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """Immutable record that also accepts the camelCase keys used by the stores."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
