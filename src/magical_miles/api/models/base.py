from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys used by the web front-end."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
