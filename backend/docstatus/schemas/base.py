from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response DTOs go out camelCase; the console's poller reads them as-is."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
