from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ThemePreference(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dark_mode: bool = False
