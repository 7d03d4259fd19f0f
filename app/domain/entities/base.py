from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Records in the store are shared with the auth and content services, which
# write camelCase JSON. Attributes stay snake_case on the Python side.
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode='json', by_alias=True)
