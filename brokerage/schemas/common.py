"""Shared schema base for camelCase JSON bodies."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Present and non-empty
RequiredStr = Annotated[str, Field(min_length=1)]

# Display values the site sends either as numbers or strings
Loose = int | float | str


class CamelModel(BaseModel):
    """Accepts camelCase (wire) or snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self, **overrides) -> dict:
        """Dump with wire names, ready to be merged into a stored document."""
        data = self.model_dump(by_alias=True, mode="json")
        data.update(overrides)
        return data
