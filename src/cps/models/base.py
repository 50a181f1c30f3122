"""Base models for cps."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CPSBaseModel(BaseModel):
    """Base model for everything persisted to the project registry.

    Attributes are snake_case in Python and camelCase on disk.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_dict(self) -> dict:
        """Serialize to the on-disk representation."""
        return self.model_dump(by_alias=True, exclude_none=True)
