"""
Base model classes for resume-ingest data models.

Provides common configuration shared across all models handed to callers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for resume records and their nested entries.

    Fields are snake_case in Python and serialize with camelCase aliases
    (``start_date`` -> ``startDate``), matching the JSON Resume layout the
    consuming resume builder stores.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
