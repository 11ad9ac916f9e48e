"""Base models with camelCase serialization for API output."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every API-facing model; serialises field names as camelCase.

    Input is accepted under either the camelCase alias or the field name.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FrozenCamelModel(CamelModel):
    """Immutable variant for computed results (statistics, curve points)."""

    model_config = ConfigDict(frozen=True)
