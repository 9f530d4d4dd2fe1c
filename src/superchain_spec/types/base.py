"""Base models shared by every chain-parameter record."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `london_block` in a Python model will be
    represented as `londonBlock` when it is serialized to JSON, matching the
    key style execution clients use in genesis files.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    def copy(self: Self, **changes: Any) -> Self:
        """
        Return a new instance with `changes` applied, validated from scratch.

        Only fields that were explicitly set carry over, so a field left at
        its default keeps tracking the default. Values are passed through as
        they are (a nested `OptimismConfig` stays a model, a `Uint64` stays a
        `Uint64`) rather than being dumped to plain Python first.

        Model-level checks run again on the result. A header copied with a
        withdrawals root but no base fee is rejected just as it would be
        when built directly.
        """
        carried = {name: getattr(self, name) for name in self.model_fields_set}
        return type(self)(**(carried | changes))


class StrictBaseModel(CamelModel):
    """
    A strict, immutable model.

    Chain configurations and genesis descriptors are values: they are never
    patched in place, only replaced through `copy()`.
    """

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
