"""Shared bases for request schemas."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class InputSchema(BaseModel):
    """camelCase request body that rejects unknown fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class UpdateSchema(InputSchema):
    """
    Partial update: only fields present in the request are applied.

    Fields default to ``None`` so they can be omitted; sending an explicit
    ``null`` is only accepted for fields listed in ``NULLABLE``.
    """

    NULLABLE: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_fields(self) -> "UpdateSchema":
        """Reject explicit nulls for fields the stored record cannot hold as null."""
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.NULLABLE:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set in the request, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}
