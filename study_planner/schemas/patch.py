from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PatchModel(BaseModel):
    """Partial update body.

    Omitted fields are left alone and an explicit ``null`` clears an optional
    field. Fields listed in ``required_fields`` may be omitted but never nulled.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    class Config:
        extra = "forbid"

    @model_validator(mode="after")
    def reject_null_required(self) -> PatchModel:
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
