# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

from pydantic import BaseModel, ConfigDict


class BaseConfigModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    def updated(self, **changes: object) -> "BaseConfigModel":
        """Return a re-validated copy of this model with ``changes`` applied."""
        return type(self).model_validate({**self.model_dump(), **changes})
