from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class PurgeAction(enum.StrEnum):
    PURGE_ALL = "PURGE_ALL"
    PURGE = "PURGE"
    PURGE_BY = "PURGE_BY"


class PurgeRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: PurgeAction
    params: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    # None for direct url purges, which skip admin-ajax
    nonce: str | None = None
    url: str

    @field_validator("params")
    @classmethod
    def freeze_params(cls, params: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(params))

    @field_serializer("params")
    def serialize_params(self, params: Mapping[str, str], _info):
        return dict(params)

    @property
    def via_ajax(self) -> bool:
        return self.nonce is not None


class PurgeResult(BaseModel):
    success: bool
    status_code: int
    message: str = ""
