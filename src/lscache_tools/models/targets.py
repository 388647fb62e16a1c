from __future__ import annotations

import enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class PurgeKind(enum.StrEnum):
    TAG = "tag"
    CATEGORY = "category"
    POST_ID = "post_id"


class AllTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["all"] = "all"


class SiteTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["site"] = "site"
    blog_id: PositiveInt


class UrlTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["url"] = "url"
    url: str


class TagSetTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["tag_set"] = "tag_set"
    kind: PurgeKind
    ids: tuple[PositiveInt, ...] = Field(min_length=1)

    @field_validator("ids")
    @classmethod
    def unique_ids(cls, ids: tuple[int, ...]) -> tuple[int, ...]:
        if len(set(ids)) != len(ids):
            raise ValueError("ids must be unique")
        return ids

    @property
    def id_list(self) -> str:
        return ",".join(str(i) for i in self.ids)


PurgeTarget = Union[AllTarget, SiteTarget, UrlTarget, TagSetTarget]
