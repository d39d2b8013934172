from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

TModel = TypeVar("TModel", bound=BaseModel)


class DTOBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ScoringInput(DTOBase):
    """Data used for scoring a single post.

    ``time_posted`` is the Unix timestamp (seconds) the post was submitted and
    ``likes`` is the number of likes it has received in total. Neither field is
    range checked: old, future and negative values are all scored.
    """

    time_posted: int = Field(strict=True)
    likes: int = Field(strict=True)


class ScoreBreakdown(DTOBase):
    recency: int = Field(strict=True)
    popularity: int = Field(strict=True)
    score: int = Field(strict=True)

    @model_validator(mode="after")
    def validate_sum(self) -> ScoreBreakdown:
        if self.score != self.recency + self.popularity:
            raise ValueError("score must equal recency + popularity")
        return self


def json_schema_for(model_cls: type[TModel]) -> dict[str, Any]:
    return model_cls.model_json_schema()


def validate_json(model_cls: type[TModel], payload: str | bytes | bytearray) -> TModel:
    return model_cls.model_validate_json(payload)
