from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from wanrun.core.config import settings
from wanrun.domain.id_batch import id_batch_problem


def _validate_batch(ids: list[int]) -> list[int]:
    problem = id_batch_problem(ids, settings.max_batch_size)
    if problem:
        raise ValueError(problem)
    return ids


class BookmarkAddRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dogrun_ids: list[PositiveInt] = Field(..., alias="dogrunIDs")

    @field_validator("dogrun_ids")
    @classmethod
    def validate_dogrun_ids(cls, v: list[int]) -> list[int]:
        return _validate_batch(v)


class BookmarkAddResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bookmark_ids: list[int] = Field(..., alias="bookmarkIDs")


class BookmarkDeleteRequest(BaseModel):
    """Deleting dogruns that are not bookmarked is allowed, so only the element type is checked."""

    model_config = ConfigDict(populate_by_name=True)

    dogrun_ids: list[PositiveInt] = Field(..., alias="dogrunIDs")


class CheckinRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dogrun_id: PositiveInt = Field(..., alias="dogrunID")
    dog_ids: list[PositiveInt] = Field(..., alias="dogIDs")

    @field_validator("dog_ids")
    @classmethod
    def validate_dog_ids(cls, v: list[int]) -> list[int]:
        return _validate_batch(v)
