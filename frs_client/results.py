"""Typed payloads returned by the face endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ServiceModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class BoundingBox(_ServiceModel):
    """Location of a detected face inside the source image."""

    top_left_x: int
    top_left_y: int
    width: int
    height: int


class FaceRecord(_ServiceModel):
    """A face stored in a face set."""

    face_id: str
    external_image_id: Optional[str] = None
    external_fields: dict[str, Any] = Field(default_factory=dict)
    bounding_box: Optional[BoundingBox] = None

    @field_validator("external_fields", mode="before")
    @classmethod
    def null_fields_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class AddFaceResult(_ServiceModel):
    """Faces created by an add request, with their assigned ids."""

    face_set_id: Optional[str] = None
    face_set_name: Optional[str] = None
    faces: list[FaceRecord] = Field(default_factory=list)


class GetFaceResult(_ServiceModel):
    """Faces returned by a get-by-id or range query."""

    face_set_id: Optional[str] = None
    face_set_name: Optional[str] = None
    faces: list[FaceRecord] = Field(default_factory=list)


class DeleteFaceResult(_ServiceModel):
    """Confirmation of a delete request."""

    face_number: int
    face_set_id: Optional[str] = None
    face_set_name: Optional[str] = None


class ErrorBody(_ServiceModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    error_code: Optional[str] = None
    error_msg: Optional[str] = None
