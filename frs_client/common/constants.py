"""URI templates for the face resource of the service."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

SUPPORTED_API_VERSIONS = ("v1", "v2")
DEFAULT_API_VERSION = "v1"

FACES_PATH = "/{version}/{project_id}/face-sets/{face_set_name}/faces"


def _quote(value: object) -> str:
    return quote(str(value), safe="")


@dataclass(frozen=True, slots=True)
class FaceUris:
    """Builds request URIs for one API version."""

    version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        if self.version not in SUPPORTED_API_VERSIONS:
            raise ValueError(
                f"Unsupported API version {self.version!r}; expected one of {SUPPORTED_API_VERSIONS}."
            )

    def faces(self, project_id: str, face_set_name: str) -> str:
        return FACES_PATH.format(
            version=self.version,
            project_id=_quote(project_id),
            face_set_name=_quote(face_set_name),
        )

    def add(self, project_id: str, face_set_name: str) -> str:
        return self.faces(project_id, face_set_name)

    def get_range(self, project_id: str, face_set_name: str, offset: int, limit: int) -> str:
        return f"{self.faces(project_id, face_set_name)}?offset={int(offset)}&limit={int(limit)}"

    def get_one(self, project_id: str, face_set_name: str, face_id: str) -> str:
        return f"{self.faces(project_id, face_set_name)}?face_id={_quote(face_id)}"

    def delete_by_face_id(self, project_id: str, face_set_name: str, face_id: str) -> str:
        return f"{self.faces(project_id, face_set_name)}?face_id={_quote(face_id)}"

    def delete_by_external_image_id(self, project_id: str, face_set_name: str, external_image_id: str) -> str:
        return f"{self.faces(project_id, face_set_name)}?external_image_id={_quote(external_image_id)}"

    def delete_by_field(self, project_id: str, face_set_name: str, field_id: str, field_value: str) -> str:
        return f"{self.faces(project_id, face_set_name)}?{_quote(field_id)}={_quote(field_value)}"
