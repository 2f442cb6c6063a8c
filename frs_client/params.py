"""Request parameters for face operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

ExternalFields = Mapping[str, Any]

_SCALAR_TYPES = (str, int, float, bool)


@dataclass(frozen=True, slots=True)
class Base64Image:
    """Image content encoded as base64 text."""

    data: str


@dataclass(frozen=True, slots=True)
class UrlImage:
    """Image the service downloads itself from object storage."""

    url: str


@dataclass(frozen=True, slots=True)
class FileImage:
    """Local image file uploaded as multipart form data."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @property
    def filename(self) -> str:
        return self.path.name


ImageSource = Union[Base64Image, UrlImage, FileImage]


class AddExternalFields:
    """Builder for the metadata attached to a face when it is added.

    Only scalar values are accepted since the service stores them in typed
    columns::

        fields = AddExternalFields().add_field("age", 30).add_field("name", "li")
    """

    def __init__(self, fields: Optional[ExternalFields] = None) -> None:
        self._fields: Dict[str, Any] = {}
        for key, value in (fields or {}).items():
            self.add_field(key, value)

    def add_field(self, key: str, value: Any) -> "AddExternalFields":
        if not isinstance(value, _SCALAR_TYPES):
            raise TypeError(f"External field {key!r} must be a str, int, float or bool, got {type(value).__name__}.")
        self._fields[str(key)] = value
        return self

    def get_external_fields(self) -> Dict[str, Any]:
        return dict(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


@dataclass(frozen=True, slots=True)
class AddFaceOptions:
    """Optional attributes of an add-face request.

    Unset fields are left out of the request payload entirely.
    """

    external_image_id: Optional[str] = None
    external_fields: Optional[Union[AddExternalFields, ExternalFields]] = None

    def external_fields_payload(self) -> Optional[Dict[str, Any]]:
        if self.external_fields is None:
            return None
        if isinstance(self.external_fields, AddExternalFields):
            return self.external_fields.get_external_fields()
        return dict(self.external_fields)
