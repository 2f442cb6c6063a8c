"""Add, get and delete operations on the faces of a face set."""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any, Optional, Protocol

import httpx

from frs_client.common.constants import FaceUris
from frs_client.params import AddFaceOptions, Base64Image, FileImage, ImageSource, UrlImage
from frs_client.results import AddFaceResult, DeleteFaceResult, GetFaceResult
from frs_client.utils.http_response import response_to_result

logger = logging.getLogger(__name__)

OCTET_STREAM = "application/octet-stream"


class Transport(Protocol):
    async def post(
        self,
        uri: str,
        *,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        headers: Any = None,
    ) -> httpx.Response:
        ...

    async def get(self, uri: str) -> httpx.Response:
        ...

    async def delete(self, uri: str) -> httpx.Response:
        ...


class FaceService:
    """Face operations of one project.

    Every method sends exactly one request and either returns the decoded
    result or raises :class:`~frs_client.errors.ServiceError`,
    :class:`~frs_client.errors.DecodingError` or
    :class:`~frs_client.errors.TransportError`. Nothing is retried.
    """

    def __init__(self, access: Transport, project_id: str, uris: Optional[FaceUris] = None) -> None:
        self._access = access
        self._project_id = project_id
        self._uris = uris or FaceUris()

    @property
    def project_id(self) -> str:
        return self._project_id

    async def add_face(
        self,
        face_set_name: str,
        image: ImageSource,
        options: Optional[AddFaceOptions] = None,
    ) -> AddFaceResult:
        """Add the face found in ``image`` to ``face_set_name``.

        Base64 and URL images are sent as a JSON body, files as multipart
        form data.
        """

        options = options or AddFaceOptions()
        uri = self._uris.add(self._project_id, face_set_name)

        if isinstance(image, FileImage):
            files, data = self._multipart_body(image, options)
            logger.debug("Uploading %s to face set %s", image.filename, face_set_name)
            headers = {"Content-Type": f"multipart/form-data; boundary={self._multipart_boundary(files, data)}"}
            response = await self._access.post(uri, data=data, files=files, headers=headers)
        elif isinstance(image, (Base64Image, UrlImage)):
            response = await self._access.post(uri, json=self._json_body(image, options))
        else:
            raise TypeError(f"Unsupported image source: {type(image).__name__}")

        return response_to_result(response, AddFaceResult)

    async def add_face_by_base64(
        self,
        face_set_name: str,
        image_base64: str,
        options: Optional[AddFaceOptions] = None,
    ) -> AddFaceResult:
        return await self.add_face(face_set_name, Base64Image(image_base64), options)

    async def add_face_by_url(
        self,
        face_set_name: str,
        image_url: str,
        options: Optional[AddFaceOptions] = None,
    ) -> AddFaceResult:
        return await self.add_face(face_set_name, UrlImage(image_url), options)

    async def add_face_by_file(
        self,
        face_set_name: str,
        file_path: str,
        options: Optional[AddFaceOptions] = None,
    ) -> AddFaceResult:
        return await self.add_face(face_set_name, FileImage(file_path), options)

    async def get_faces(self, face_set_name: str, offset: int, limit: int) -> GetFaceResult:
        """Return ``limit`` faces of the set starting at ``offset``.

        ``offset >= 0`` and ``limit > 0`` are expected; the service validates them.
        """

        uri = self._uris.get_range(self._project_id, face_set_name, offset, limit)
        response = await self._access.get(uri)
        return response_to_result(response, GetFaceResult)

    async def get_face(self, face_set_name: str, face_id: str) -> GetFaceResult:
        uri = self._uris.get_one(self._project_id, face_set_name, face_id)
        response = await self._access.get(uri)
        return response_to_result(response, GetFaceResult)

    async def delete_face_by_id(self, face_set_name: str, face_id: str) -> DeleteFaceResult:
        uri = self._uris.delete_by_face_id(self._project_id, face_set_name, face_id)
        response = await self._access.delete(uri)
        return response_to_result(response, DeleteFaceResult)

    async def delete_face_by_external_image_id(self, face_set_name: str, external_image_id: str) -> DeleteFaceResult:
        """Delete every face of the set that was added with ``external_image_id``."""

        uri = self._uris.delete_by_external_image_id(self._project_id, face_set_name, external_image_id)
        response = await self._access.delete(uri)
        return response_to_result(response, DeleteFaceResult)

    async def delete_face_by_field(self, face_set_name: str, field_id: str, field_value: str) -> DeleteFaceResult:
        """Delete the faces whose external field ``field_id`` equals ``field_value``."""

        uri = self._uris.delete_by_field(self._project_id, face_set_name, field_id, field_value)
        response = await self._access.delete(uri)
        return response_to_result(response, DeleteFaceResult)

    @staticmethod
    def _json_body(image: Base64Image | UrlImage, options: AddFaceOptions) -> dict[str, Any]:
        if isinstance(image, Base64Image):
            body: dict[str, Any] = {"image_base64": image.data}
        else:
            body = {"image_url": image.url}
        if options.external_image_id is not None:
            body["external_image_id"] = options.external_image_id
        external_fields = options.external_fields_payload()
        if external_fields is not None:
            body["external_fields"] = external_fields
        return body

    @staticmethod
    def _multipart_body(
        image: FileImage,
        options: AddFaceOptions,
    ) -> tuple[list[tuple[str, tuple[str, bytes, str]]], dict[str, str]]:
        if not image.path.is_file():
            raise FileNotFoundError(f"Image file not found: {image.path}")

        files = [("image_file", (image.filename, image.path.read_bytes(), OCTET_STREAM))]
        data: dict[str, str] = {}
        if options.external_image_id is not None:
            data["external_image_id"] = options.external_image_id
        external_fields = options.external_fields_payload()
        if external_fields is not None:
            data["external_fields"] = json.dumps(external_fields)
        return files, data

    @staticmethod
    def _multipart_boundary(
        files: list[tuple[str, tuple[str, bytes, str]]],
        data: dict[str, str],
    ) -> str:
        # derived from the request content so identical uploads encode identically
        digest = hashlib.sha256()
        for field, (filename, content, _) in files:
            digest.update(f"\0{field}={filename}".encode("utf-8"))
            digest.update(content)
        for key, value in sorted(data.items()):
            digest.update(f"\0{key}={value}".encode("utf-8"))
        return f"frs-{digest.hexdigest()[:32]}"
