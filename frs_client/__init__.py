"""Async client for the faces of a face recognition service face set."""

from .client import FrsClient
from .errors import DecodingError, FrsError, ServiceError, TransportError
from .params import AddExternalFields, AddFaceOptions, Base64Image, FileImage, ImageSource, UrlImage
from .results import AddFaceResult, BoundingBox, DeleteFaceResult, FaceRecord, GetFaceResult
from .service import FaceService

__all__ = [
    "AddExternalFields",
    "AddFaceOptions",
    "AddFaceResult",
    "Base64Image",
    "BoundingBox",
    "DecodingError",
    "DeleteFaceResult",
    "FaceRecord",
    "FaceService",
    "FileImage",
    "FrsClient",
    "FrsError",
    "GetFaceResult",
    "ImageSource",
    "ServiceError",
    "TransportError",
    "UrlImage",
]
