"""Service classes grouping the operations of one resource."""

from .face_service import FaceService

__all__ = ["FaceService"]
