"""Integration check helpers."""

from .checks import IntegrationCheckResult, check_face_set

__all__ = ["IntegrationCheckResult", "check_face_set"]
