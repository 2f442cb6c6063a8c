"""Tests for add-face request parameters."""

from __future__ import annotations

from pathlib import Path

import pytest

from frs_client.params import AddExternalFields, AddFaceOptions, FileImage


def test_external_fields_builder_chains() -> None:
    fields = AddExternalFields().add_field("age", 30).add_field("name", "li").add_field("vip", True)

    assert fields.get_external_fields() == {"age": 30, "name": "li", "vip": True}
    assert len(fields) == 3


def test_external_fields_reject_non_scalar_values() -> None:
    with pytest.raises(TypeError, match="tags"):
        AddExternalFields({"tags": ["a", "b"]})


def test_options_payload_accepts_plain_mapping() -> None:
    assert AddFaceOptions(external_fields={"age": 30}).external_fields_payload() == {"age": 30}
    assert AddFaceOptions().external_fields_payload() is None


def test_empty_external_fields_are_still_sent() -> None:
    assert AddFaceOptions(external_fields=AddExternalFields()).external_fields_payload() == {}


def test_file_image_uses_base_name(tmp_path: Path) -> None:
    image = FileImage(str(tmp_path / "nested" / "face.jpg"))

    assert isinstance(image.path, Path)
    assert image.filename == "face.jpg"
