from types import SimpleNamespace

from image_cover.core.infrastructure.local.upload_binder import MappingUploadBinder, form_name
from image_cover.core.infrastructure.local.uploaded_file import UploadedFile


class Article:
    pass


class CustomForm:
    def form_name(self) -> str:
        return "Cover"


class TestFormName:
    def test_class_name(self) -> None:
        assert form_name(Article()) == "Article"

    def test_custom_form_name(self) -> None:
        assert form_name(CustomForm()) == "Cover"


class TestMappingUploadBinder:
    def test_get_instance_by_name(self, tmp_path) -> None:
        upload = UploadedFile(name="a.png", temp_name=tmp_path / "t")
        binder = MappingUploadBinder({"image": upload})

        assert binder.get_instance_by_name("image") is upload
        assert binder.get_instance_by_name("other") is None

    def test_get_instance_uses_form_name(self, tmp_path) -> None:
        upload = UploadedFile(name="a.png", temp_name=tmp_path / "t")
        binder = MappingUploadBinder()
        binder.add("Article[image]", upload)

        assert binder.get_instance(Article(), "image") is upload
        assert binder.get_instance_by_name("image") is None

    def test_non_submission_values_are_ignored(self) -> None:
        binder = MappingUploadBinder({"image": "just-a-string", "other": SimpleNamespace(name="x")})

        assert binder.get_instance_by_name("image") is None
        assert binder.get_instance_by_name("other") is None

    def test_clear(self, tmp_path) -> None:
        binder = MappingUploadBinder({"image": UploadedFile(name="a.png", temp_name=tmp_path / "t")})

        binder.clear()

        assert binder.get_instance_by_name("image") is None
