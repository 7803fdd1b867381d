from image_cover.core.infrastructure.local.uploaded_file import UploadedFile
from image_cover.core.repositories.upload_binder import Submission


class TestUploadedFile:
    def test_name_parts(self, tmp_path) -> None:
        upload = UploadedFile(name="Holiday Photo.JPG", temp_name=tmp_path / "php123")

        assert upload.base_name == "Holiday Photo"
        assert upload.extension == "jpg"

    def test_without_extension(self, tmp_path) -> None:
        upload = UploadedFile(name="README", temp_name=tmp_path / "php123")

        assert upload.extension == ""

    def test_satisfies_submission_protocol(self, tmp_path) -> None:
        assert isinstance(UploadedFile(name="a.png", temp_name=tmp_path / "t"), Submission)

    def test_save_as_moves_temp_file(self, tmp_path) -> None:
        temp = tmp_path / "php123"
        temp.write_bytes(b"data")
        upload = UploadedFile(name="a.png", temp_name=temp)
        target = tmp_path / "a.png"

        assert upload.save_as(str(target)) is True
        assert target.read_bytes() == b"data"
        assert not temp.exists()
        assert upload.temp_name == str(target)

    def test_save_as_copy_keeps_temp_file(self, tmp_path) -> None:
        temp = tmp_path / "php123"
        temp.write_bytes(b"data")
        upload = UploadedFile(name="a.png", temp_name=temp)

        assert upload.save_as(str(tmp_path / "a.png"), delete_temp_file=False) is True
        assert temp.exists()
        assert upload.size == 4

    def test_save_as_failure_returns_false(self, tmp_path) -> None:
        upload = UploadedFile(name="a.png", temp_name=tmp_path / "missing")

        assert upload.save_as(str(tmp_path / "a.png")) is False
