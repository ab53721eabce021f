"""Unit tests for output writing utilities."""

import io

import pytest

from events2md.exceptions import OutputWriteError, RenderingError
from events2md.utils.io_utils import write_text


@pytest.mark.unit
class TestWriteText:
    def test_path(self, tmp_path):
        target = tmp_path / "out.md"
        write_text("café", target)
        assert target.read_bytes() == "café".encode("utf-8")

    def test_string_path(self, tmp_path):
        target = tmp_path / "out.md"
        write_text("x", str(target))
        assert target.read_text(encoding="utf-8") == "x"

    def test_text_stream(self):
        stream = io.StringIO()
        write_text("x", stream)
        assert stream.getvalue() == "x"

    def test_binary_stream(self):
        stream = io.BytesIO()
        write_text("—", stream)
        assert stream.getvalue() == "—".encode("utf-8")

    def test_binary_file(self, tmp_path):
        target = tmp_path / "out.md"
        with open(target, "wb") as f:
            write_text("x", f)
        assert target.read_text(encoding="utf-8") == "x"

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(OutputWriteError) as exc_info:
            write_text("x", tmp_path)
        assert isinstance(exc_info.value, RenderingError)
        assert exc_info.value.file_path == str(tmp_path)

    def test_unsupported_output(self):
        with pytest.raises(TypeError):
            write_text("x", 42)  # type: ignore[arg-type]
