"""Tests for the MCP server functionality."""

import os
import tempfile

import pytest

from filemeta.server import DerivedPath, FileDescription, derive_path, describe_file, mcp, touch_file


@pytest.fixture
def temp_test_file():
    """Create a temporary test file."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".TXT", delete=False) as f:
        f.write("Some plain text.\n")
        temp_path = f.name

    yield temp_path

    # Cleanup
    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as d:
        yield d


class TestServerTools:
    """Test cases for MCP server tools."""

    def test_describe_file(self, temp_test_file):
        result = describe_file(file_path=temp_test_file)

        assert isinstance(result, FileDescription)
        assert result.path == temp_test_file
        assert result.dir == os.path.dirname(temp_test_file)
        assert result.filename == os.path.basename(temp_test_file)
        assert result.ext == "txt"
        assert result.mime == "text/plain"
        assert result.exists is True
        assert result.size_bytes > 0
        assert result.modified is not None

    def test_describe_file_with_known_mime(self, temp_test_file):
        result = describe_file(file_path=temp_test_file, mime="text/x-custom")
        assert result.mime == "text/x-custom"

    def test_describe_file_invalid_path(self):
        with pytest.raises(FileNotFoundError):
            describe_file(file_path="/nonexistent/file.txt")

    def test_describe_directory_rejected(self, temp_dir):
        with pytest.raises(ValueError):
            describe_file(file_path=temp_dir)

    def test_traversal_rejected(self):
        with pytest.raises(ValueError):
            describe_file(file_path="../etc/passwd")

    def test_derive_path_ext(self):
        result = derive_path(file_path="a/b/report.csv", ext="txt")
        assert result == DerivedPath(source="a/b/report.csv", path="a/b/report.txt")

    def test_derive_path_suffix(self):
        result = derive_path(file_path="a/b/readme", suffix="_v2")
        assert result.path == "a/b/readme_v2"

    def test_derive_path_both(self):
        result = derive_path(file_path="report.CSV", ext="json", suffix="_v2")
        assert result.path == "report_v2.json"

    def test_derive_path_requires_change(self):
        with pytest.raises(ValueError):
            derive_path(file_path="report.csv")

    def test_touch_file_creates(self, temp_dir):
        path = os.path.join(temp_dir, "touched.log")
        result = touch_file(file_path=path)

        assert os.path.isfile(path)
        assert result.exists is True
        assert result.size_bytes == 0
        assert result.basename == "touched"


class TestMCPServer:
    """Test cases for the MCP server instance."""

    def test_mcp_instance_exists(self):
        assert mcp is not None
        assert mcp.name == "Filemeta"

    def test_tools_are_callable(self):
        for tool in [describe_file, derive_path, touch_file]:
            assert callable(tool)
