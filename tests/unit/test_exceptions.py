"""Tests for the exception hierarchy."""

from tabledump import ExportError, ManifestError, TableDumpError, ValidationError


class TestExceptions:
    """Tests for exception messages and attributes."""

    def test_hierarchy(self):
        for cls in (ValidationError, ExportError, ManifestError):
            assert issubclass(cls, TableDumpError)

    def test_validation_error(self):
        err = ValidationError("indent", -1, "must be >= 0")
        assert err.field == "indent"
        assert err.value == -1
        assert err.reason == "must be >= 0"
        assert str(err) == "Invalid indent: -1 (must be >= 0)"

    def test_export_error(self):
        cause = OSError("disk full")
        err = ExportError("/tmp/t.txt", cause)
        assert err.cause is cause
        assert "disk full" in str(err)
        assert "/tmp/t.txt" in str(err)

    def test_manifest_error_with_source(self):
        err = ManifestError("rows must be a list", source="t.yaml")
        assert str(err) == "Invalid table document: rows must be a list [t.yaml]"

    def test_manifest_error_without_source(self):
        assert str(ManifestError("bad")) == "Invalid table document: bad"
