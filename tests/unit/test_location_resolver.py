"""
Unit tests for sarif_flows.extractors.location_resolver module.
"""
import asyncio

import pytest
from sarif_flows.core.errors import ResolutionError
from sarif_flows.extractors.location_resolver import LocationResolver


def physical(uri, uri_base_id=None, **region):
    """Helper to create a SARIF physicalLocation."""
    artifact = {"uri": uri}
    if uri_base_id:
        artifact["uriBaseId"] = uri_base_id
    return {"artifactLocation": artifact, "region": region}


@pytest.fixture
def checkout(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.c").write_text("int main() { return 0; }\n")
    (tmp_path / "my file.c").write_text("\n")
    return tmp_path


class TestLocationResolver:
    """Tests for the LocationResolver class."""

    def test_relative_uri_under_source_root(self, checkout):
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve(physical("src/main.c", startLine=1)))

        assert location.mapped is True
        assert location.file_path == str(checkout / "src" / "main.c")
        assert location.uri == "src/main.c"
        assert location.start_line == 1

    def test_missing_file_is_not_mapped(self, checkout):
        resolver = LocationResolver(str(checkout))
        descriptor = physical("src/missing.c", startLine=4)
        location = asyncio.run(resolver.resolve(descriptor))

        assert location.mapped is False
        assert location.file_path is None
        assert location.uri == "src/missing.c"
        assert location.physical_location is descriptor

    def test_no_descriptor(self, checkout):
        resolver = LocationResolver(str(checkout))
        assert asyncio.run(resolver.resolve(None)) is None

    def test_descriptor_without_artifact(self, checkout):
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve({"region": {"startLine": 3}}))

        assert location.mapped is False
        assert location.uri is None
        assert location.start_line == 3

    def test_file_uri(self, checkout):
        resolver = LocationResolver("/nonexistent")
        uri = (checkout / "src" / "main.c").as_uri()
        location = asyncio.run(resolver.resolve(physical(uri)))

        assert location.mapped is True
        assert location.file_path == str(checkout / "src" / "main.c")

    def test_percent_encoded_uri(self, checkout):
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve(physical("my%20file.c")))
        assert location.mapped is True

    def test_remote_uri_is_not_mapped(self, checkout):
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve(physical("https://example.com/src/main.c")))
        assert location.mapped is False

    def test_uri_base_id_directory(self, checkout):
        resolver = LocationResolver("/nonexistent", {"SRCROOT": str(checkout / "src")})
        location = asyncio.run(resolver.resolve(physical("main.c", "SRCROOT")))

        assert location.mapped is True
        assert location.uri_base_id == "SRCROOT"

    def test_uri_base_id_file_uri(self, checkout):
        resolver = LocationResolver("/nonexistent", {"SRCROOT": checkout.as_uri() + "/"})
        location = asyncio.run(resolver.resolve(physical("src/main.c", "SRCROOT")))
        assert location.mapped is True

    def test_unknown_uri_base_id_is_not_mapped(self, checkout):
        """A base id without a mapping cannot be placed, even if source_root has the file."""
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve(physical("src/main.c", "SRCROOT")))
        assert location.mapped is False

    def test_region_defaults(self, checkout):
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve(physical("src/main.c", startLine=7)))

        assert location.start_line == 7
        assert location.start_column == 1
        assert location.end_line == 7
        assert location.end_column is None

    def test_full_region(self, checkout):
        resolver = LocationResolver(str(checkout))
        location = asyncio.run(resolver.resolve(
            physical("src/main.c", startLine=2, startColumn=5, endLine=4, endColumn=9)
        ))
        assert (location.start_line, location.start_column, location.end_line, location.end_column) == (2, 5, 4, 9)

    def test_invalid_descriptor_raises(self, checkout):
        resolver = LocationResolver(str(checkout))
        with pytest.raises(ResolutionError):
            asyncio.run(resolver.resolve("src/main.c"))

    def test_invalid_region_raises(self, checkout):
        resolver = LocationResolver(str(checkout))
        with pytest.raises(ResolutionError):
            asyncio.run(resolver.resolve(physical("src/main.c", startLine="ten")))


class TestCollectUriBaseIds:
    """Tests for the collect_uri_base_ids static method."""

    def test_flatten(self):
        base_ids = LocationResolver.collect_uri_base_ids({
            "SRCROOT": {"uri": "file:///work/src/"},
            "NOURI": {"description": {"text": "unset"}},
        })
        assert base_ids == {"SRCROOT": "file:///work/src/"}

    def test_missing(self):
        assert LocationResolver.collect_uri_base_ids(None) == {}
