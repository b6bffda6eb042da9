"""
Unit tests for the index pattern codec.

These tests verify decoding of generated and user-authored names, the
formatting rules for each kind of project, and the round-trip law.
"""

import pytest

from tenancy_core.domain.project import ALL_ALIAS, EMPTY, EMPTY_PROJECT, Project
from tenancy_core.patterns.codec import IndexPatternCodec


class TestDecode:
    """Tests for IndexPatternCodec.decode."""

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_input_returns_empty(self, value):
        """Empty or missing names decode to EMPTY."""
        assert IndexPatternCodec("cdm").decode(value) == EMPTY
        assert IndexPatternCodec("").decode(value) == EMPTY

    def test_decodes_prefixed_name(self, codec):
        """A generated name yields its project name and uid."""
        project = codec.decode("cdm.foo.abc123.*")

        assert project == Project("foo", "abc123")

    def test_uid_may_contain_dots(self, codec):
        """The uid is everything between the name and the trailing wildcard."""
        project = codec.decode("cdm.foo.abc.def.*")

        assert project == Project("foo", "abc.def")

    def test_unmatched_name_is_returned_verbatim(self):
        """A user-authored name becomes the project name with no uid."""
        project = IndexPatternCodec("").decode("myapp.*")

        assert project.name == "myapp.*"
        assert project.uid is None

    def test_wrong_prefix_is_not_decoded(self, codec):
        """Names generated for another prefix are not decoded."""
        project = codec.decode("project.foo.abc123.*")

        assert project == Project("project.foo.abc123.*")

    def test_name_with_invalid_characters_is_not_decoded(self, codec):
        """Project names are limited to alphanumerics and hyphens."""
        project = codec.decode("cdm.foo_bar.abc.*")

        assert project == Project("cdm.foo_bar.abc.*")

    def test_missing_uid_is_not_decoded(self, codec):
        """A generated name must carry a non-empty uid."""
        assert codec.decode("cdm.foo..*") == Project("cdm.foo..*")

    def test_trailing_newline_is_not_decoded(self, codec):
        """The whole name must match, a trailing newline included."""
        assert codec.decode("cdm.foo.abc.*\n") == Project("cdm.foo.abc.*\n")
        assert not codec.is_generated("cdm.foo.abc.*\n")

    def test_uid_may_contain_newlines(self, codec):
        assert codec.decode("cdm.foo.a\nb.*") == Project("foo", "a\nb")

    def test_prefix_is_matched_literally(self):
        """Regex metacharacters in the prefix have no special meaning."""
        codec = IndexPatternCodec("c+m")

        assert codec.decode("c+m.foo.abc.*") == Project("foo", "abc")
        assert codec.decode("ccm.foo.abc.*") == Project("ccm.foo.abc.*")

    def test_empty_prefix_has_no_leading_segment(self):
        """Without a prefix, the name starts the index pattern."""
        codec = IndexPatternCodec("")

        assert codec.decode("foo.abc123.*") == Project("foo", "abc123")

    def test_blank_prefix_is_treated_as_empty(self):
        """A whitespace-only prefix behaves like no prefix at all."""
        codec = IndexPatternCodec("   ")

        assert codec.prefix == ""
        assert codec.decode("foo.abc123.*") == Project("foo", "abc123")


class TestEncode:
    """Tests for IndexPatternCodec.encode."""

    def test_formats_project_with_uid(self, codec):
        """A project with a uid is prefixed and suffixed with the wildcard."""
        assert codec.encode(Project("foo", "abc123")) == "cdm.foo.abc123.*"

    def test_formats_without_prefix(self):
        """No prefix segment is written for an empty prefix."""
        assert IndexPatternCodec().encode(Project("foo", "abc123")) == "foo.abc123.*"

    def test_all_alias_has_fixed_form(self, codec):
        """The all-tenants alias ignores the prefix."""
        assert codec.encode(ALL_ALIAS) == ".all"
        assert IndexPatternCodec().encode(ALL_ALIAS) == ".all"

    def test_empty_project_replaces_leading_dot_with_prefix(self, codec):
        """The empty-project marker drops its first character."""
        assert codec.encode(EMPTY_PROJECT) == "cdm.empty-project.*"

    def test_empty_project_without_prefix(self):
        """Without a prefix the marker is written without its leading dot."""
        assert IndexPatternCodec().encode(EMPTY_PROJECT) == "empty-project.*"

    def test_project_without_uid_gets_wildcard(self, codec):
        """A project without uid is written as its name plus the wildcard."""
        assert codec.encode(Project("logstash")) == "logstash.*"

    def test_project_without_uid_keeps_existing_wildcard(self, codec):
        """The wildcard is not appended twice."""
        assert codec.encode(Project("logstash.*")) == "logstash.*"

    def test_empty_project_encoding_does_not_decode_back(self, codec):
        """The marker encoding is not a generated name."""
        encoded = codec.encode(EMPTY_PROJECT)

        assert codec.decode(encoded) != EMPTY_PROJECT
        assert not codec.is_generated(encoded)


class TestRoundTrip:
    """decode(encode(p)) == p for projects with a uid."""

    @pytest.mark.parametrize("prefix", ["", "cdm", "project", "my.prefix", "c+m"])
    @pytest.mark.parametrize(
        "project",
        [
            Project("foo", "abc123"),
            Project("my-app", "5f1e0e24-0f02-11e9-9e5b-fa163e3a2f4c"),
            Project("", "uid"),
            Project("A1", "with.dots.in.it"),
            Project("x", "*"),
            Project("foo", "a\nb"),
        ],
    )
    def test_round_trip(self, prefix, project):
        codec = IndexPatternCodec(prefix)

        assert codec.decode(codec.encode(project)) == project

    def test_is_generated(self, codec):
        assert codec.is_generated("cdm.foo.abc.*")
        assert not codec.is_generated("user-made-pattern")
        assert not codec.is_generated(None)


# --- Fixtures ---


@pytest.fixture
def codec():
    """Codec with the 'cdm' prefix."""
    return IndexPatternCodec("cdm")
