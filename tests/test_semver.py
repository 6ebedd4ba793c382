# SPDX-License-Identifier: MIT
"""Unit tests for the version value type, rendering and parsing."""

import pytest

from ordered_semver import (
    Version,
    render_full,
    render_short,
    render_core,
    content_equal,
    is_zero,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
)


class TestRendering:
    """Tests for the three string renderings."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 0, 0), "1.0.0"),
            (Version(1, 0, 0, "alpha"), "1.0.0-alpha"),
            (Version(1, 0, 0, build="0001"), "1.0.0+0001"),
            (Version(1, 0, 0, "beta", "0002"), "1.0.0-beta+0002"),
        ],
    )
    def test_full(self, version, expected):
        """Test full rendering includes pre-release and build when present."""
        assert render_full(version) == expected
        assert str(version) == expected

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 0, 0), "1.0.0"),
            (Version(1, 0, 0, "alpha"), "1.0.0-alpha"),
            (Version(1, 0, 0, build="build123"), "1.0.0"),
            (Version(1, 0, 0, "beta", "build123"), "1.0.0-beta"),
        ],
    )
    def test_short(self, version, expected):
        """Test short rendering drops build metadata."""
        assert render_short(version) == expected
        assert version.short() == expected

    @pytest.mark.parametrize(
        "version",
        [
            Version(1, 0, 0),
            Version(1, 0, 0, "alpha"),
            Version(1, 0, 0, build="build123"),
            Version(1, 0, 0, "beta", "build123"),
        ],
    )
    def test_core(self, version):
        """Test core rendering drops pre-release and build metadata."""
        assert render_core(version) == "1.0.0"
        assert version.core() == "1.0.0"

    def test_no_padding(self):
        """Test numbers are rendered in plain decimal."""
        assert str(Version(10, 200, 3000)) == "10.200.3000"

    def test_fields_emitted_verbatim(self):
        """Test rendering does not validate pre-release or build contents."""
        v = Version(1, 2, 3, "not valid!", "also..bad")
        assert str(v) == "1.2.3-not valid!+also..bad"


class TestContentEquality:
    """Tests for field-by-field equality."""

    def test_same_version(self):
        """Test identical versions are equal."""
        assert content_equal(Version(1, 0, 0), Version(1, 0, 0))
        assert Version(1, 0, 0) == Version(1, 0, 0)

    def test_different_patch(self):
        """Test a differing patch makes versions unequal."""
        assert not content_equal(Version(1, 0, 0), Version(1, 0, 1))

    def test_different_build(self):
        """Test build metadata is significant for equality."""
        v1 = Version(1, 0, 0, build="b1")
        v2 = Version(1, 0, 0, build="b2")
        assert not content_equal(v1, v2)
        assert not v1.equal(v2)
        assert v1 != v2

    def test_hashable(self):
        """Test that versions are hashable."""
        v = Version(1, 0, 0)
        s = {v}
        assert Version(1, 0, 0) in s
        assert Version(1, 0, 0, build="x") not in s

    def test_frozen(self):
        """Test that Version is immutable."""
        v = Version(1, 0, 0)
        with pytest.raises(AttributeError):
            v.major = 2  # type: ignore

    def test_without_build_returns_new_value(self):
        """Test stripping build metadata leaves the original untouched."""
        v = Version(1, 0, 0, "rc.1", "abc1234")
        stripped = v.without_build()
        assert stripped == Version(1, 0, 0, "rc.1")
        assert v.build == "abc1234"


class TestIsZero:
    """Tests for the zero version sentinel."""

    def test_default_is_zero(self):
        """Test the default-constructed version is zero."""
        assert is_zero(Version(0, 0, 0, "", ""))
        assert Version().is_zero

    @pytest.mark.parametrize(
        "version",
        [
            Version(0, 0, 1),
            Version(0, 1, 0),
            Version(1, 0, 0),
            Version(0, 0, 0, "alpha"),
            Version(0, 0, 0, build="1"),
        ],
    )
    def test_non_zero(self, version):
        """Test any non-default field makes the version non-zero."""
        assert is_zero(version) is False


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        v = parse_version("1.2.3")
        assert v == Version(1, 2, 3)
        assert v.prerelease == ""
        assert v.build == ""
        assert v.is_prerelease is False

    def test_version_with_zeros(self):
        """Test parsing 0.0.0 yields the zero version."""
        assert parse_version("0.0.0").is_zero

    def test_prerelease(self):
        """Test parsing pre-release identifiers."""
        v = parse_version("1.0.0-alpha.1")
        assert v.prerelease == "alpha.1"
        assert v.is_prerelease is True

    def test_build_metadata(self):
        """Test parsing build metadata."""
        v = parse_version("1.0.0+build.123")
        assert v.build == "build.123"
        assert v.prerelease == ""

    def test_prerelease_and_build(self):
        """Test parsing both pre-release and build metadata."""
        v = parse_version("1.0.0-alpha.1+build.456")
        assert v == Version(1, 0, 0, "alpha.1", "build.456")

    def test_numeric_prerelease(self):
        """Test parsing numeric-only pre-release."""
        assert parse_version("1.0.0-0.3.7").prerelease == "0.3.7"

    def test_whitespace_trimmed(self):
        """Test surrounding whitespace is ignored."""
        assert parse_version("  2.0.0 \n") == Version(2, 0, 0)

    def test_str_round_trip(self):
        """Test rendering a parsed version reproduces the input."""
        assert str(parse_version("1.2.3-alpha.1+build")) == "1.2.3-alpha.1+build"


class TestInvalidVersions:
    """Tests for invalid version strings."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "1",
            "1.0",
            "01.0.0",
            "-1.0.0",
            "a.b.c",
            "1.2.3.4",
            "1.0.0-01",
            "1.0.0-",
            "1.0.0+",
            "1.0.0-alpha..1",
            "v1.0.0",
            "１.0.0",
        ],
    )
    def test_rejected(self, text):
        """Test malformed strings raise InvalidVersionError."""
        with pytest.raises(InvalidVersionError) as exc_info:
            parse_version(text)
        assert exc_info.value.version == text.strip()

    def test_non_string_input(self):
        """Test that non-string input raises error."""
        with pytest.raises(InvalidVersionError, match="must be a string"):
            parse_version(123)  # type: ignore

    def test_none_input(self):
        """Test that None input raises error."""
        with pytest.raises(InvalidVersionError):
            parse_version(None)  # type: ignore


class TestIsValidSemver:
    """Tests for is_valid_semver function."""

    @pytest.mark.parametrize(
        "text",
        ["1.0.0", "1.0.0-alpha", "1.0.0+build", "1.0.0-alpha.1+build.123", "  1.0.0  "],
    )
    def test_valid(self, text):
        assert is_valid_semver(text) is True

    @pytest.mark.parametrize("text", ["1.0", "", "1.0.0-01", "1.0.0+build+more"])
    def test_invalid(self, text):
        assert is_valid_semver(text) is False

    def test_invalid_non_string(self):
        """Test invalid non-string input."""
        assert is_valid_semver(123) is False  # type: ignore
