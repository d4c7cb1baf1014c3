"""Tests for the code-asset extension filter."""

from vimcode.core.asset_filter import is_managed_asset, parse_extension_list


class TestIsManagedAsset:
    """Tests for suffix matching."""

    def test_matching_extension(self) -> None:
        """Test that a configured suffix matches."""
        assert is_managed_asset("foo.cs", [".cs", ".h"])

    def test_non_matching_extension(self) -> None:
        """Test that other files are not managed."""
        assert not is_managed_asset("foo.png", [".cs", ".h"])

    def test_empty_list_matches_everything(self) -> None:
        """Test that an empty extension list accepts all files."""
        assert is_managed_asset("foo.any", [])

    def test_match_is_case_sensitive(self) -> None:
        """Test that suffix comparison respects case."""
        assert not is_managed_asset("Foo.CS", [".cs"])

    def test_suffix_not_substring(self) -> None:
        """Test that the extension must be at the end."""
        assert not is_managed_asset("foo.cs.meta", [".cs"])


class TestParseExtensionList:
    """Tests for parsing the comma-separated setting."""

    def test_splits_on_commas(self) -> None:
        """Test basic splitting."""
        assert parse_extension_list(".cs,.h,.md") == [".cs", ".h", ".md"]

    def test_empty_string_gives_empty_list(self) -> None:
        """Test that an empty setting means match everything."""
        assert parse_extension_list("") == []

    def test_blank_segments_and_whitespace_dropped(self) -> None:
        """Test that stray commas and spaces are ignored."""
        assert parse_extension_list(" .cs , ,.h,") == [".cs", ".h"]
