"""Unit tests for syntactic path resolution."""

from models.paths import format_path, resolve_path


class TestResolvePath:
    """Tests for resolve_path."""

    def test_parent_of_root_is_root(self):
        """'..' at the root stays at the root."""
        assert resolve_path([], "..") == []

    def test_relative_with_parent(self):
        """'..' pops one segment before continuing."""
        assert resolve_path(["a", "b"], "../c") == ["a", "c"]

    def test_relative_appends_to_cwd(self):
        """Relative paths start from the working directory."""
        assert resolve_path(["a"], "b/c") == ["a", "b", "c"]

    def test_absolute_ignores_cwd(self):
        """A leading slash starts from the root."""
        assert resolve_path(["a", "b"], "/x/y") == ["x", "y"]

    def test_root(self):
        """'/' resolves to the root."""
        assert resolve_path(["a"], "/") == []

    def test_dot_and_empty_segments_dropped(self):
        """'.' and repeated slashes are ignored."""
        assert resolve_path([], "./a//b/./") == ["a", "b"]

    def test_cannot_ascend_past_root(self):
        """Extra '..' segments are clamped at the root."""
        assert resolve_path(["a"], "../../../b") == ["b"]

    def test_empty_string_is_cwd(self):
        """An empty path resolves to the working directory."""
        assert resolve_path(["a", "b"], "") == ["a", "b"]

    def test_cwd_not_mutated(self):
        """Resolution returns a new list."""
        cwd = ["a", "b"]
        resolve_path(cwd, "../../c")
        assert cwd == ["a", "b"]

    def test_result_never_contains_special_segments(self):
        """Resolved paths hold no '', '.' or '..'."""
        result = resolve_path(["x"], "a/../b/./c//..//d")
        assert result == ["x", "b", "d"]
        assert not {"", ".", ".."} & set(result)


class TestFormatPath:
    """Tests for format_path."""

    def test_root(self):
        """The root renders as '/'."""
        assert format_path([]) == "/"

    def test_nested(self):
        """Segments are joined under a leading slash."""
        assert format_path(["a", "b"]) == "/a/b"
