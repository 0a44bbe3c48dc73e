"""Tests for the comment-leader trie and DWIM line stops."""

from readline_edit.stops import backward_line_stops
from readline_edit.trie import TrieNode, build_trie, match_from


class TestBuildTrie:
    def test_empty_pattern_list(self):
        root = build_trie([])
        assert root.children == {}
        assert not root.terminal

    def test_single_pattern(self):
        root = build_trie(["//"])
        slash = ord("/")
        assert list(root.children) == [slash]
        child = root.children[slash]
        assert not child.terminal
        assert child.children[slash].terminal

    def test_patterns_share_nodes(self):
        root = build_trie(["--", "-["])
        dash = root.children[ord("-")]
        assert set(dash.children) == {ord("-"), ord("[")}

    def test_nodes_keyed_by_byte(self):
        root = build_trie(["é"])
        assert list(root.children) == [0xC3]
        assert isinstance(root, TrieNode)


class TestMatchFrom:
    def test_match_at_start(self):
        assert match_from(build_trie(["//"]), b"// hi", 0) == 2

    def test_match_at_offset(self):
        assert match_from(build_trie(["#"]), b"  # hi", 2) == 3

    def test_no_match(self):
        assert match_from(build_trie(["//"]), b"/ hi", 0) is None
        assert match_from(build_trie(["#"]), b"x # hi", 0) is None

    def test_input_exhausted(self):
        assert match_from(build_trie(["--"]), b"-", 0) is None
        assert match_from(build_trie(["--"]), b"", 0) is None

    def test_first_terminal_wins(self):
        root = build_trie(["-", "--"])
        assert match_from(root, b"-- x", 0) == 1

    def test_any_of_several_patterns(self):
        root = build_trie(["//", "#"])
        assert match_from(root, b"# x", 0) == 1
        assert match_from(root, b"// x", 0) == 2


class TestBackwardLineStops:
    def test_plain_line(self):
        assert backward_line_stops("hello", []) == [0]

    def test_empty_line(self):
        assert backward_line_stops("", ["#"]) == [0]

    def test_indented_line(self):
        assert backward_line_stops("    hello", []) == [0, 4]

    def test_blank_line(self):
        assert backward_line_stops("   ", ["#"]) == [0, 3]

    def test_lua_comment(self):
        assert backward_line_stops("  -- hi", ["--"]) == [0, 2, 5]

    def test_unindented_comment(self):
        assert backward_line_stops("# hi", ["#"]) == [0, 2]

    def test_comment_without_space(self):
        assert backward_line_stops("\t//hi", ["//"]) == [0, 1, 3]

    def test_comment_leader_alone(self):
        assert backward_line_stops("  //", ["//"]) == [0, 2, 4]

    def test_comment_leader_not_at_indent(self):
        assert backward_line_stops("  x = 1 -- one", ["--"]) == [0, 2]

    def test_leader_for_other_filetype_ignored(self):
        assert backward_line_stops("  -- hi", ["#"]) == [0, 2]

    def test_multibyte_text_before_comment(self):
        # Columns are characters even when the indentation is followed by
        # multi-byte text
        assert backward_line_stops("  é -- x", ["--"]) == [0, 2]
        assert backward_line_stops("  -- é", ["--"]) == [0, 2, 5]

    def test_stops_strictly_increasing(self):
        for line in ["", "x", "  ", "  # a", "#", "# ", "\t\t--  z", "//"]:
            stops = backward_line_stops(line, ["#", "--", "//"])
            assert stops[0] == 0
            assert 1 <= len(stops) <= 3
            assert all(a < b for a, b in zip(stops, stops[1:]))
            assert stops[-1] <= len(line)
