import pytest

from frontmatter_stream.errors import ConfigError
from frontmatter_stream.models.markers import (
    DEFAULT_MARKER_PAIRS,
    MarkerPair,
    build_marker_table,
)


def test_build_default_table():
	table = build_marker_table()
	assert len(table) == 2
	assert table.pairs[0].open == b"---"
	assert table.pairs[1].open == b"```yaml"


def test_pairs_are_normalized():
	"""Markers gain newlines so they must sit on their own line."""
	table = build_marker_table(DEFAULT_MARKER_PAIRS)
	assert [(p.open_line, p.close_line) for p in table.pairs] == [
	    (b"---\n", b"\n---\n"),
	    (b"```yaml\n", b"\n```\n"),
	]


def test_min_lookahead_is_longest_opening():
	table = build_marker_table([("ab", "x"), ("abcdef", "y"), ("abc", "z")])
	assert table.min_lookahead == len(b"abcdef\n")


def test_str_and_bytes_markers_are_equivalent():
	a = build_marker_table([("open", "close")])
	b = build_marker_table([(b"open", b"close")])
	assert a == b


def test_marker_pair_instances_accepted():
	pair = MarkerPair(open=b"+++", close=b"+++")
	table = build_marker_table([pair])
	assert table.pairs == (pair,)


def test_declaration_order_is_kept():
	table = build_marker_table([("b", "b"), ("a", "a")])
	assert [p.open for p in table.pairs] == [b"b", b"a"]


@pytest.mark.parametrize("pairs", [
    [("---",)],
    [("---", "---", "---")],
    [["---"]],
    ["---"],
    [b"--"],
    [None],
])
def test_wrong_arity_is_rejected(pairs):
	with pytest.raises(ConfigError):
		build_marker_table(pairs)


def test_empty_marker_is_rejected():
	with pytest.raises(ConfigError):
		build_marker_table([("", "---")])


def test_no_pairs_is_rejected():
	with pytest.raises(ConfigError):
		build_marker_table([])


def test_config_error_is_value_error():
	with pytest.raises(ValueError):
		build_marker_table([("only-one",)])


def test_table_is_immutable():
	table = build_marker_table()
	with pytest.raises(Exception):
		table.pairs = ()
