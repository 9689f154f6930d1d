"""
Tests for text normalization helpers (utils.text_processor.TextProcessor).
"""

from utils.text_processor import TextProcessor


def test_collapse_whitespace_handles_newlines_and_tabs():
    assert TextProcessor.collapse_whitespace("a\n\nb\t\tc   d\r\ne") == "a b c d e"


def test_collapse_whitespace_keeps_edges_as_single_space():
    assert TextProcessor.collapse_whitespace("\n  text  \n") == " text "


def test_truncate_excerpt_boundaries():
    exact  = "a" * 100
    longer = "b" * 101

    assert TextProcessor.truncate_excerpt(exact) == exact
    assert TextProcessor.truncate_excerpt(longer) == "b" * 100 + "..."
    assert TextProcessor.truncate_excerpt("") == ""


def test_truncate_excerpt_custom_length():
    assert TextProcessor.truncate_excerpt("immediate", max_length = 3) == "imm..."


def test_count_words():
    assert TextProcessor.count_words("") == 0
    assert TextProcessor.count_words("one  two\nthree") == 3
