"""Unit tests for the line-oriented block builder.

Exercises :func:`build_blocks` directly, one construct per test class.
"""

import pytest

from mdnotion.converter.block_builder import DEFAULT_CODE_LANGUAGE, build_blocks
from mdnotion.models import (
    BulletItem,
    CodeBlock,
    Divider,
    Heading,
    NumberItem,
    Paragraph,
    Quote,
    RichSpan,
    Table,
)


def _plain(text):
    return (RichSpan(text),)


# =========================================================================
# Paragraphs
# =========================================================================

class TestParagraphs:

    def test_single_line(self):
        assert build_blocks("Hello world") == [Paragraph(_plain("Hello world"))]

    def test_each_line_is_its_own_paragraph(self):
        blocks = build_blocks("one\ntwo")
        assert blocks == [Paragraph(_plain("one")), Paragraph(_plain("two"))]

    def test_surrounding_whitespace_is_trimmed(self):
        assert build_blocks("   indented   ") == [Paragraph(_plain("indented"))]

    def test_blank_lines_emit_nothing(self):
        assert build_blocks("\n\n   \n") == []

    def test_empty_document(self):
        assert build_blocks("") == []

    def test_inline_formatting(self):
        blocks = build_blocks("Some **bold** and `code` text.")
        assert blocks == [
            Paragraph((
                RichSpan("Some "),
                RichSpan("bold", bold=True),
                RichSpan(" and "),
                RichSpan("code", code=True),
                RichSpan(" text."),
            )),
        ]

    def test_long_line_split_into_several_paragraphs(self):
        blocks = build_blocks("alpha beta gamma", max_text_length=10)
        assert blocks == [
            Paragraph(_plain("alpha beta")),
            Paragraph(_plain("gamma")),
        ]

    def test_oversized_word_kept_whole(self):
        word = "x" * 30
        blocks = build_blocks(f"a {word} b", max_text_length=10)
        assert blocks == [
            Paragraph(_plain("a")),
            Paragraph(_plain(word)),
            Paragraph(_plain("b")),
        ]

    def test_default_limit_is_2000(self):
        text = " ".join(["word"] * 600)  # 2999 chars
        blocks = build_blocks(text)
        assert len(blocks) == 2
        for block in blocks:
            assert len(block.text[0].content) <= 2000

    def test_crlf_line_endings(self):
        assert build_blocks("one\r\ntwo\r\n") == [
            Paragraph(_plain("one")),
            Paragraph(_plain("two")),
        ]


# =========================================================================
# Headings
# =========================================================================

class TestHeadings:

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_levels_one_to_three(self, level):
        blocks = build_blocks("#" * level + " Title")
        assert blocks == [Heading(level, _plain("Title"))]

    @pytest.mark.parametrize("hashes", [4, 5, 6, 9])
    def test_deeper_levels_collapse_to_three(self, hashes):
        blocks = build_blocks("#" * hashes + " Deep")
        assert blocks == [Heading(3, _plain("Deep"))]

    def test_heading_text_is_inline_formatted(self):
        blocks = build_blocks("## **Bold** and `code`")
        assert blocks == [
            Heading(2, (
                RichSpan("Bold", bold=True),
                RichSpan(" and "),
                RichSpan("code", code=True),
            )),
        ]

    def test_empty_heading_emits_nothing(self):
        assert build_blocks("#") == []
        assert build_blocks("###   ") == []

    def test_hash_without_space_is_a_paragraph(self):
        assert build_blocks("#hashtag") == [Paragraph(_plain("#hashtag"))]

    def test_long_heading_spans_are_split(self):
        blocks = build_blocks("## alpha beta gamma", max_text_length=10)
        assert blocks == [Heading(2, (RichSpan("alpha beta"), RichSpan("gamma")))]

    def test_heading_notion_type(self):
        (heading,) = build_blocks("### Three")
        assert heading.notion_type == "heading_3"


# =========================================================================
# Lists
# =========================================================================

class TestLists:

    def test_bullets_then_paragraph(self):
        blocks = build_blocks("- a\n- b\n\nNext para")
        assert blocks == [
            BulletItem(_plain("a")),
            BulletItem(_plain("b")),
            Paragraph(_plain("Next para")),
        ]

    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_bullet_markers(self, marker):
        assert build_blocks(f"{marker} item") == [BulletItem(_plain("item"))]

    def test_numbered_items(self):
        blocks = build_blocks("1. first\n2. second\n10. tenth")
        assert blocks == [
            NumberItem(_plain("first")),
            NumberItem(_plain("second")),
            NumberItem(_plain("tenth")),
        ]

    def test_mixed_markers_form_one_run(self):
        blocks = build_blocks("- a\n1. b\n* c")
        assert blocks == [
            BulletItem(_plain("a")),
            NumberItem(_plain("b")),
            BulletItem(_plain("c")),
        ]

    def test_list_item_inline_formatting(self):
        blocks = build_blocks("- **key**: value")
        assert blocks == [BulletItem((RichSpan("key", bold=True), RichSpan(": value")))]

    def test_pending_list_flushed_at_end_of_input(self):
        assert build_blocks("- last") == [BulletItem(_plain("last"))]

    def test_list_flushed_before_heading(self):
        blocks = build_blocks("- a\n## H")
        assert blocks == [BulletItem(_plain("a")), Heading(2, _plain("H"))]

    def test_list_flushed_before_paragraph(self):
        blocks = build_blocks("- a\ntext")
        assert blocks == [BulletItem(_plain("a")), Paragraph(_plain("text"))]

    def test_indented_items_are_flattened(self):
        blocks = build_blocks("- a\n  - nested")
        assert blocks == [BulletItem(_plain("a")), BulletItem(_plain("nested"))]

    def test_number_without_space_is_a_paragraph(self):
        assert build_blocks("3.14 is pi") == [Paragraph(_plain("3.14 is pi"))]

    @pytest.mark.parametrize("line", ["- ", "* ", "+ ", "1. ", "-", "12."])
    def test_bare_marker_emits_nothing(self, line):
        assert build_blocks(line) == []

    def test_bare_markers_mixed(self):
        assert build_blocks("- \n1. ") == []

    def test_bare_marker_keeps_list_run(self):
        blocks = build_blocks("- a\n- \n- b")
        assert blocks == [BulletItem(_plain("a")), BulletItem(_plain("b"))]


# =========================================================================
# Dividers
# =========================================================================

class TestDividers:

    @pytest.mark.parametrize("line", ["---", "***", "___", "-----"])
    def test_divider_lines(self, line):
        assert build_blocks(line) == [Divider()]

    def test_divider_between_paragraphs(self):
        blocks = build_blocks("above\n---\nbelow")
        assert blocks == [Paragraph(_plain("above")), Divider(), Paragraph(_plain("below"))]

    def test_divider_flushes_list(self):
        blocks = build_blocks("- a\n---")
        assert blocks == [BulletItem(_plain("a")), Divider()]

    def test_mixed_characters_are_not_a_divider(self):
        assert build_blocks("-*-") == [Paragraph(_plain("-*-"))]


# =========================================================================
# Code fences
# =========================================================================

class TestCodeFences:

    def test_fence_with_language(self):
        blocks = build_blocks("```python\nx = 1\n\ny = 2\n```")
        assert blocks == [CodeBlock("python", "x = 1\n\ny = 2")]

    def test_fence_without_language(self):
        blocks = build_blocks("```\nplain\n```")
        assert blocks == [CodeBlock(DEFAULT_CODE_LANGUAGE, "plain")]
        assert DEFAULT_CODE_LANGUAGE == "plain text"

    def test_leading_and_trailing_blank_lines_removed(self):
        blocks = build_blocks("```\n\n    indented\n\n```")
        assert blocks == [CodeBlock("plain text", "    indented")]

    def test_content_is_not_formatted(self):
        blocks = build_blocks("```md\n# not a heading\n**not bold** `x`\n- no list\n```")
        assert blocks == [CodeBlock("md", "# not a heading\n**not bold** `x`\n- no list")]

    def test_longer_fence_marker(self):
        blocks = build_blocks("````sh\necho hi\n````")
        assert blocks == [CodeBlock("sh", "echo hi")]

    def test_code_split_at_limit_shares_language(self):
        blocks = build_blocks("```js\naaaa bbbb cccc\n```", max_text_length=10)
        assert blocks == [CodeBlock("js", "aaaa bbbb"), CodeBlock("js", "cccc")]

    def test_unterminated_fence_is_flushed(self):
        blocks = build_blocks("```js\nlet a = 1;")
        assert blocks == [CodeBlock("js", "let a = 1;")]

    def test_empty_fence(self):
        assert build_blocks("```\n```") == [CodeBlock("plain text", "")]

    def test_fence_flushes_list(self):
        blocks = build_blocks("- a\n```\ncode\n```")
        assert blocks == [BulletItem(_plain("a")), CodeBlock("plain text", "code")]

    def test_language_resets_between_fences(self):
        blocks = build_blocks("```py\na\n```\n```\nb\n```")
        assert blocks == [CodeBlock("py", "a"), CodeBlock("plain text", "b")]


# =========================================================================
# Block quotes
# =========================================================================

class TestBlockQuotes:

    def test_consecutive_lines_form_one_quote(self):
        blocks = build_blocks("> hello\n> **world**")
        assert blocks == [Quote((RichSpan("hello\n"), RichSpan("world", bold=True)))]

    def test_marker_without_space(self):
        assert build_blocks(">tight") == [Quote(_plain("tight"))]

    def test_quote_terminated_by_paragraph(self):
        blocks = build_blocks("> q\ntext")
        assert blocks == [Quote(_plain("q")), Paragraph(_plain("text"))]

    def test_quote_terminated_by_list_item(self):
        blocks = build_blocks("> q\n- a")
        assert blocks == [Quote(_plain("q")), BulletItem(_plain("a"))]

    def test_quote_terminated_by_blank_line(self):
        blocks = build_blocks("> one\n\n> two")
        assert blocks == [Quote(_plain("one")), Quote(_plain("two"))]

    def test_quote_flushed_at_end_of_input(self):
        assert build_blocks("text\n> end") == [Paragraph(_plain("text")), Quote(_plain("end"))]

    def test_empty_quote_emits_nothing(self):
        assert build_blocks(">\n> ") == []

    def test_quote_flushes_pending_list(self):
        blocks = build_blocks("- a\n> q")
        assert blocks == [BulletItem(_plain("a")), Quote(_plain("q"))]

    def test_long_quote_split(self):
        blocks = build_blocks("> alpha beta\n> gamma", max_text_length=10)
        assert blocks == [Quote(_plain("alpha")), Quote(_plain("beta\ngamma"))]


# =========================================================================
# Tables
# =========================================================================

class TestTables:

    def test_header_and_data_row(self):
        blocks = build_blocks("| a | b |\n|---|---|\n| 1 | 2 |")
        assert blocks == [Table(rows=(("a", "b"), ("1", "2")))]

    def test_header_only_is_discarded(self):
        assert build_blocks("| a | b |\n|---|---|") == []

    def test_single_row_without_separator_is_discarded(self):
        assert build_blocks("| lonely |") == []

    def test_alignment_separator_consumed(self):
        md = "| a | b |\n| :-- | --: |\n| 1 | 2 |\n| 3 | 4 |"
        (table,) = build_blocks(md)
        assert table.rows == (("a", "b"), ("1", "2"), ("3", "4"))
        assert table.has_column_header is True

    def test_empty_interior_cells_kept(self):
        (table,) = build_blocks("| a |  | c |\n|---|---|---|\n| 1 | 2 | 3 |")
        assert table.rows == (("a", "", "c"), ("1", "2", "3"))

    def test_cells_are_literal(self):
        (table,) = build_blocks("| **x** |\n|---|\n| `y` |")
        assert table.rows == (("**x**",), ("`y`",))

    def test_table_followed_by_paragraph(self):
        blocks = build_blocks("| a |\n|---|\n| 1 |\nafter")
        assert blocks == [Table(rows=(("a",), ("1",))), Paragraph(_plain("after"))]

    def test_blank_line_separates_tables(self):
        blocks = build_blocks("| a |\n| 1 |\n\n| b |\n| 2 |")
        assert blocks == [
            Table(rows=(("a",), ("1",))),
            Table(rows=(("b",), ("2",))),
        ]

    def test_table_flushes_list(self):
        blocks = build_blocks("- a\n| x |\n|---|\n| 1 |")
        assert blocks == [BulletItem(_plain("a")), Table(rows=(("x",), ("1",)))]

    def test_quote_then_table(self):
        blocks = build_blocks("> q\n| a |\n| 1 |")
        assert blocks == [Quote(_plain("q")), Table(rows=(("a",), ("1",)))]

    def test_separator_never_becomes_row(self):
        (table,) = build_blocks("| a |\n|---|\n| 1 |\n|---|\n| 2 |")
        assert table.rows == (("a",), ("1",), ("2",))

    def test_ragged_rows_keep_their_width(self):
        (table,) = build_blocks("| a | b | c |\n|---|---|---|\n| 1 |")
        assert table.rows == (("a", "b", "c"), ("1",))
        assert table.width == 3


# =========================================================================
# Whole documents
# =========================================================================

class TestDocuments:

    def test_order_is_preserved(self):
        md = (
            "## Overview\n"
            "Intro line.\n"
            "\n"
            "- one\n"
            "2. two\n"
            "\n"
            "> quoted\n"
            "```bash\n"
            "make test\n"
            "```\n"
            "| k | v |\n"
            "|---|---|\n"
            "| a | 1 |\n"
            "***\n"
            "Done."
        )
        blocks = build_blocks(md)
        assert [type(b).__name__ for b in blocks] == [
            "Heading",
            "Paragraph",
            "BulletItem",
            "NumberItem",
            "Quote",
            "CodeBlock",
            "Table",
            "Divider",
            "Paragraph",
        ]

    def test_repeat_conversion_is_identical(self):
        md = "# T\n- a\n> q\n| a |\n|---|\n| 1 |\n```\nx\n```"
        assert build_blocks(md) == build_blocks(md)

    @pytest.mark.parametrize("limit", [0, -5])
    def test_invalid_limit_raises(self, limit):
        with pytest.raises(ValueError, match="max_text_length must be >= 1"):
            build_blocks("text", max_text_length=limit)
