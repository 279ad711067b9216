"""Tests for the MarkdownToNotionConverter pipeline."""

from __future__ import annotations

from mdnotion.config import MdNotionConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter
from mdnotion.models import Heading, Paragraph, RichSpan


class RecordingMetrics:
    def __init__(self):
        self.increments = []
        self.timings = []

    def increment(self, name, value=1, tags=None):
        self.increments.append((name, value, tags))

    def timing(self, name, ms, tags=None):
        self.timings.append((name, ms, tags))


class TestConvert:

    def test_title_and_body(self, converter):
        result = converter.convert("# H\n\nSome **bold** and `code` text.\n")
        assert result.title == "H"
        assert result.blocks == [
            Paragraph((
                RichSpan("Some "),
                RichSpan("bold", bold=True),
                RichSpan(" and "),
                RichSpan("code", code=True),
                RichSpan(" text."),
            )),
        ]
        assert result.batches == [result.blocks]

    def test_no_title(self, converter):
        result = converter.convert("just text")
        assert result.title is None
        assert result.blocks == [Paragraph((RichSpan("just text"),))]

    def test_title_extraction_disabled(self):
        conv = MarkdownToNotionConverter(MdNotionConfig(title_from_h1=False))
        result = conv.convert("# H\nbody")
        assert result.title is None
        assert result.blocks[0] == Heading(1, (RichSpan("H"),))

    def test_empty_document(self, converter):
        result = converter.convert("")
        assert result.title is None
        assert result.blocks == []
        assert result.batches == []

    def test_batches_respect_limit(self, converter):
        md = "\n".join(f"line {i}" for i in range(250))
        result = converter.convert(md)
        assert [len(b) for b in result.batches] == [100, 100, 50]
        assert [blk for batch in result.batches for blk in batch] == result.blocks

    def test_custom_limits(self):
        config = MdNotionConfig(max_text_length=10, max_blocks_per_batch=2)
        result = MarkdownToNotionConverter(config).convert("alpha beta gamma delta")
        assert [b.text[0].content for b in result.blocks] == ["alpha beta", "gamma", "delta"]
        assert [len(b) for b in result.batches] == [2, 1]

    def test_repeat_conversion_is_identical(self, converter):
        md = "# T\n- a\n1. b\n> q\n```\nx\n```\n| a |\n|---|\n| 1 |\n---"
        first = converter.convert(md)
        second = converter.convert(md)
        assert first == second


class TestConvertObservability:

    def test_block_counts_emitted(self):
        metrics = RecordingMetrics()
        conv = MarkdownToNotionConverter(MdNotionConfig(metrics=metrics))
        conv.convert("- a\n- b\npara")
        counters = {
            tags["block_type"]: value
            for name, value, tags in metrics.increments
            if name == "mdnotion.blocks_converted_total"
        }
        assert counters == {"bulleted_list_item": 2, "paragraph": 1}
        assert [t[0] for t in metrics.timings] == ["mdnotion.conversion_duration_ms"]

    def test_debug_dump_to_stderr(self, capsys):
        conv = MarkdownToNotionConverter(MdNotionConfig(debug_dump_payload=True))
        conv.convert("hello")
        err = capsys.readouterr().err
        assert "Notion blocks payload" in err
        assert '"paragraph"' in err

    def test_no_dump_by_default(self, converter, capsys):
        converter.convert("hello")
        assert "Notion blocks payload" not in capsys.readouterr().err
