"""Shared test fixtures for the mdnotion test suite."""

from __future__ import annotations

import pytest

from mdnotion.config import MdNotionConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter


@pytest.fixture
def config() -> MdNotionConfig:
    """Default test configuration with a dummy token."""
    return MdNotionConfig(token="test_token_1234")


@pytest.fixture
def converter(config: MdNotionConfig) -> MarkdownToNotionConverter:
    """Markdown-to-Notion converter using the default test config."""
    return MarkdownToNotionConverter(config)
