"""
Unit tests for text, phonetic and id helpers.
Run: python -m pytest tests/test_utils.py -v
"""

import io
import logging

from phraser.utils import TextParser, generate_item_id, generate_phonetic_hint, setup_logger


class TestTextParser:

    def test_clean_phrase_trims_and_composes(self):
        assert TextParser.clean_phrase("  café ") == "café"
        assert TextParser.clean_phrase(None) == ""

    def test_strip_diacritics(self):
        assert TextParser.strip_diacritics("nǐ hǎo") == "ni hao"

    def test_strip_punctuation_keeps_words_and_spaces(self):
        assert TextParser.strip_punctuation("it's a well-known fact, right?") == "its a wellknown fact right"


class TestPhoneticHint:

    def test_mandarin(self):
        assert generate_phonetic_hint("你好") == "nǐ hǎo"

    def test_empty_text(self):
        assert generate_phonetic_hint("") == ""
        assert generate_phonetic_hint("   ") == ""

    def test_non_chinese_text_passes_through(self):
        assert generate_phonetic_hint("ok") == "ok"


class TestItemIds:

    def test_format(self):
        item_id = generate_item_id()
        assert item_id.isalnum()
        assert len(item_id) >= 13 + 9

    def test_unique(self):
        assert len({generate_item_id() for _ in range(1000)}) == 1000

    def test_avoids_existing(self):
        taken = {generate_item_id()}
        assert generate_item_id(taken) not in taken


class TestLogger:

    def test_setup_is_idempotent(self):
        stream = io.StringIO()
        logger = setup_logger("phraser.test", "INFO", stream=stream)
        setup_logger("phraser.test", "DEBUG", stream=stream)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        logger.info("hello")
        assert "[INFO] phraser.test: hello" in stream.getvalue()
