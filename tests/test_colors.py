"""Tests for tag hashing and color assignment"""

import pytest

from tagged_logger.core.colors import (
    Color,
    PALETTE,
    color_for_tag,
    colorize,
    fnv1a_32,
)


class TestFnv1a:
    """FNV-1a reference vectors."""

    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"", 0x811C9DC5),
            (b"a", 0xE40C292C),
            (b"foobar", 0xBF9CF968),
        ],
    )
    def test_reference_vectors(self, data, expected):
        assert fnv1a_32(data) == expected

    def test_fits_32_bits(self):
        assert 0 <= fnv1a_32("ünïcödé tag".encode("utf-8")) < 2 ** 32


class TestPalette:
    """Test the color palette."""

    def test_order(self):
        assert PALETTE == (
            Color.RED,
            Color.GREEN,
            Color.YELLOW,
            Color.BLUE,
            Color.MAGENTA,
            Color.CYAN,
            Color.WHITE,
        )

    def test_reset_not_in_palette(self):
        assert Color.RESET not in PALETTE

    def test_escape_codes(self):
        assert str(Color.RED) == "\x1b[91m"
        assert str(Color.RESET) == "\x1b[0m"


class TestColorForTag:
    """Test deterministic tag colors."""

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("", Color.YELLOW),
            ("a", Color.CYAN),
            ("foobar", Color.RED),
            ("svc", Color.YELLOW),
        ],
    )
    def test_known_tags(self, tag, expected):
        assert color_for_tag(tag) == expected

    def test_deterministic(self):
        tags = ["api", "db", "worker", "scheduler", "ünïcödé"]
        assert [color_for_tag(t) for t in tags] == [color_for_tag(t) for t in tags]

    def test_always_in_palette(self):
        for i in range(200):
            assert color_for_tag(f"tag-{i}") in PALETTE


class TestColorize:
    def test_wraps_with_reset(self):
        assert colorize("svc", Color.GREEN) == "\x1b[32msvc\x1b[0m"

    def test_raw_escape_string(self):
        assert colorize("svc", "\x1b[1m") == "\x1b[1msvc\x1b[0m"
