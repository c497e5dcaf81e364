"""Unit tests for SlugGenerator."""

import re

from conduit.domain.service import SlugGenerator

SUFFIX = r"[0-9a-z]{6}"


class TestGenerate:
    """Tests for SlugGenerator.generate()."""

    def test_title_with_suffix(self):
        slug = SlugGenerator().generate("How to Train Your Dragon")

        assert re.fullmatch(rf"how-to-train-your-dragon-{SUFFIX}", str(slug))

    def test_punctuation_collapses_to_single_hyphens(self):
        slug = SlugGenerator().generate("  Hello,   World!!  ")

        assert re.fullmatch(rf"hello-world-{SUFFIX}", str(slug))

    def test_accents_are_folded(self):
        slug = SlugGenerator().generate("Café Crème")

        assert re.fullmatch(rf"cafe-creme-{SUFFIX}", str(slug))

    def test_title_without_usable_characters(self):
        """Nothing left of the title means the slug is just the suffix."""
        slug = SlugGenerator().generate("!!! ???")

        assert re.fullmatch(SUFFIX, str(slug))

    def test_long_title_is_truncated(self):
        slug = SlugGenerator().generate("word " * 60)

        assert len(str(slug)) <= 100
        assert re.fullmatch(rf"(word-)+{SUFFIX}", str(slug))

    def test_same_title_gives_different_slugs(self):
        generator = SlugGenerator()

        slugs = {str(generator.generate("Same title")) for _ in range(20)}

        assert len(slugs) == 20

    def test_truncation_keeps_whole_words(self):
        slug = SlugGenerator().generate("dragons " * 20)

        base = str(slug).rsplit("-", 1)[0]
        assert len(str(slug)) <= 100
        assert set(base.split("-")) == {"dragons"}

    def test_single_long_word_is_cut(self):
        slug = SlugGenerator().generate("a" * 150)

        assert re.fullmatch(rf"a{{93}}-{SUFFIX}", str(slug))
