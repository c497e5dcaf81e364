"""Slug generation for articles."""

import re
import secrets
import string
import unicodedata

import logfire

from conduit.domain.value import Slug

from .base import Service

SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
SUFFIX_LENGTH = 6
MAX_SLUG_LENGTH = 100


class SlugGenerator(Service):
    """Builds ``<slugified-title>-<6 base36 chars>`` slugs.

    The random suffix makes collisions unlikely (36^6 combinations per
    title) but does not rule them out; nothing is checked against storage
    here. A clash surfaces as a uniqueness error when the article is saved.
    """

    def generate(self, title: str) -> Slug:
        """Generate a slug for a title.

        Args:
            title: Article title

        Returns:
            Slug with a random suffix
        """
        suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
        limit = MAX_SLUG_LENGTH - SUFFIX_LENGTH - 1
        base = self._truncate(self._slugify(title), limit)

        slug = Slug(f"{base}-{suffix}" if base else suffix)
        logfire.debug("Generated slug", title=title, slug=str(slug))
        return slug

    @staticmethod
    def _truncate(base: str, limit: int) -> str:
        """Cut a slugified title to ``limit`` chars without splitting a word."""
        if len(base) <= limit:
            return base
        cut = base[:limit]
        if base[limit] != "-" and "-" in cut:
            cut = cut.rsplit("-", 1)[0]
        return cut.strip("-")

    @staticmethod
    def _slugify(title: str) -> str:
        """Convert title to URL-safe slug format.

        - Folds accented characters to ASCII
        - Converts to lowercase
        - Replaces runs of non-alphanumeric chars with one hyphen
        - Strips leading/trailing hyphens

        Args:
            title: Title to slugify

        Returns:
            URL-safe slug string (may be empty if title has no valid chars)
        """
        ascii_title = (
            unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode()
        )
        slug = re.sub(r"[^a-z0-9]+", "-", ascii_title.lower())
        return slug.strip("-")
