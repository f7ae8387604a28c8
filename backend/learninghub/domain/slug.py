"""Slug derivation: maps an article title to its URL identifier.

Two rules, in strict priority order:

1. Exception lookup: titles whose canonical short name is not a mechanical
   transform of the display title (``C++`` → ``cpp``, ``C#`` → ``csharp``).
2. Mechanical transform: lowercase, non-alphanumerics → ``-``, whitespace
   runs → ``-``, hyphen runs → ``-``.

Edge hyphens are kept: ``"  Ruby!!  "`` becomes ``"-ruby-"``.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

SLUG_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    "C++": "cpp",
    "C#": "csharp",
})

_NON_WORD = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def _exception_key(title: str) -> str:
    """Normalise a title for exception lookup, ignoring case and whitespace."""
    return _WHITESPACE.sub("", title).casefold()


def slugify(text: str) -> str:
    """Apply the mechanical transform. Idempotent on its own output."""
    slug = text.lower()
    slug = _NON_WORD.sub("-", slug)
    slug = _WHITESPACE.sub("-", slug)
    return _HYPHENS.sub("-", slug)


class SlugDeriver:
    """Holds an exception table and derives slugs from titles.

    Extra exceptions are merged over the defaults; the mechanical path is
    never consulted for a title that matches an exception.
    """

    def __init__(self, exceptions: Mapping[str, str] | None = None):
        merged = dict(SLUG_EXCEPTIONS)
        if exceptions:
            merged.update(exceptions)
        self._exceptions = {_exception_key(title): slug for title, slug in merged.items()}

    @property
    def exceptions(self) -> dict[str, str]:
        return dict(self._exceptions)

    def derive(self, title: str) -> str:
        special = self._exceptions.get(_exception_key(title))
        if special is not None:
            return special
        return slugify(title)

    __call__ = derive


_default_deriver = SlugDeriver()


def derive_slug(title: str, exceptions: Mapping[str, str] | None = None) -> str:
    """Derive the slug for ``title``, optionally with extra exception entries."""
    if exceptions:
        return SlugDeriver(exceptions).derive(title)
    return _default_deriver.derive(title)
