"""Script and language tag model, validation and OpenType tag conversion."""

import re
from dataclasses import dataclass
from functools import lru_cache, total_ordering
from typing import FrozenSet, Iterable, Optional, Tuple

from fontTools import unicodedata

from . import errors
from . import opentype_languages

ConfigurationError = errors.ConfigurationError

# ll_Ssss / lll_Ssss, or a bare Ssss for a script's pooled default
KEY_PATTERN = re.compile(r"^(?:(?P<language>[a-z]{2,3})_)?(?P<script>[A-Z][a-z]{3})$")

OPENTYPE_LANGUAGE_TAGS = opentype_languages.OPENTYPE_LANGUAGE_TAGS


@total_ordering
@dataclass(frozen=True)
class ScriptLanguageKey:
    """A script code with an optional language code.

    A key without a language denotes the script's pooled default. Keys sort by
    script, then language, with the language-less key first.
    """

    script: str
    language: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "ScriptLanguageKey":
        match = KEY_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ConfigurationError(
                f"Malformed script-language key {text!r} (expected ll_Ssss or lll_Ssss)"
            )
        return cls(script=match.group("script"), language=match.group("language"))

    def sort_key(self) -> Tuple[str, int, str]:
        return (self.script, 0 if self.language is None else 1, self.language or "")

    def __lt__(self, other: "ScriptLanguageKey") -> bool:
        if not isinstance(other, ScriptLanguageKey):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.language is None:
            return self.script
        return f"{self.language}_{self.script}"


@lru_cache(maxsize=1)
def known_languages() -> FrozenSet[str]:
    """ISO 639 codes known to the Google Fonts language database."""
    from gflanguages import LoadLanguages

    return frozenset(lang.language for lang in LoadLanguages().values())


def is_known_script(script: str) -> bool:
    try:
        unicodedata.script_name(script)
    except KeyError:
        return False
    return True


def validate_key(
    key: ScriptLanguageKey, languages: Optional[Iterable[str]] = None
) -> ScriptLanguageKey:
    """Check a key's codes against ISO 15924 and ISO 639; returns the key."""
    if not is_known_script(key.script):
        raise ConfigurationError(f"Unknown ISO 15924 script code in {key}")
    if key.language is not None:
        pool = known_languages() if languages is None else frozenset(languages)
        if key.language not in pool:
            raise ConfigurationError(f"Unknown ISO 639 language code in {key}")
        if opentype_language_tag(key.language) is None:
            raise ConfigurationError(
                f"{key}: language {key.language!r} has no OpenType language system tag"
            )
    return key


def opentype_script_tag(script: str) -> str:
    """Preferred OpenType script tag for an ISO 15924 code (Deva -> dev2)."""
    return unicodedata.ot_tags_from_script(script)[0]


def opentype_language_tag(language: str) -> Optional[str]:
    """OpenType language system tag for an ISO 639 code, or None when it has none."""
    return OPENTYPE_LANGUAGE_TAGS.get(language)
