"""Sample word lists per language, taken from the Google Fonts language database."""

from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional

from . import tags

ScriptLanguageKey = tags.ScriptLanguageKey

# gflanguages SampleTextProto fields, longest texts first
SAMPLE_TEXT_FIELDS = (
    "specimen_16",
    "specimen_21",
    "specimen_32",
    "specimen_36",
    "specimen_48",
    "tester",
    "styles",
    "poster_sm",
    "poster_md",
    "poster_lg",
    "masthead_full",
    "masthead_partial",
)


@lru_cache(maxsize=1)
def _load_languages():
    from gflanguages import LoadLanguages

    return LoadLanguages()


def split_words(texts: Iterable[str], limit: Optional[int] = None) -> List[str]:
    """Whitespace-split words, de-duplicated in first-seen order."""
    words: List[str] = []
    seen = set()
    for text in texts:
        for word in text.split():
            if word in seen:
                continue
            seen.add(word)
            words.append(word)
            if limit is not None and len(words) >= limit:
                return words
    return words


def sample_texts(language) -> List[str]:
    if not language.HasField("sample_text"):
        return []
    sample = language.sample_text
    return [getattr(sample, name) for name in SAMPLE_TEXT_FIELDS if getattr(sample, name)]


def word_lists_for_scripts(
    scripts: Iterable[str],
    words_per_list: Optional[int] = None,
    languages: Optional[Mapping[str, object]] = None,
) -> Dict[ScriptLanguageKey, List[str]]:
    """Word lists for every language written in one of ``scripts``.

    Args:
        scripts: ISO 15924 codes the font supports
        words_per_list: Maximum words per language
        languages: gflanguages-style mapping of ``ll_Ssss`` ids to LanguageProto
            (defaults to the installed database)

    Returns:
        Mapping of script-language key to its words, omitting empty lists
    """
    wanted = set(scripts)
    if languages is None:
        languages = _load_languages()
    lists: Dict[ScriptLanguageKey, List[str]] = {}
    for lang_id in sorted(languages):
        language = languages[lang_id]
        if language.script not in wanted:
            continue
        words = split_words(sample_texts(language), words_per_list)
        if words:
            key = ScriptLanguageKey(script=language.script, language=language.language)
            lists[key] = words
    return lists
