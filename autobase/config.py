"""Configuration constants, the Configuration model and its TOML loader."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

import tomlkit
from tomlkit.exceptions import TOMLKitError

from . import errors
from . import models
from . import tags

ConfigurationError = errors.ConfigurationError
Override = models.Override
ScriptLanguageKey = tags.ScriptLanguageKey


# --- ISO 15924 codes handled by the CJK fixed layout ---
CJK_SCRIPTS: Tuple[str, ...] = ("Bopo", "Hang", "Hani", "Hira", "Kana")

# Han ideographs: URO, Extension A, Extension B
HAN_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
)
# Hangul syllables, kana, halfwidth/fullwidth forms
HANGUL_KANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0xAC00, 0xD7AF),
    (0x3040, 0x30FF),
    (0xFF00, 0xFFEF),
)

# BASE coordinates are int16
COORD_MIN: int = -32768
COORD_MAX: int = 32767

DEFAULT_WORDS_PER_LIST: int = 1000

# A CJK font is "square" when its average advance is within 1% of UPM
SQUARE_ADVANCE_RATIO: float = 0.01

RECOGNIZED_KEYS: Tuple[str, ...] = ("tolerance", "languages", "overrides")


@dataclass(frozen=True)
class Configuration:
    """Tolerance, language splits and per-language overrides for one run."""

    tolerance: int = 0
    splits: FrozenSet[ScriptLanguageKey] = frozenset()
    overrides: Mapping[ScriptLanguageKey, Override] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.tolerance, bool) or not isinstance(self.tolerance, int):
            raise ConfigurationError("tolerance must be an integer")
        if self.tolerance < 0:
            raise ConfigurationError("tolerance must not be negative")
        for key in list(self.splits) + list(self.overrides):
            if key.language is None:
                raise ConfigurationError(
                    f"{key}: splits and overrides apply to languages, not to a script default"
                )

    @property
    def split_keys(self) -> FrozenSet[ScriptLanguageKey]:
        """Splits plus every overridden key (an override always splits)."""
        return frozenset(self.splits) | frozenset(self.overrides)


def _parse_keys(
    values: Iterable[Any], languages: Optional[Iterable[str]]
) -> FrozenSet[ScriptLanguageKey]:
    keys = set()
    for value in values:
        if not isinstance(value, str):
            raise ConfigurationError(f"languages entries must be strings, got {value!r}")
        key = ScriptLanguageKey.parse(value)
        if key.language is None:
            raise ConfigurationError(f"{value!r}: languages entries need a language code")
        keys.add(tags.validate_key(key, languages))
    return frozenset(keys)


def _parse_coord(key: str, name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"overrides.{key}.{name} must be an integer")
    if not COORD_MIN <= value <= COORD_MAX:
        raise ConfigurationError(
            f"overrides.{key}.{name} = {value} does not fit a BASE coordinate"
        )
    return value


def _parse_overrides(
    table: Any, languages: Optional[Iterable[str]]
) -> Dict[ScriptLanguageKey, Override]:
    if not isinstance(table, Mapping):
        raise ConfigurationError("overrides must be a table")
    overrides: Dict[ScriptLanguageKey, Override] = {}
    for name, entry in table.items():
        key = ScriptLanguageKey.parse(name)
        if key.language is None:
            raise ConfigurationError(
                f"overrides.{name}: overrides apply to languages, not to a script default"
            )
        tags.validate_key(key, languages)
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"overrides.{name} must be a table with min and/or max")
        unknown = sorted(set(entry) - {"min", "max"})
        if unknown:
            raise ConfigurationError(
                f"overrides.{name}: unknown field(s) {', '.join(unknown)}"
            )
        if not entry:
            raise ConfigurationError(f"overrides.{name} must set min and/or max")
        overrides[key] = Override(
            min=_parse_coord(name, "min", entry["min"]) if "min" in entry else None,
            max=_parse_coord(name, "max", entry["max"]) if "max" in entry else None,
        )
    return overrides


def config_from_mapping(
    data: Mapping[str, Any], languages: Optional[Iterable[str]] = None
) -> Configuration:
    """Build a Configuration from already-parsed data, validating every key.

    Args:
        data: Top-level mapping with ``tolerance``, ``languages`` and ``overrides``
        languages: Known ISO 639 codes (defaults to the gflanguages database)
    """
    unknown = sorted(set(data) - set(RECOGNIZED_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown configuration key(s): {', '.join(unknown)}")
    if languages is not None:
        languages = frozenset(languages)

    tolerance = data.get("tolerance", 0)
    split_values = data.get("languages", [])
    if isinstance(split_values, (str, bytes)) or not isinstance(
        split_values, Iterable
    ):
        raise ConfigurationError("languages must be a list of ll_Ssss strings")

    return Configuration(
        tolerance=tolerance,
        splits=_parse_keys(split_values, languages),
        overrides=_parse_overrides(data.get("overrides", {}), languages),
    )


def load_config(
    path: Path, languages: Optional[Iterable[str]] = None
) -> Configuration:
    """Read and validate a TOML configuration file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration {path}: {exc}") from exc
    try:
        document = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise ConfigurationError(f"Cannot parse configuration {path}: {exc}") from exc
    return config_from_mapping(document.unwrap(), languages)
