"""Extent data models shared by measurement, planning and encoding."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from . import errors
from . import tags

ScriptLanguageKey = tags.ScriptLanguageKey
MeasurementFailure = errors.MeasurementFailure


@dataclass(frozen=True)
class ExtentSample:
    """Lowest and highest ink coordinates in font units.

    ``min`` is not guaranteed to be below ``max``: a word list without
    descenders can bottom out above the baseline. The words are kept for
    reporting and take no part in equality.
    """

    min: int
    max: int
    min_word: Optional[str] = field(default=None, compare=False)
    max_word: Optional[str] = field(default=None, compare=False)

    def merge(self, other: "ExtentSample") -> "ExtentSample":
        low = self if self.min <= other.min else other
        high = self if self.max >= other.max else other
        return ExtentSample(low.min, high.max, low.min_word, high.max_word)


@dataclass(frozen=True)
class FontBaseline:
    """Font-wide reference extent (typographic descender and ascender)."""

    min: int
    max: int

    @property
    def extent(self) -> ExtentSample:
        return ExtentSample(self.min, self.max, "<font>", "<font>")


@dataclass(frozen=True)
class Override:
    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(name for name in ("min", "max") if getattr(self, name) is not None)


@dataclass(frozen=True)
class ScriptDefaultRecord:
    script: str
    extent: ExtentSample
    emitted: bool

    @property
    def key(self) -> ScriptLanguageKey:
        return ScriptLanguageKey(self.script)


@dataclass(frozen=True)
class LanguageRecord:
    key: ScriptLanguageKey
    extent: ExtentSample
    emitted: bool
    overridden: Tuple[str, ...] = ()

    @property
    def script(self) -> str:
        return self.key.script


MinMaxRecord = Union[ScriptDefaultRecord, LanguageRecord]


@dataclass(frozen=True)
class ResultSet:
    """Emitted records ordered by their script-language key."""

    records: Tuple[MinMaxRecord, ...] = ()

    def __iter__(self) -> Iterator[MinMaxRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def keys(self) -> List[ScriptLanguageKey]:
        return [record.key for record in self.records]

    def get(self, key: ScriptLanguageKey) -> Optional[MinMaxRecord]:
        for record in self.records:
            if record.key == key:
                return record
        return None


class MeasurementSet:
    """Raw samples keyed by script and language, plus per-key failures."""

    def __init__(self) -> None:
        self.samples: Dict[ScriptLanguageKey, ExtentSample] = {}
        self.failures: Dict[ScriptLanguageKey, MeasurementFailure] = {}
        self.attempted_scripts: Set[str] = set()

    def add(self, key: ScriptLanguageKey, sample: ExtentSample) -> None:
        self.attempted_scripts.add(key.script)
        existing = self.samples.get(key)
        self.samples[key] = sample if existing is None else existing.merge(sample)

    def add_failure(self, failure: MeasurementFailure) -> None:
        self.attempted_scripts.add(failure.key.script)
        self.failures.setdefault(failure.key, failure)

    def get(self, key: ScriptLanguageKey) -> Optional[ExtentSample]:
        return self.samples.get(key)

    def failure_for(self, key: ScriptLanguageKey) -> Optional[MeasurementFailure]:
        # A key that produced a sample on another instance is not a failure
        if key in self.samples:
            return None
        return self.failures.get(key)

    def samples_by_script(self) -> Dict[str, List[Tuple[Optional[str], ExtentSample]]]:
        grouped: Dict[str, List[Tuple[Optional[str], ExtentSample]]] = {
            script: [] for script in self.attempted_scripts
        }
        for key in sorted(self.samples):
            grouped[key.script].append((key.language, self.samples[key]))
        return grouped

    def __len__(self) -> int:
        return len(self.samples)
