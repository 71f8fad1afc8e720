"""Word-list measurement: shape sample words and record their vertical ink extents."""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from functools import lru_cache
from pathlib import Path
from typing import (
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
)

from . import console as cs
from . import errors
from . import models
from . import tags

logger = logging.getLogger(__name__)

ExtentSample = models.ExtentSample
MeasurementSet = models.MeasurementSet
MeasurementFailure = errors.MeasurementFailure
ScriptLanguageKey = tags.ScriptLanguageKey

Location = Mapping[str, float]


class Measurer(Protocol):
    def measure(self, key: ScriptLanguageKey, words: Sequence[str]) -> ExtentSample:
        """Extent of ``words`` shaped as ``key``; raises MeasurementFailure."""
        ...


class HarfBuzzMeasurer:
    """Shapes words with HarfBuzz and tracks the lowest and highest inked point.

    Variable fonts are shaped once per location and the extremes merged.
    """

    def __init__(self, font_data: bytes, locations: Optional[Iterable[Location]] = None):
        import uharfbuzz as hb

        self._hb = hb
        face = hb.Face(font_data)
        self._fonts = []
        for location in list(locations or [{}]) or [{}]:
            font = hb.Font(face)
            if location:
                font.set_variations(dict(location))
            self._fonts.append(font)

    @classmethod
    def from_path(cls, path: Path, locations: Optional[Iterable[Location]] = None):
        return cls(Path(path).read_bytes(), locations)

    def _shape(self, font, key: ScriptLanguageKey, word: str):
        hb = self._hb
        buf = hb.Buffer()
        buf.add_str(word)
        buf.script = key.script
        if key.language:
            buf.language = key.language
        buf.guess_segment_properties()
        hb.shape(font, buf)
        return zip(buf.glyph_infos, buf.glyph_positions)

    def measure(self, key: ScriptLanguageKey, words: Sequence[str]) -> ExtentSample:
        low: Optional[int] = None
        high: Optional[int] = None
        low_word: Optional[str] = None
        high_word: Optional[str] = None

        for font in self._fonts:
            for word in words:
                for info, pos in self._shape(font, key, word):
                    # .notdef means the font cannot render this word
                    if info.codepoint == 0:
                        continue
                    extents = font.get_glyph_extents(info.codepoint)
                    if extents is None or (extents.width == 0 and extents.height == 0):
                        continue
                    top = pos.y_offset + extents.y_bearing
                    bottom = top + extents.height
                    if low is None or bottom < low:
                        low, low_word = bottom, word
                    if high is None or top > high:
                        high, high_word = top, word

        if low is None or high is None:
            raise MeasurementFailure(key, "no inked glyphs in word list")
        return ExtentSample(min=int(low), max=int(high), min_word=low_word, max_word=high_word)


@lru_cache(maxsize=4)
def _cached_measurer(
    font_path: str, locations: Tuple[Tuple[Tuple[str, float], ...], ...]
) -> HarfBuzzMeasurer:
    return HarfBuzzMeasurer.from_path(Path(font_path), [dict(loc) for loc in locations])


def _measure_job(
    font_path: str,
    locations: Tuple[Tuple[Tuple[str, float], ...], ...],
    key: ScriptLanguageKey,
    words: List[str],
) -> Union[ExtentSample, MeasurementFailure]:
    """Process-pool worker: measure one key and return the sample or the failure."""
    try:
        return _cached_measurer(font_path, locations).measure(key, words)
    except MeasurementFailure as exc:
        return exc
    except Exception as exc:
        return MeasurementFailure(key, f"{type(exc).__name__}: {exc}")


def _record(
    measurements: MeasurementSet,
    key: ScriptLanguageKey,
    outcome: Union[ExtentSample, MeasurementFailure],
) -> None:
    if isinstance(outcome, MeasurementFailure):
        logger.warning("%s", outcome)
        measurements.add_failure(outcome)
        return
    logger.info(
        "%s: min=%d (%s) max=%d (%s)",
        key,
        outcome.min,
        outcome.min_word,
        outcome.max,
        outcome.max_word,
    )
    measurements.add(key, outcome)


def collect_measurements(
    measurer: Measurer, word_lists: Mapping[ScriptLanguageKey, Sequence[str]]
) -> MeasurementSet:
    """Measure every word list in this process; a failing key never affects the others."""
    measurements = MeasurementSet()
    with cs.create_progress_bar() as progress:
        task = progress.add_task("Measuring word lists...", total=len(word_lists))
        for key in sorted(word_lists):
            try:
                outcome: Union[ExtentSample, MeasurementFailure] = measurer.measure(
                    key, word_lists[key]
                )
            except MeasurementFailure as exc:
                outcome = exc
            except Exception as exc:
                outcome = MeasurementFailure(key, f"{type(exc).__name__}: {exc}")
            _record(measurements, key, outcome)
            progress.advance(task)
    return measurements


def collect_measurements_parallel(
    font_path: Path,
    word_lists: Mapping[ScriptLanguageKey, Sequence[str]],
    locations: Optional[Iterable[Location]] = None,
    jobs: int = 2,
) -> MeasurementSet:
    """Fan measurement out over a process pool.

    Results are folded into the MeasurementSet as they complete; the min/max
    reduction is order-independent so completion order never shows in output.
    """
    frozen_locations = tuple(
        tuple(sorted(loc.items())) for loc in (list(locations or []) or [{}])
    )
    measurements = MeasurementSet()
    with cs.create_progress_bar() as progress, ProcessPoolExecutor(max_workers=jobs) as pool:
        task = progress.add_task("Measuring word lists...", total=len(word_lists))
        futures: Dict[object, ScriptLanguageKey] = {
            pool.submit(
                _measure_job, str(font_path), frozen_locations, key, list(words)
            ): key
            for key, words in word_lists.items()
        }
        for future in as_completed(futures):
            key = futures[future]
            try:
                outcome = future.result()
            except Exception as exc:
                outcome = MeasurementFailure(key, f"{type(exc).__name__}: {exc}")
            _record(measurements, key, outcome)
            progress.advance(task)
    return measurements
