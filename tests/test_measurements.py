"""Tests for word-list measurement and sample word lists."""

import pickle
from pathlib import Path

import pytest
from fontTools.ttLib import TTFont

from autobase import font_io, wordlists
from autobase.errors import MeasurementFailure
from autobase.measurements import (
    HarfBuzzMeasurer,
    collect_measurements,
    collect_measurements_parallel,
)
from autobase.models import ExtentSample
from autobase.tags import ScriptLanguageKey

EN = ScriptLanguageKey("Latn", "en")
FI = ScriptLanguageKey("Latn", "fi")
RU = ScriptLanguageKey("Cyrl", "ru")


class FakeMeasurer:
    def __init__(self, results):
        self.results = results
        self.calls = []

    def measure(self, key, words):
        self.calls.append(key)
        result = self.results[key]
        if isinstance(result, Exception):
            raise result
        return result


def test_collect_measurements_isolates_failures() -> None:
    measurer = FakeMeasurer(
        {
            EN: ExtentSample(-200, 750, "pad", "pad"),
            FI: MeasurementFailure(FI, "no inked glyphs in word list"),
            RU: RuntimeError("shaper crashed"),
        }
    )
    found = collect_measurements(measurer, {EN: ["pad"], FI: ["x"], RU: ["y"]})

    assert found.get(EN) == ExtentSample(-200, 750)
    assert set(found.failures) == {FI, RU}
    assert "RuntimeError" in found.failures[RU].reason
    assert found.attempted_scripts == {"Latn", "Cyrl"}
    assert found.failure_for(FI) is not None
    assert found.failure_for(EN) is None
    assert len(found) == 1


def test_collect_measurements_visits_keys_in_order() -> None:
    measurer = FakeMeasurer({k: ExtentSample(0, 0) for k in (EN, FI, RU)})
    collect_measurements(measurer, {FI: ["a"], RU: ["a"], EN: ["a"]})
    assert measurer.calls == [RU, EN, FI]


def test_measurement_failure_survives_pickling() -> None:
    failure = pickle.loads(pickle.dumps(MeasurementFailure(FI, "timeout")))
    assert failure.key == FI
    assert failure.reason == "timeout"
    assert str(failure) == "fi_Latn: measurement failed (timeout)"


def test_harfbuzz_measurer_tracks_ink_extremes(latin_font_path: Path) -> None:
    measurer = HarfBuzzMeasurer.from_path(latin_font_path)
    sample = measurer.measure(EN, ["oa", "pa", "do"])
    assert sample == ExtentSample(-200, 750)
    assert sample.min_word == "pa"
    assert sample.max_word == "do"


def test_harfbuzz_measurer_ignores_blank_glyphs(latin_font_path: Path) -> None:
    measurer = HarfBuzzMeasurer.from_path(latin_font_path)
    sample = measurer.measure(EN, ["a o"])
    assert sample == ExtentSample(0, 500)


def test_harfbuzz_measurer_fails_without_ink(latin_font_path: Path) -> None:
    measurer = HarfBuzzMeasurer.from_path(latin_font_path)
    with pytest.raises(MeasurementFailure):
        measurer.measure(RU, ["мир"])


def test_named_instance_locations(variable_font_path: Path, latin_font_path: Path) -> None:
    locations = font_io.named_instance_locations(TTFont(str(variable_font_path)))
    assert locations == [{}, {"wght": 400.0}, {"wght": 900.0}]
    assert font_io.named_instance_locations(TTFont(str(latin_font_path))) == [{}]


def test_variable_font_takes_extremes_over_instances(variable_font_path: Path) -> None:
    locations = font_io.named_instance_locations(TTFont(str(variable_font_path)))
    default_only = HarfBuzzMeasurer.from_path(variable_font_path)
    assert default_only.measure(EN, ["pad"]) == ExtentSample(-200, 750)

    measurer = HarfBuzzMeasurer.from_path(variable_font_path, locations)
    sample = measurer.measure(EN, ["pad", "oa"])
    assert sample == ExtentSample(-250, 850)
    assert sample.min_word == "pad"

    found = collect_measurements(measurer, {EN: ["pad"], FI: ["oa"]})
    assert found.get(EN) == ExtentSample(-250, 850)
    assert found.get(FI) == ExtentSample(0, 500)


def test_parallel_measurement_of_variable_font(variable_font_path: Path) -> None:
    locations = font_io.named_instance_locations(TTFont(str(variable_font_path)))
    found = collect_measurements_parallel(
        variable_font_path, {EN: ["pad"], FI: ["oa"], RU: ["мир"]}, locations, jobs=2
    )
    assert found.get(EN) == ExtentSample(-250, 850)
    assert found.get(FI) == ExtentSample(0, 500)
    assert set(found.failures) == {RU}


# ---------------------------------------------------------------------------
# Word lists


class FakeSampleText:
    def __init__(self, **texts):
        for name in wordlists.SAMPLE_TEXT_FIELDS:
            setattr(self, name, texts.get(name, ""))


class FakeLanguage:
    def __init__(self, language, script, sample_text=None):
        self.language = language
        self.script = script
        self.sample_text = sample_text

    def HasField(self, name):
        return name == "sample_text" and self.sample_text is not None


LANGUAGES = {
    "en_Latn": FakeLanguage(
        "en",
        "Latn",
        FakeSampleText(tester="a quick brown fox", specimen_16="the fox and the dog"),
    ),
    "fi_Latn": FakeLanguage("fi", "Latn", FakeSampleText(tester="hyvää päivää")),
    "ru_Cyrl": FakeLanguage("ru", "Cyrl", FakeSampleText(tester="привет мир")),
    "xx_Latn": FakeLanguage("xx", "Latn"),
}


def test_split_words_deduplicates_in_order() -> None:
    assert wordlists.split_words(["b a b", "c a d"]) == ["b", "a", "c", "d"]
    assert wordlists.split_words(["b a b", "c a d"], limit=3) == ["b", "a", "c"]


def test_word_lists_for_scripts_filters_by_script() -> None:
    lists = wordlists.word_lists_for_scripts({"Latn"}, languages=LANGUAGES)
    assert list(lists) == [EN, FI]
    # specimen texts come before the tester
    assert lists[EN] == ["the", "fox", "and", "dog", "a", "quick", "brown"]
    assert lists[FI] == ["hyvää", "päivää"]


def test_word_lists_for_scripts_honours_limit() -> None:
    lists = wordlists.word_lists_for_scripts({"Latn", "Cyrl"}, 2, languages=LANGUAGES)
    assert lists[EN] == ["the", "fox"]
    assert lists[RU] == ["привет", "мир"]
