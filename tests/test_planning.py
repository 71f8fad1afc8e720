"""Tests for MinMax planning: script defaults, language records and assembly."""

import itertools
from typing import Dict, Optional

import pytest

from autobase.config import Configuration
from autobase.errors import (
    IncompleteOverrideError,
    MeasurementFailure,
    UnsupportedKeyWarning,
)
from autobase.models import (
    ExtentSample,
    FontBaseline,
    LanguageRecord,
    MeasurementSet,
    Override,
    ScriptDefaultRecord,
)
from autobase.planning import (
    MinMaxPlan,
    compute_script_default,
    exceeds_tolerance,
    plan_min_max,
    resolve_language,
)
from autobase.tags import ScriptLanguageKey

BASELINE = FontBaseline(min=-200, max=800)


def K(text: str) -> ScriptLanguageKey:
    return ScriptLanguageKey.parse(text)


def _measurements(samples: Dict[str, tuple]) -> MeasurementSet:
    measurements = MeasurementSet()
    for key, (low, high) in samples.items():
        measurements.add(K(key), ExtentSample(low, high, f"{key}-low", f"{key}-high"))
    return measurements


def _plan(samples, force_overrides: bool = False, **config) -> MinMaxPlan:
    return plan_min_max(
        _measurements(samples), Configuration(**config), BASELINE, force_overrides
    )


def _extents(plan):
    return [(str(r.key), r.extent.min, r.extent.max) for r in plan.result]


# ---------------------------------------------------------------------------
# Building blocks


def test_exceeds_tolerance_checks_both_axes() -> None:
    reference = ExtentSample(-200, 800)
    assert not exceeds_tolerance(ExtentSample(-205, 805), reference, 5)
    assert exceeds_tolerance(ExtentSample(-206, 800), reference, 5)
    assert exceeds_tolerance(ExtentSample(-200, 806), reference, 5)


def test_script_default_pools_and_excludes_splits() -> None:
    samples = [
        ("en", ExtentSample(-210, 790)),
        ("fi", ExtentSample(-200, 900)),
        ("vi", ExtentSample(-260, 1100)),
    ]
    record = compute_script_default("Latn", samples, {"vi"}, BASELINE.extent, 0)
    assert record.extent == ExtentSample(-210, 900)
    assert record.emitted


def test_script_default_without_samples_equals_baseline() -> None:
    record = compute_script_default(
        "Latn", [("vi", ExtentSample(-260, 1100))], {"vi"}, BASELINE.extent, 0
    )
    assert record.extent == BASELINE.extent
    assert not record.emitted


def test_resolve_language_requires_a_language() -> None:
    with pytest.raises(ValueError):
        resolve_language(K("Latn"), ExtentSample(0, 0), None, BASELINE.extent, 0)


def test_resolve_language_mixes_override_and_measurement() -> None:
    record = resolve_language(
        K("fi_Latn"),
        ExtentSample(-230, 800, "pää", "Äiti"),
        Override(max=1234),
        ExtentSample(-200, 800),
        10,
    )
    assert record.extent == ExtentSample(-230, 1234)
    assert record.extent.min_word == "pää"
    assert record.extent.max_word == "<override>"
    assert record.overridden == ("max",)
    assert record.emitted


def test_resolve_language_reports_missing_fields() -> None:
    with pytest.raises(IncompleteOverrideError) as excinfo:
        resolve_language(K("fi_Latn"), None, Override(min=-300), BASELINE.extent, 0)
    assert excinfo.value.missing == "max"


# ---------------------------------------------------------------------------
# Engine properties


def test_pooling_is_order_independent() -> None:
    samples = [
        ("en", ExtentSample(-210, 790, "en-a", "en-b")),
        ("fi", ExtentSample(-200, 900, "fi-a", "fi-b")),
        ("de", ExtentSample(-240, 850, "de-a", "de-b")),
    ]
    results = {
        compute_script_default("Latn", list(order), set(), BASELINE.extent, 0)
        for order in itertools.permutations(samples)
    }
    assert len(results) == 1
    assert results.pop().extent == ExtentSample(-240, 900)


def test_split_language_never_enters_the_pool() -> None:
    plan = _plan(
        {"en_Latn": (-200, 800), "vi_Latn": (-300, 1200)},
        splits=frozenset({K("vi_Latn")}),
    )
    latin = next(r for r in plan.script_defaults if r.script == "Latn")
    assert latin.extent == ExtentSample(-200, 800)
    assert not latin.emitted
    assert _extents(plan) == [("vi_Latn", -300, 1200)]


@pytest.mark.parametrize("tolerance", [0, 5, 20, 60, 120, 500])
def test_raising_tolerance_only_suppresses(tolerance: int) -> None:
    samples = {
        "en_Latn": (-210, 790),
        "vi_Latn": (-250, 900),
        "ru_Cyrl": (-260, 820),
    }
    splits = frozenset({K("vi_Latn")})
    looser = _plan(samples, tolerance=tolerance + 10, splits=splits)
    stricter = _plan(samples, tolerance=tolerance, splits=splits)
    assert set(looser.result.keys) <= set(stricter.result.keys)


def test_complete_override_ignores_measurement() -> None:
    overrides = {K("fi_Latn"): Override(min=-321, max=987)}
    for measured in [(-200, 800), (-500, 1500)]:
        plan = _plan({"en_Latn": (-200, 800), "fi_Latn": measured}, overrides=overrides)
        record = plan.result.get(K("fi_Latn"))
        assert record.extent == ExtentSample(-321, 987)
        assert record.overridden == ("min", "max")


def test_output_order_is_deterministic() -> None:
    samples = {
        "vi_Latn": (-300, 1100),
        "ru_Cyrl": (-260, 900),
        "en_Latn": (-250, 850),
        "fi_Latn": (-200, 1000),
        "el_Grek": (-220, 880),
    }
    splits = frozenset({K("vi_Latn"), K("fi_Latn")})
    first = _plan(samples, splits=splits)
    reversed_samples = dict(reversed(list(samples.items())))
    second = _plan(reversed_samples, splits=splits)

    assert first.result == second.result
    assert [str(k) for k in first.result.keys] == [
        "Cyrl",
        "Grek",
        "Latn",
        "fi_Latn",
        "vi_Latn",
    ]


def test_latin_cyrillic_with_split_and_override() -> None:
    samples = {
        "en_Latn": (-210, 780),
        "de_Latn": (-220, 830),
        "fi_Latn": (-240, 790),
        "vi_Latn": (-290, 1050),
        "ru_Cyrl": (-200, 805),
        "uk_Cyrl": (-195, 800),
    }
    plan = _plan(
        samples,
        tolerance=10,
        splits=frozenset({K("vi_Latn")}),
        overrides={K("fi_Latn"): Override(max=1234)},
    )

    # Cyrillic pools to (-200, 805): within 10 of the baseline
    assert plan.result.get(K("Cyrl")) is None
    # Latin pools en + de only
    assert plan.result.get(K("Latn")).extent == ExtentSample(-220, 830)
    assert plan.result.get(K("fi_Latn")).extent == ExtentSample(-240, 1234)
    assert plan.result.get(K("vi_Latn")).extent == ExtentSample(-290, 1050)
    assert [str(k) for k in plan.result.keys] == ["Latn", "fi_Latn", "vi_Latn"]
    assert not plan.issues


def test_empty_configuration_emits_only_script_defaults() -> None:
    plan = _plan({"en_Latn": (-210, 790), "fi_Latn": (-200, 800), "ru_Cyrl": (-250, 820)})
    assert _extents(plan) == [("Cyrl", -250, 820), ("Latn", -210, 800)]
    assert all(isinstance(r, ScriptDefaultRecord) for r in plan.result)


def test_script_matching_baseline_exactly_is_not_emitted() -> None:
    plan = _plan({"en_Latn": (-200, 800), "ru_Cyrl": (-201, 800)})
    assert [str(k) for k in plan.result.keys] == ["Cyrl"]


def test_unsupported_split_key_warns_and_changes_nothing() -> None:
    samples = {"en_Latn": (-210, 790), "vi_Latn": (-260, 900)}
    baseline_plan = _plan(samples, splits=frozenset({K("vi_Latn")}))
    plan = _plan(samples, splits=frozenset({K("vi_Latn"), K("hy_Armn")}))

    assert plan.result == baseline_plan.result
    assert len(plan.issues) == 1
    issue = plan.issues[0]
    assert isinstance(issue, UnsupportedKeyWarning)
    assert issue.key == K("hy_Armn")


# ---------------------------------------------------------------------------
# Language records and issues


def test_language_compared_against_unemitted_default() -> None:
    plan = _plan(
        {"en_Latn": (-200, 800), "vi_Latn": (-205, 805)},
        tolerance=5,
        splits=frozenset({K("vi_Latn")}),
    )
    assert len(plan.result) == 0
    (vi,) = plan.language_records
    assert isinstance(vi, LanguageRecord)
    assert not vi.emitted

    plan = _plan(
        {"en_Latn": (-200, 800), "vi_Latn": (-205, 806)},
        tolerance=5,
        splits=frozenset({K("vi_Latn")}),
    )
    assert [str(k) for k in plan.result.keys] == ["vi_Latn"]


def test_language_compared_against_its_script_default_not_baseline() -> None:
    plan = _plan(
        {"en_Latn": (-300, 1000), "vi_Latn": (-300, 1000)},
        splits=frozenset({K("vi_Latn")}),
    )
    assert [str(k) for k in plan.result.keys] == ["Latn"]


@pytest.mark.parametrize("force, expected", [(False, ["Latn"]), (True, ["Latn", "fi_Latn"])])
def test_override_within_tolerance_policy(force: bool, expected) -> None:
    plan = _plan(
        {"en_Latn": (-250, 900), "fi_Latn": (-250, 900)},
        force_overrides=force,
        tolerance=10,
        overrides={K("fi_Latn"): Override(max=905)},
    )
    assert [str(k) for k in plan.result.keys] == expected


def test_override_without_measurement() -> None:
    plan = _plan(
        {"en_Latn": (-200, 800)},
        overrides={K("vi_Latn"): Override(min=-300, max=1100)},
    )
    assert _extents(plan) == [("vi_Latn", -300, 1100)]
    assert not plan.issues


def test_incomplete_override_without_measurement_is_reported() -> None:
    measurements = _measurements({"en_Latn": (-200, 800)})
    failure = MeasurementFailure(K("vi_Latn"), "no inked glyphs in word list")
    measurements.add_failure(failure)
    plan = plan_min_max(
        measurements,
        Configuration(overrides={K("vi_Latn"): Override(min=-300)}),
        BASELINE,
    )

    assert len(plan.result) == 0
    (issue,) = plan.issues
    assert isinstance(issue, IncompleteOverrideError)
    assert issue.missing == "max"
    assert issue.cause is failure


def test_split_without_samples_reports_measurement_failure() -> None:
    measurements = _measurements({"en_Latn": (-200, 850)})
    failure = MeasurementFailure(K("vi_Latn"), "shaping error")
    measurements.add_failure(failure)
    plan = plan_min_max(
        measurements, Configuration(splits=frozenset({K("vi_Latn")})), BASELINE
    )

    assert plan.issues == (failure,)
    assert [str(k) for k in plan.result.keys] == ["Latn"]


def test_split_without_word_list_warns() -> None:
    plan = _plan({"en_Latn": (-200, 850)}, splits=frozenset({K("vi_Latn")}))
    (issue,) = plan.issues
    assert isinstance(issue, UnsupportedKeyWarning)
    assert "no word list" in str(issue)


def test_script_with_only_failures_defaults_to_baseline() -> None:
    measurements = MeasurementSet()
    measurements.add_failure(MeasurementFailure(K("ru_Cyrl"), "no inked glyphs"))
    plan = plan_min_max(measurements, Configuration(), BASELINE)

    (cyrillic,) = plan.script_defaults
    assert cyrillic.extent == BASELINE.extent
    assert not cyrillic.emitted
    assert len(plan.result) == 0


def _sample(low: int, high: int, word: Optional[str] = None) -> ExtentSample:
    return ExtentSample(low, high, word, word)


def test_measurement_set_merges_repeated_keys() -> None:
    measurements = MeasurementSet()
    measurements.add(K("fi_Latn"), _sample(-200, 800, "regular"))
    measurements.add(K("fi_Latn"), _sample(-220, 790, "bold"))
    merged = measurements.get(K("fi_Latn"))
    assert merged == ExtentSample(-220, 800)
    assert merged.min_word == "bold"
    assert merged.max_word == "regular"
