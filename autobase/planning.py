"""MinMax planning: decide which script-default and language records a BASE table needs.

The planner runs in three steps:

1. Script defaults. Every language sample of a script that is not split out
   is pooled (lowest min, highest max) and compared against the font baseline.
2. Language records. Each split or overridden language takes its override
   fields, falls back to its measured sample for the rest, and is compared
   against its script's pooled default, whether that default is emitted or not.
3. Assembly. Surviving records are sorted by script-language key.

A record is emitted when either axis deviates from its reference by more than
the tolerance. Both axes are always reported together.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from . import config
from . import errors
from . import models
from . import tags

logger = logging.getLogger(__name__)

Configuration = config.Configuration
ExtentSample = models.ExtentSample
FontBaseline = models.FontBaseline
LanguageRecord = models.LanguageRecord
MeasurementSet = models.MeasurementSet
Override = models.Override
ResultSet = models.ResultSet
ScriptDefaultRecord = models.ScriptDefaultRecord
ScriptLanguageKey = tags.ScriptLanguageKey
IncompleteOverrideError = errors.IncompleteOverrideError
MeasurementFailure = errors.MeasurementFailure
UnsupportedKeyWarning = errors.UnsupportedKeyWarning

KeyIssue = Union[UnsupportedKeyWarning, MeasurementFailure, IncompleteOverrideError]


@dataclass(frozen=True)
class MinMaxPlan:
    """Planner output: the ordered result set and the per-key issues met on the way."""

    result: ResultSet
    script_defaults: Tuple[ScriptDefaultRecord, ...] = ()
    language_records: Tuple[LanguageRecord, ...] = ()
    issues: Tuple[KeyIssue, ...] = field(default=())


def exceeds_tolerance(
    candidate: ExtentSample, reference: ExtentSample, tolerance: int
) -> bool:
    return (
        abs(candidate.min - reference.min) > tolerance
        or abs(candidate.max - reference.max) > tolerance
    )


def compute_script_default(
    script: str,
    samples: Iterable[Tuple[Optional[str], ExtentSample]],
    splits: Set[str],
    baseline: ExtentSample,
    tolerance: int,
) -> ScriptDefaultRecord:
    """Pool a script's non-split language samples and test them against the baseline.

    Args:
        script: ISO 15924 script code
        samples: (language, sample) pairs measured for this script
        splits: Languages of this script that get their own record
        baseline: Reference extent (the font baseline for top-level scripts)
        tolerance: Maximum per-axis deviation that is still considered redundant

    Returns:
        The pooled default; ``emitted`` is False when within tolerance or empty
    """
    pooled: Optional[ExtentSample] = None
    for language, sample in samples:
        if language in splits:
            continue
        pooled = sample if pooled is None else pooled.merge(sample)

    if pooled is None:
        logger.debug("%s: no pooled samples, default equals baseline", script)
        return ScriptDefaultRecord(script=script, extent=baseline, emitted=False)

    emitted = exceeds_tolerance(pooled, baseline, tolerance)
    logger.debug(
        "%s default: min=%d max=%d (%s)",
        script,
        pooled.min,
        pooled.max,
        "emitted" if emitted else "within tolerance",
    )
    return ScriptDefaultRecord(script=script, extent=pooled, emitted=emitted)


def resolve_language(
    key: ScriptLanguageKey,
    measured: Optional[ExtentSample],
    override: Optional[Override],
    parent_default: ExtentSample,
    tolerance: int,
    force_overrides: bool = False,
) -> LanguageRecord:
    """Compute a split language's effective extent and decide whether it is emitted.

    Override fields win over measured ones. Overridden values are tolerance-tested
    like measured values unless ``force_overrides`` is set, in which case any
    record carrying an override is always emitted.

    Raises:
        ValueError: ``key`` has no language
        IncompleteOverrideError: a field has neither an override nor a measurement
    """
    if key.language is None:
        raise ValueError(f"{key}: language records need a language code")
    override = override or Override()

    missing = [
        name
        for name in ("min", "max")
        if getattr(override, name) is None and measured is None
    ]
    if missing:
        raise IncompleteOverrideError(key, " and ".join(missing))

    low = override.min if override.min is not None else measured.min
    high = override.max if override.max is not None else measured.max
    extent = ExtentSample(
        min=low,
        max=high,
        min_word="<override>" if override.min is not None else measured.min_word,
        max_word="<override>" if override.max is not None else measured.max_word,
    )

    overridden = override.fields
    emitted = exceeds_tolerance(extent, parent_default, tolerance) or (
        force_overrides and bool(overridden)
    )
    logger.debug(
        "%s: min=%d max=%d (%s)",
        key,
        extent.min,
        extent.max,
        "emitted" if emitted else "within tolerance of script default",
    )
    return LanguageRecord(key=key, extent=extent, emitted=emitted, overridden=overridden)


def assemble_records(
    script_defaults: Iterable[ScriptDefaultRecord],
    language_records: Iterable[LanguageRecord],
) -> ResultSet:
    """Collect emitted records into a ResultSet ordered by key."""
    emitted = [r for r in script_defaults if r.emitted]
    emitted.extend(r for r in language_records if r.emitted)
    emitted.sort(key=lambda record: record.key)
    return ResultSet(records=tuple(emitted))


def _unresolvable(
    key: ScriptLanguageKey, measurements: MeasurementSet
) -> Optional[KeyIssue]:
    """Issue for a split key that cannot even start resolving, if any."""
    if key.script not in measurements.attempted_scripts:
        return UnsupportedKeyWarning(key, f"script {key.script} is not exercised by the font")
    return None


def plan_min_max(
    measurements: MeasurementSet,
    configuration: Configuration,
    baseline: FontBaseline,
    force_overrides: bool = False,
) -> MinMaxPlan:
    """Run the aggregator, the resolver and the assembler over one font's samples."""
    tolerance = configuration.tolerance
    split_keys: Sequence[ScriptLanguageKey] = sorted(configuration.split_keys)
    baseline_extent = baseline.extent
    issues: List[KeyIssue] = []

    # Step 1: script defaults (split languages never enter the pool)
    defaults = {}
    for script, samples in sorted(measurements.samples_by_script().items()):
        script_splits = {k.language for k in split_keys if k.script == script}
        defaults[script] = compute_script_default(
            script, samples, script_splits, baseline_extent, tolerance
        )

    # Step 2: language records, each against its own script's default
    language_records: List[LanguageRecord] = []
    for key in split_keys:
        issue = _unresolvable(key, measurements)
        if issue is not None:
            issues.append(issue)
            continue

        measured = measurements.get(key)
        override = configuration.overrides.get(key)
        failure = measurements.failure_for(key)
        if measured is None and override is None:
            issues.append(
                failure
                if failure is not None
                else UnsupportedKeyWarning(key, "no word list or samples for this language")
            )
            continue

        try:
            record = resolve_language(
                key,
                measured,
                override,
                defaults[key.script].extent,
                tolerance,
                force_overrides=force_overrides,
            )
        except IncompleteOverrideError as exc:
            exc.cause = failure
            issues.append(exc)
            continue
        language_records.append(record)

    for issue in issues:
        logger.warning("%s", issue)

    script_defaults = tuple(defaults[script] for script in sorted(defaults))
    return MinMaxPlan(
        result=assemble_records(script_defaults, language_records),
        script_defaults=script_defaults,
        language_records=tuple(language_records),
        issues=tuple(issues),
    )
