"""Run driver: choose the generation mode, produce BASE records and apply them to the font."""

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from . import base_table
from . import cjk
from . import config
from . import errors
from . import font_io
from . import measurements
from . import models
from . import planning
from . import wordlists

logger = logging.getLogger(__name__)

BaseScriptEntry = base_table.BaseScriptEntry
Configuration = config.Configuration
FontBaseline = models.FontBaseline
MeasurementSet = models.MeasurementSet
MinMaxPlan = planning.MinMaxPlan
AutobaseError = errors.AutobaseError


class Mode(enum.Enum):
    CJK = "cjk"
    MEASURED = "measured"


@dataclass(frozen=True)
class CjkMode:
    metrics: cjk.CjkMetrics
    scripts: FrozenSet[str]
    kind: Mode = Mode.CJK


@dataclass(frozen=True)
class MeasuredMode:
    baseline: FontBaseline
    scripts: FrozenSet[str]
    kind: Mode = Mode.MEASURED


GenerationMode = Union[CjkMode, MeasuredMode]


@dataclass
class RunOptions:
    font_path: Path
    output: Optional[Path] = None
    words_per_list: int = config.DEFAULT_WORDS_PER_LIST
    jobs: int = 1
    fea: bool = False
    descender: Optional[int] = None
    force_overrides: bool = False


@dataclass
class RunOutcome:
    mode: Mode
    horizontal: List[BaseScriptEntry] = field(default_factory=list)
    vertical: List[BaseScriptEntry] = field(default_factory=list)
    plan: Optional[MinMaxPlan] = None
    fea: Optional[str] = None
    output: Optional[Path] = None


def select_mode(font, descender: Optional[int] = None) -> GenerationMode:
    """CJK fonts get the fixed ideographic layout, everything else is measured."""
    scripts = frozenset(font_io.supported_scripts(font))
    if scripts & set(config.CJK_SCRIPTS):
        logger.info("CJK scripts detected, using the fixed CJK layout")
        return CjkMode(metrics=cjk.compute_metrics(font, descender), scripts=scripts)
    return MeasuredMode(baseline=font_io.font_baseline(font), scripts=scripts)


def measure_font(
    font_path: Path,
    font,
    scripts: FrozenSet[str],
    words_per_list: int,
    jobs: int = 1,
) -> MeasurementSet:
    """Shape every relevant word list at every named instance of the font."""
    word_lists = wordlists.word_lists_for_scripts(scripts, words_per_list)
    if not word_lists:
        raise AutobaseError(
            f"No word lists available for the font's scripts ({', '.join(sorted(scripts)) or 'none'})"
        )
    locations = font_io.named_instance_locations(font)
    logger.info(
        "Measuring %d word list(s) at %d location(s)", len(word_lists), len(locations)
    )
    if jobs > 1:
        result = measurements.collect_measurements_parallel(
            font_path, word_lists, locations, jobs=jobs
        )
    else:
        measurer = measurements.HarfBuzzMeasurer(
            font_io.read_font_bytes(font_path), locations
        )
        result = measurements.collect_measurements(measurer, word_lists)
    if not len(result):
        raise errors.MeasurementFailure(font_path.name, "every word list failed to measure")
    return result


def run(options: RunOptions, configuration: Configuration) -> RunOutcome:
    font = font_io._read_ttfont(str(options.font_path))
    try:
        mode = select_mode(font, options.descender)
        if mode.kind is Mode.CJK:
            if configuration.split_keys or configuration.tolerance:
                logger.warning(
                    "The fixed CJK layout has no MinMax records; "
                    "tolerance, languages and overrides are ignored"
                )
            layout = mode.metrics.layout(mode.scripts)
            horizontal, vertical = base_table.entries_from_cjk(layout)
            outcome = RunOutcome(Mode.CJK, horizontal, vertical)
        else:
            found = measure_font(
                options.font_path,
                font,
                mode.scripts,
                options.words_per_list,
                options.jobs,
            )
            plan = planning.plan_min_max(
                found, configuration, mode.baseline, options.force_overrides
            )
            horizontal = base_table.entries_from_results(plan.result)
            outcome = RunOutcome(Mode.MEASURED, horizontal, [], plan)

        if options.fea:
            outcome.fea = base_table.to_fea(outcome.horizontal, outcome.vertical)
            return outcome

        base_table.add_to_font(font, outcome.horizontal, outcome.vertical)
        outcome.output = options.output or options.font_path
        font_io.save_font(font, outcome.output)
        return outcome
    finally:
        font.close()
