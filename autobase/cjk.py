"""CJK fixed layout: ideographic baselines per the Google Fonts CJK vertical metrics guide.

See https://googlefonts.github.io/gf-guide/metrics.html#cjk-vertical-metrics
"""

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Sequence, Tuple

from . import config
from . import errors
from . import font_io
from . import tags

if TYPE_CHECKING:
    from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

FontReadError = errors.FontReadError

BASELINE_TAGS: Tuple[str, ...] = ("icfb", "icft", "ideo", "idtp", "romn")

Bounds = Tuple[float, float, float, float]


def is_cjk_script(script: str) -> bool:
    return script in config.CJK_SCRIPTS


@dataclass(frozen=True)
class CjkScriptRecord:
    """Baselines for one OpenType script tag on one axis."""

    script_tag: str
    default_baseline: str
    baselines: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class CjkLayout:
    horizontal: Tuple[CjkScriptRecord, ...]
    vertical: Tuple[CjkScriptRecord, ...]


@dataclass(frozen=True)
class CjkMetrics:
    """Horizontal (h_*) and vertical (v_*) ideographic baselines."""

    h_icfb: float
    h_icft: float
    h_ideo: float
    h_idtp: float
    h_romn: float
    v_icfb: float
    v_icft: float
    v_ideo: float
    v_idtp: float
    v_romn: float
    square: bool

    @classmethod
    def from_bounds(
        cls, bounds: Sequence[Bounds], upm: float, average_width: float
    ) -> "CjkMetrics":
        """Average character faces and a UPM-high em box centred on them.

        Args:
            bounds: (xMin, yMin, xMax, yMax) of the ideographs
            upm: Units per em
            average_width: Mean advance width of the ideographs
        """
        if not bounds:
            raise FontReadError("No CJK glyph outlines to derive ideographic baselines from")
        count = float(len(bounds))
        centre = sum((b[1] + b[3]) / 2.0 for b in bounds) / count
        h_ideo = centre - upm / 2.0
        return cls(
            h_icfb=sum(b[1] for b in bounds) / count,
            h_icft=sum(b[3] for b in bounds) / count,
            h_ideo=h_ideo,
            h_idtp=centre + upm / 2.0,
            h_romn=0.0,
            v_icfb=sum(b[0] for b in bounds) / count,
            v_icft=sum(b[2] for b in bounds) / count,
            v_ideo=0.0,
            v_idtp=average_width,
            v_romn=-h_ideo,
            square=abs(average_width - upm) / upm < config.SQUARE_ADVANCE_RATIO,
        )

    def _axis(self, prefix: str) -> Dict[str, int]:
        values = {tag: int(getattr(self, f"{prefix}_{tag}")) for tag in BASELINE_TAGS}
        if self.square:
            del values["idtp"]
        return values

    def layout(self, scripts: Iterable[str]) -> CjkLayout:
        """Constant baseline record set for every supported ISO 15924 script."""
        horizontal = self._axis("h")
        vertical = self._axis("v")
        h_records: Dict[str, CjkScriptRecord] = {}
        v_records: Dict[str, CjkScriptRecord] = {}
        for script in sorted(scripts):
            ot_tag = tags.opentype_script_tag(script)
            default = "ideo" if is_cjk_script(script) else "romn"
            # Hira and Kana share 'kana'
            h_records.setdefault(ot_tag, CjkScriptRecord(ot_tag, default, dict(horizontal)))
            v_records.setdefault(ot_tag, CjkScriptRecord(ot_tag, default, dict(vertical)))
        return CjkLayout(
            horizontal=tuple(h_records[t] for t in sorted(h_records)),
            vertical=tuple(v_records[t] for t in sorted(v_records)),
        )


def compute_metrics(font: "TTFont", descender: Optional[int] = None) -> CjkMetrics:
    """Measure the font's ideographs.

    ``descender`` replaces the computed em-box bottom (``ideo``) when given.
    """
    upm = float(font_io._get_upm(font))
    names = font_io.cjk_glyph_names(font)
    bounds = [b for b in (font_io._glyph_bounds(font, n) for n in names) if b]
    advances = [font_io.glyph_advance(font, n) for n in names]
    widths = [float(a) if a is not None else upm for a in advances]
    average_width = sum(widths) / len(widths) if widths else upm

    metrics = CjkMetrics.from_bounds(bounds, upm, average_width)
    if descender is not None:
        ideo = float(-abs(descender))
        metrics = replace(metrics, h_ideo=ideo, h_idtp=ideo + upm, v_romn=-ideo)
    logger.info(
        "Horizontal CJK baselines: icfb=%.0f icft=%.0f ideo=%.0f",
        metrics.h_icfb,
        metrics.h_icft,
        metrics.h_ideo,
    )
    logger.info(
        "Vertical CJK baselines: icfb=%.0f icft=%.0f", metrics.v_icfb, metrics.v_icft
    )
    return metrics
