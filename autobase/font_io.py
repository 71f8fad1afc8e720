"""Font I/O helper functions for reading fonts and inspecting their glyph inventory."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from . import config
from . import errors
from . import models

if TYPE_CHECKING:
    from fontTools.ttLib import TTFont

logger = logging.getLogger(__name__)

FontBaseline = models.FontBaseline
FontReadError = errors.FontReadError


def _read_ttfont(path: str):
    from fontTools.ttLib import TTFont, TTLibError

    try:
        return TTFont(path)
    except (OSError, TTLibError) as exc:
        raise FontReadError(f"Cannot open font {path}: {exc}") from exc


def _get_upm(font: "TTFont") -> int:
    return int(font["head"].unitsPerEm)


def _get_best_cmap(font: "TTFont") -> Dict[int, str]:
    cmap = font.getBestCmap()
    if cmap:
        return dict(cmap)
    # fallback: merge all subtables
    mapping: Dict[int, str] = {}
    if "cmap" in font:
        for st in font["cmap"].tables:
            if getattr(st, "cmap", None):
                mapping.update(st.cmap)
    return mapping


def _glyph_bounds(
    font: "TTFont", glyph_name: str
) -> Optional[Tuple[float, float, float, float]]:
    from fontTools.pens.boundsPen import BoundsPen

    glyph_set = font.getGlyphSet()
    if glyph_name not in glyph_set:
        return None
    pen = BoundsPen(glyph_set)
    glyph_set[glyph_name].draw(pen)
    if pen.bounds is None:
        return None
    xMin, yMin, xMax, yMax = pen.bounds
    return float(xMin), float(yMin), float(xMax), float(yMax)


def font_baseline(font: "TTFont") -> FontBaseline:
    """Typographic descender/ascender, falling back to hhea."""
    if "OS/2" in font:
        os2 = font["OS/2"]
        return FontBaseline(min=int(os2.sTypoDescender), max=int(os2.sTypoAscender))
    if "hhea" in font:
        hhea = font["hhea"]
        return FontBaseline(min=int(hhea.descent), max=int(hhea.ascent))
    raise FontReadError("Font has neither an OS/2 nor an hhea table")


def supported_scripts(font: "TTFont") -> Set[str]:
    """ISO 15924 codes of every script the cmap covers (Zyyy/Zinh/Zzzz excluded)."""
    from fontTools import unicodedata

    scripts: Set[str] = set()
    for codepoint in _get_best_cmap(font):
        script = unicodedata.script(chr(codepoint))
        if not script.startswith("Z"):
            scripts.add(script)
    return scripts


def _in_ranges(codepoint: int, ranges: Tuple[Tuple[int, int], ...]) -> bool:
    return any(start <= codepoint <= end for start, end in ranges)


def cjk_glyph_names(font: "TTFont") -> List[str]:
    """Han glyphs for the ideographic box; Hangul/kana when the font has no Han."""
    cmap = _get_best_cmap(font)
    names = sorted({n for cp, n in cmap.items() if _in_ranges(cp, config.HAN_RANGES)})
    if not names:
        names = sorted(
            {n for cp, n in cmap.items() if _in_ranges(cp, config.HANGUL_KANA_RANGES)}
        )
    return names


def glyph_advance(font: "TTFont", glyph_name: str) -> Optional[int]:
    if "hmtx" not in font:
        return None
    metrics = font["hmtx"].metrics.get(glyph_name)
    return None if metrics is None else int(metrics[0])


def named_instance_locations(font: "TTFont") -> List[Dict[str, float]]:
    """Default location plus every named instance of a variable font."""
    locations: List[Dict[str, float]] = [{}]
    if "fvar" in font:
        for instance in font["fvar"].instances:
            location = dict(instance.coordinates)
            if location not in locations:
                locations.append(location)
    return locations


def read_font_bytes(path: Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FontReadError(f"Cannot read font {path}: {exc}") from exc


def save_font(font: "TTFont", path: Path) -> None:
    font.save(str(path))
    logger.info("Wrote font to %s", path)
