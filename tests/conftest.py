"""Shared fixtures: small synthetic TrueType fonts built with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables.TupleVariation import TupleVariation

UNITS_PER_EM = 1000
ASCENDER = 800
DESCENDER = -200


def rect(x0: int, y0: int, x1: int, y1: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x1, y0))
    pen.lineTo((x1, y1))
    pen.lineTo((x0, y1))
    pen.closePath()
    return pen.glyph()


def empty_glyph():
    return TTGlyphPen(None).glyph()


# glyph name -> (codepoint, box or None, advance)
LATIN_GLYPHS = {
    "space": (0x20, None, 250),
    "a": (ord("a"), (50, 0, 450, 500), 500),
    "o": (ord("o"), (50, 0, 450, 500), 500),
    "p": (ord("p"), (50, -200, 450, 500), 500),
    "d": (ord("d"), (50, 0, 450, 750), 500),
}
HAN_GLYPHS = {
    "uni4E00": (0x4E00, (50, -70, 950, 830), 1000),
    "uni4E8C": (0x4E8C, (50, -70, 950, 830), 1000),
}


def build_font(path: Path, glyph_specs, variations=None) -> Path:
    glyph_order = [".notdef"] + list(glyph_specs)
    glyphs = {".notdef": rect(50, 0, 450, 700)}
    metrics = {".notdef": (500, 50)}
    cmap = {}
    for name, (codepoint, box, advance) in glyph_specs.items():
        glyphs[name] = rect(*box) if box else empty_glyph()
        metrics[name] = (advance, box[0] if box else 0)
        cmap[codepoint] = name

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ASCENDER, descent=DESCENDER)
    fb.setupNameTable({"familyName": "Autobase Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENDER,
        sTypoDescender=DESCENDER,
        sTypoLineGap=0,
        usWinAscent=ASCENDER,
        usWinDescent=-DESCENDER,
    )
    fb.setupPost()
    if variations:
        fb.setupFvar(
            axes=[("wght", 100, 400, 900, "Weight")],
            instances=[
                {"location": {"wght": 400}, "stylename": "Regular"},
                {"location": {"wght": 900}, "stylename": "Black"},
            ],
        )
        fb.setupGvar(variations)
    fb.save(str(path))
    return path


@pytest.fixture
def latin_font_path(tmp_path: Path) -> Path:
    return build_font(tmp_path / "Latin-Regular.ttf", LATIN_GLYPHS)


@pytest.fixture
def cjk_font_path(tmp_path: Path) -> Path:
    return build_font(tmp_path / "Han-Regular.ttf", {**LATIN_GLYPHS, **HAN_GLYPHS})


def _box_deltas(bottom: int = 0, top: int = 0):
    # rect() points run bottom-left, bottom-right, top-right, top-left; then 4 phantoms
    return [(0, bottom), (0, bottom), (0, top), (0, top)] + [(0, 0)] * 4


# At wght=900 the "p" descender drops 50 units and the "d" ascender rises 100
BLACK_VARIATIONS = {
    "p": [TupleVariation({"wght": (0, 1.0, 1.0)}, _box_deltas(bottom=-50))],
    "d": [TupleVariation({"wght": (0, 1.0, 1.0)}, _box_deltas(top=100))],
}


@pytest.fixture
def variable_font_path(tmp_path: Path) -> Path:
    return build_font(tmp_path / "Latin[wght].ttf", LATIN_GLYPHS, BLACK_VARIATIONS)
