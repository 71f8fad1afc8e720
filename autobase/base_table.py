"""BASE table encoding: fontTools table objects, feature syntax export, and reading back."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence, Tuple

from fontTools.ttLib import newTable
from fontTools.ttLib.tables import otTables

from . import cjk
from . import models
from . import tags

if TYPE_CHECKING:
    from fontTools.ttLib import TTFont

CjkLayout = cjk.CjkLayout
ResultSet = models.ResultSet

MinMaxCoords = Tuple[Optional[int], Optional[int]]


@dataclass
class BaseScriptEntry:
    """One BaseScript record: baselines, default MinMax and language MinMax values.

    Tags are OpenType tags (``latn``, ``FIN ``), not ISO codes.
    """

    script_tag: str
    default_baseline: Optional[str] = None
    baselines: Dict[str, int] = field(default_factory=dict)
    default_minmax: Optional[MinMaxCoords] = None
    languages: Dict[str, MinMaxCoords] = field(default_factory=dict)

    def merge(self, other: "BaseScriptEntry") -> None:
        if other.default_baseline is not None:
            self.default_baseline = other.default_baseline
        self.baselines.update(other.baselines)
        if other.default_minmax is not None:
            self.default_minmax = _merge_coords(self.default_minmax, other.default_minmax)
        for lang_tag, coords in other.languages.items():
            self.languages[lang_tag] = _merge_coords(self.languages.get(lang_tag), coords)


def _merge_coords(mine: Optional[MinMaxCoords], theirs: MinMaxCoords) -> MinMaxCoords:
    if mine is None:
        return theirs
    lows = [v for v in (mine[0], theirs[0]) if v is not None]
    highs = [v for v in (mine[1], theirs[1]) if v is not None]
    return (min(lows) if lows else None, max(highs) if highs else None)


def merge_entries(*groups: Iterable[BaseScriptEntry]) -> List[BaseScriptEntry]:
    """Combine entries for the same script tag; output sorted by tag."""
    merged: Dict[str, BaseScriptEntry] = {}
    for group in groups:
        for entry in group:
            if entry.script_tag in merged:
                merged[entry.script_tag].merge(entry)
            else:
                merged[entry.script_tag] = BaseScriptEntry(
                    entry.script_tag,
                    entry.default_baseline,
                    dict(entry.baselines),
                    entry.default_minmax,
                    dict(entry.languages),
                )
    return [merged[tag] for tag in sorted(merged)]


def entries_from_results(result_set: ResultSet) -> List[BaseScriptEntry]:
    """Group emitted MinMax records under their OpenType script tags."""
    entries: List[BaseScriptEntry] = []
    for record in result_set:
        key = record.key
        entry = BaseScriptEntry(tags.opentype_script_tag(key.script))
        coords = (record.extent.min, record.extent.max)
        if key.language is None:
            entry.default_minmax = coords
        else:
            lang_tag = tags.opentype_language_tag(key.language)
            if lang_tag is None:
                # configuration loading rejects these keys
                raise ValueError(f"{key}: no OpenType language tag for {key.language!r}")
            entry.languages[lang_tag] = coords
        entries.append(entry)
    return merge_entries(entries)


def entries_from_cjk(layout: CjkLayout) -> Tuple[List[BaseScriptEntry], List[BaseScriptEntry]]:
    def convert(records):
        return [
            BaseScriptEntry(r.script_tag, r.default_baseline, dict(r.baselines))
            for r in records
        ]

    return convert(layout.horizontal), convert(layout.vertical)


# ---------------------------------------------------------------------------
# fontTools table objects


def _coord(value: int) -> otTables.BaseCoord:
    coord = otTables.BaseCoord()
    coord.Format = 1
    coord.Coordinate = int(value)
    return coord


def _minmax(coords: MinMaxCoords) -> otTables.MinMax:
    low, high = coords
    minmax = otTables.MinMax()
    minmax.MinCoord = _coord(low) if low is not None else None
    minmax.MaxCoord = _coord(high) if high is not None else None
    minmax.FeatMinMaxRecord = []
    minmax.FeatMinMaxCount = 0
    return minmax


def _axis_baseline_tags(entries: Sequence[BaseScriptEntry]) -> List[str]:
    found = set()
    for entry in entries:
        found.update(entry.baselines)
        if entry.default_baseline:
            found.add(entry.default_baseline)
    return sorted(found)


def _build_axis(entries: Sequence[BaseScriptEntry]) -> Optional[otTables.Axis]:
    if not entries:
        return None
    baseline_tags = _axis_baseline_tags(entries)

    axis = otTables.Axis()
    if baseline_tags:
        axis.BaseTagList = otTables.BaseTagList()
        axis.BaseTagList.BaselineTag = baseline_tags
        axis.BaseTagList.BaseTagCount = len(baseline_tags)
    else:
        axis.BaseTagList = None
    axis.BaseScriptList = otTables.BaseScriptList()
    axis.BaseScriptList.BaseScriptRecord = []

    for entry in sorted(entries, key=lambda e: e.script_tag):
        record = otTables.BaseScriptRecord()
        record.BaseScriptTag = entry.script_tag
        record.BaseScript = otTables.BaseScript()
        if entry.default_baseline is not None:
            values = otTables.BaseValues()
            values.DefaultIndex = baseline_tags.index(entry.default_baseline)
            # scripts without a value for a baseline get 0, as feature files do
            values.BaseCoord = [_coord(entry.baselines.get(t, 0)) for t in baseline_tags]
            values.BaseCoordCount = len(values.BaseCoord)
            record.BaseScript.BaseValues = values
        else:
            record.BaseScript.BaseValues = None
        record.BaseScript.DefaultMinMax = (
            _minmax(entry.default_minmax) if entry.default_minmax is not None else None
        )
        record.BaseScript.BaseLangSysRecord = []
        for lang_tag in sorted(entry.languages):
            lang_record = otTables.BaseLangSysRecord()
            lang_record.BaseLangSysTag = lang_tag
            lang_record.MinMax = _minmax(entry.languages[lang_tag])
            record.BaseScript.BaseLangSysRecord.append(lang_record)
        record.BaseScript.BaseLangSysCount = len(record.BaseScript.BaseLangSysRecord)
        axis.BaseScriptList.BaseScriptRecord.append(record)

    axis.BaseScriptList.BaseScriptCount = len(axis.BaseScriptList.BaseScriptRecord)
    return axis


def build_base_table(
    horizontal: Sequence[BaseScriptEntry], vertical: Sequence[BaseScriptEntry] = ()
):
    """Build a version 1.0 ``BASE`` table ready to assign to ``font["BASE"]``."""
    base = otTables.BASE()
    base.Version = 0x00010000
    base.HorizAxis = _build_axis(horizontal)
    base.VertAxis = _build_axis(vertical)

    table = newTable("BASE")
    table.table = base
    return table


def add_to_font(
    font: "TTFont",
    horizontal: Sequence[BaseScriptEntry],
    vertical: Sequence[BaseScriptEntry] = (),
) -> None:
    font["BASE"] = build_base_table(horizontal, vertical)


# ---------------------------------------------------------------------------
# Feature syntax


def _fea_coord(value: Optional[int]) -> str:
    return "NULL" if value is None else str(value)


def _fea_axis(name: str, entries: Sequence[BaseScriptEntry]) -> List[str]:
    lines: List[str] = []
    baseline_tags = _axis_baseline_tags(entries)
    with_values = [e for e in entries if e.default_baseline is not None]
    if baseline_tags and with_values:
        lines.append(f"    {name}.BaseTagList {' '.join(baseline_tags)};")
        rows = []
        for entry in with_values:
            coords = " ".join(str(entry.baselines.get(t, 0)) for t in baseline_tags)
            rows.append(f"        {entry.script_tag} {entry.default_baseline} {coords}")
        lines.append(f"    {name}.BaseScriptList\n" + ",\n".join(rows) + ";")
    for entry in entries:
        if entry.default_minmax is not None:
            low, high = entry.default_minmax
            lines.append(
                f"    {name}.MinMax {entry.script_tag} dflt {_fea_coord(low)}, {_fea_coord(high)};"
            )
        for lang_tag in sorted(entry.languages):
            low, high = entry.languages[lang_tag]
            lines.append(
                f"    {name}.MinMax {entry.script_tag} {lang_tag.strip()} "
                f"{_fea_coord(low)}, {_fea_coord(high)};"
            )
    return lines


def to_fea(
    horizontal: Sequence[BaseScriptEntry], vertical: Sequence[BaseScriptEntry] = ()
) -> str:
    """Render entries in AFDKO feature syntax."""
    lines = ["table BASE {"]
    lines.extend(_fea_axis("HorizAxis", sorted(horizontal, key=lambda e: e.script_tag)))
    lines.extend(_fea_axis("VertAxis", sorted(vertical, key=lambda e: e.script_tag)))
    lines.append("} BASE;")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Reading


def _read_coords(minmax) -> MinMaxCoords:
    low = minmax.MinCoord.Coordinate if minmax.MinCoord is not None else None
    high = minmax.MaxCoord.Coordinate if minmax.MaxCoord is not None else None
    return (low, high)


def _read_axis(axis) -> List[BaseScriptEntry]:
    if axis is None or axis.BaseScriptList is None:
        return []
    baseline_tags = list(axis.BaseTagList.BaselineTag) if axis.BaseTagList else []
    entries: List[BaseScriptEntry] = []
    for record in axis.BaseScriptList.BaseScriptRecord:
        script = record.BaseScript
        entry = BaseScriptEntry(record.BaseScriptTag)
        values = getattr(script, "BaseValues", None)
        if values is not None and baseline_tags:
            entry.baselines = {
                tag: coord.Coordinate for tag, coord in zip(baseline_tags, values.BaseCoord)
            }
            if values.DefaultIndex < len(baseline_tags):
                entry.default_baseline = baseline_tags[values.DefaultIndex]
        if getattr(script, "DefaultMinMax", None) is not None:
            entry.default_minmax = _read_coords(script.DefaultMinMax)
        for lang_record in getattr(script, "BaseLangSysRecord", None) or []:
            entry.languages[lang_record.BaseLangSysTag] = _read_coords(lang_record.MinMax)
        entries.append(entry)
    return entries


def read_base_table(font: "TTFont") -> Tuple[List[BaseScriptEntry], List[BaseScriptEntry]]:
    """Horizontal and vertical entries of the font's existing BASE table."""
    if "BASE" not in font:
        return [], []
    base = font["BASE"].table
    return _read_axis(base.HorizAxis), _read_axis(base.VertAxis)
