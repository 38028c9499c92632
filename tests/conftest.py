"""Pytest configuration and shared fixtures for glyphrun tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from glyphrun.catalog import GlyphRecord, MappingCatalog
from glyphrun.config import CONFIG_ENV_VAR
from glyphrun.kerning import GroupIndex, KerningTable
from glyphrun.sorts import Sort, SortBuffer

# Characters
BEH = "ب"
MEEM = "م"
NOON = "ن"
ALEF = "ا"
REH = "ر"
HAMZA = "ء"
TATWEEL = "ـ"
FATHA = "َ"

ARABIC_FORM_WIDTHS = {
    "beh-ar": (500, 300, 250, 450),
    "meem-ar": (520, 320, 280, 480),
    "noon-ar": (480, 260, 240, 440),
}

# Right-joining letters only have an isolated and a final form
RIGHT_JOINING_WIDTHS = {
    "alef-ar": (220, 240),
    "reh-ar": (380, 400),
}

PROJECT_GROUPS = {
    "public.kern1.A": ["A", "Aacute"],
    "public.kern2.V": ["V", "W"],
    "public.kern2.o": ["o"],
}

KERNING = {
    "A": {"V": -80},
    "public.kern1.A": {"public.kern2.V": -50, "o": -20},
    "T": {"public.kern2.o": -60},
}


@pytest.fixture
def arabic_catalog() -> MappingCatalog:
    """Catalog with Arabic letters and their positional-form glyphs."""
    records = []
    for (name, widths), char in zip(ARABIC_FORM_WIDTHS.items(), (BEH, MEEM, NOON)):
        isolated, init, medi, fina = widths
        records.append(GlyphRecord(name, isolated, (char,)))
        records.append(GlyphRecord(f"{name}.init", init))
        records.append(GlyphRecord(f"{name}.medi", medi))
        records.append(GlyphRecord(f"{name}.fina", fina))
    for (name, widths), char in zip(RIGHT_JOINING_WIDTHS.items(), (ALEF, REH)):
        isolated, fina = widths
        records.append(GlyphRecord(name, isolated, (char,)))
        records.append(GlyphRecord(f"{name}.fina", fina))
    records.append(GlyphRecord("hamza-ar", 300, (HAMZA,)))
    records.append(GlyphRecord("tatweel-ar", 200, (TATWEEL,)))
    records.append(GlyphRecord("fatha-ar", 0, (FATHA,)))
    return MappingCatalog.from_records(records)


@pytest.fixture
def latin_catalog() -> MappingCatalog:
    """Latin catalog with round advance widths and a glyph without a width."""
    widths = {"A": 600, "Aacute": 600, "V": 580, "W": 800, "T": 550, "o": 500, "space": 250}
    cmap = {"A": "A", "Á": "Aacute", "V": "V", "W": "W", "T": "T", "o": "o", " ": "space"}
    catalog = MappingCatalog.from_widths(widths, cmap)
    catalog.add(GlyphRecord("question"))
    return catalog


@pytest.fixture
def group_index() -> GroupIndex:
    """Group index built from the project groups only."""
    return GroupIndex.build(PROJECT_GROUPS)


@pytest.fixture
def kerning_table(group_index: GroupIndex) -> KerningTable:
    """Kerning table with glyph, mixed and group pairs."""
    return KerningTable.from_mapping(KERNING, group_index)


@pytest.fixture
def sized_buffer() -> SortBuffer:
    """Buffer holding glyphs named g0..g4, cursor at the end."""
    return SortBuffer.from_sorts([Sort.glyph(f"g{i}", 100) for i in range(5)])


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep tests from reading a real user configuration."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr("glyphrun.config.DEFAULT_CONFIG_PATH", tmp_path / "missing" / "config.yaml")
    yield


@pytest.fixture
def yaml_source(tmp_path: Path) -> Path:
    """Write a YAML project file with Latin glyphs, groups and kerning."""
    content = """\
glyphs:
  A: {width: 600, unicode: "0041", kern1: A}
  Aacute: {width: 600, unicode: "00C1", kern1: A}
  V: {width: 580, unicode: "0056"}
  W: {width: 800, unicode: "0057"}
  T: {width: 550, unicode: "0054"}
  o: {width: 500, unicode: "006F"}
  beh-ar: {width: 500, unicode: "0628"}
  beh-ar.init: {width: 300}
  beh-ar.fina: {width: 450}
  meem-ar: {width: 520, unicode: "0645"}
  meem-ar.init: {width: 320}
  meem-ar.fina: {width: 480}
groups:
  public.kern2.V: [V, W]
  public.kern2.o: [o]
kerning:
  A:
    V: -80
  public.kern1.A:
    public.kern2.V: -50
  T:
    public.kern2.o: -60
"""
    path = tmp_path / "project.yaml"
    path.write_text(content, encoding="utf-8")
    return path
