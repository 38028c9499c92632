"""Unit tests for glyphrun.catalog."""

from glyphrun.catalog import GlyphCatalog, GlyphRecord, MappingCatalog


class TestMappingCatalog:
    """In-memory glyph catalog."""

    def test_satisfies_protocol(self, latin_catalog: MappingCatalog) -> None:
        """MappingCatalog is a GlyphCatalog."""
        assert isinstance(latin_catalog, GlyphCatalog)

    def test_lookups(self, latin_catalog: MappingCatalog) -> None:
        """Existence, widths and the character map."""
        assert latin_catalog.has_glyph("A")
        assert not latin_catalog.has_glyph("B")
        assert latin_catalog.advance_width("V") == 580
        assert latin_catalog.advance_width("question") is None
        assert latin_catalog.advance_width("missing") is None
        assert latin_catalog.base_glyph_for_codepoint("Á") == "Aacute"
        assert latin_catalog.base_glyph_for_codepoint("Z") is None

    def test_first_glyph_keeps_codepoint(self) -> None:
        """When two glyphs claim a character the first one keeps it."""
        catalog = MappingCatalog.from_records(
            [GlyphRecord("a", 500, ("a",)), GlyphRecord("a.alt", 520, ("a",))]
        )
        assert catalog.base_glyph_for_codepoint("a") == "a"

    def test_map_codepoint_creates_glyph(self) -> None:
        """Mapping a character to an unknown glyph registers the glyph."""
        catalog = MappingCatalog()
        catalog.map_codepoint("x", "x")
        assert "x" in catalog
        assert len(catalog) == 1
        assert catalog.glyphs["x"].codepoints == ("x",)

    def test_glyph_groups(self) -> None:
        """Glyph-local group assignments are collected per glyph."""
        catalog = MappingCatalog.from_records(
            [
                GlyphRecord("A", 600, kern1="A"),
                GlyphRecord("V", 580, kern2="V"),
                GlyphRecord("o", 500),
            ]
        )
        assert catalog.glyph_groups() == {"A": {"kern1": "A"}, "V": {"kern2": "V"}}

    def test_constructed_from_dict(self) -> None:
        """Passing records directly also builds the character map."""
        catalog = MappingCatalog({"b": GlyphRecord("b", 500, ("b",))})
        assert catalog.base_glyph_for_codepoint("b") == "b"
        assert [record.name for record in catalog] == ["b"]
