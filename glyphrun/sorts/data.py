"""Sorts: the placeable units of a text buffer.

A sort is either a glyph (with its shaping result and metrics) or a line
break. The two kinds form a closed union; callers branch on them with
``isinstance``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from glyphrun.shaping.types import PositionalForm, ShapedGlyph

# Shaping context character for sorts that carry no codepoint
NO_CODEPOINT = "\ufffc"
LINE_BREAK_CHAR = "\n"


@dataclass(frozen=True)
class GlyphKind:
    name: str
    base_name: str
    codepoint: str | None
    form: PositionalForm
    advance_width: float


@dataclass(frozen=True)
class LineBreak:
    pass


SortKind = GlyphKind | LineBreak


@dataclass
class Sort:
    """One typeset unit in a SortBuffer."""

    kind: SortKind
    is_active: bool = False

    @classmethod
    def glyph(
        cls,
        name: str,
        advance_width: float,
        codepoint: str | None = None,
        base_name: str | None = None,
        form: PositionalForm = PositionalForm.ISOLATED,
    ) -> Sort:
        return cls(
            GlyphKind(
                name=name,
                base_name=base_name or name,
                codepoint=codepoint,
                form=form,
                advance_width=advance_width,
            )
        )

    @classmethod
    def from_shaped(cls, shaped: ShapedGlyph) -> Sort:
        return cls.glyph(
            shaped.glyph_name,
            shaped.advance_width,
            codepoint=shaped.codepoint,
            base_name=shaped.base_name,
            form=shaped.form,
        )

    @classmethod
    def line_break(cls) -> Sort:
        return cls(LineBreak())

    @property
    def is_line_break(self) -> bool:
        return isinstance(self.kind, LineBreak)

    @property
    def glyph_name(self) -> str | None:
        if isinstance(self.kind, GlyphKind):
            return self.kind.name
        return None

    @property
    def advance_width(self) -> float | None:
        if isinstance(self.kind, GlyphKind):
            return self.kind.advance_width
        return None

    @property
    def context_char(self) -> str:
        """Character this sort contributes to the shaping context."""
        if isinstance(self.kind, LineBreak):
            return LINE_BREAK_CHAR
        return self.kind.codepoint or NO_CODEPOINT

    def reshaped(self, shaped: ShapedGlyph) -> Sort:
        """Copy of this sort carrying a new shaping result, same active state."""
        kind = GlyphKind(
            name=shaped.glyph_name,
            base_name=shaped.base_name,
            codepoint=shaped.codepoint,
            form=shaped.form,
            advance_width=shaped.advance_width,
        )
        return replace(self, kind=kind)
