"""Presentation styles attached to scene nodes.

Styles are plain data for downstream renderers. Nothing in this package
paints them; every node simply has to carry one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB color."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError("Color channels must be between 0 and 255")

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


BLACK = Color(0, 0, 0)
LIGHT_GRAY = Color(245, 245, 245)
LIGHT_WOOD = Color(240, 230, 210)
BLUEPRINT_BLUE = Color(20, 40, 80)


@dataclass(frozen=True)
class PresentationStyle:
    """Cosmetic attributes for a node.

    Attributes:
        fill_color: Face fill, or None for outline-only drawing.
        stroke_color: Edge color.
        stroke_width: Edge width in points.
        show_label: Whether the node label should be drawn.
        label_color: Label text color.
        label_font_size: Label size in points.
    """

    fill_color: Color | None = LIGHT_GRAY
    stroke_color: Color = BLACK
    stroke_width: float = 1.0
    show_label: bool = True
    label_color: Color = BLACK
    label_font_size: float = 8.0

    def __post_init__(self) -> None:
        if self.stroke_width < 0:
            raise ValueError("stroke_width cannot be negative")
        if self.label_font_size <= 0:
            raise ValueError("label_font_size must be positive")

    @classmethod
    def default(cls) -> PresentationStyle:
        return cls()

    @classmethod
    def outline(cls) -> PresentationStyle:
        """Edges only, no fill."""
        return cls(fill_color=None)

    @classmethod
    def wood_panel(cls) -> PresentationStyle:
        """Light wood fill for sheet goods."""
        return cls(fill_color=LIGHT_WOOD)

    @classmethod
    def blueprint(cls) -> PresentationStyle:
        """Thin dark-blue lines with no fill."""
        return cls(
            fill_color=None,
            stroke_color=BLUEPRINT_BLUE,
            stroke_width=0.5,
            label_color=BLUEPRINT_BLUE,
        )

    @classmethod
    def named(cls, name: str) -> PresentationStyle:
        """Look up a named bundle ("default", "outline", "wood", "blueprint").

        Raises:
            KeyError: If the name is not a known bundle.
        """
        key = name.strip().lower().replace("-", "_")
        if key not in _NAMED_STYLES:
            available = ", ".join(sorted(_NAMED_STYLES))
            raise KeyError(f"Unknown presentation style '{name}'. Available: {available}")
        return _NAMED_STYLES[key]()

    def with_fill(self, fill_color: Color | None) -> PresentationStyle:
        return replace(self, fill_color=fill_color)

    def with_stroke(self, stroke_color: Color, stroke_width: float | None = None) -> PresentationStyle:
        if stroke_width is None:
            stroke_width = self.stroke_width
        return replace(self, stroke_color=stroke_color, stroke_width=stroke_width)

    def with_label(
        self,
        show_label: bool = True,
        label_color: Color | None = None,
        label_font_size: float | None = None,
    ) -> PresentationStyle:
        return replace(
            self,
            show_label=show_label,
            label_color=label_color or self.label_color,
            label_font_size=label_font_size or self.label_font_size,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "fill_color": self.fill_color.hex if self.fill_color else None,
            "stroke_color": self.stroke_color.hex,
            "stroke_width": self.stroke_width,
            "show_label": self.show_label,
            "label_color": self.label_color.hex,
            "label_font_size": self.label_font_size,
        }


_NAMED_STYLES = {
    "default": PresentationStyle.default,
    "outline": PresentationStyle.outline,
    "wood": PresentationStyle.wood_panel,
    "wood_panel": PresentationStyle.wood_panel,
    "blueprint": PresentationStyle.blueprint,
}
