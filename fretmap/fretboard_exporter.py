"""FretboardExporter: renders fretboard diagrams to SVG or HTML files."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from fretmap.fretboard_models import RenderConfig
from fretmap.fretboard_renderer import FretboardRenderer
from fretmap.surfaces import SvgSurface

SUPPORTED_FORMATS: Final[set[str]] = {"html", "svg"}


def _escape_html(text: str) -> str:
    """Escape the three characters that are unsafe in HTML text content."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class FretboardExporter:
    """
    Size a surface, render a fretboard onto it and write the result to disk.

    Supported formats:
    - ``svg``: the bare SVG drawing.
    - ``html``: the SVG inlined in a self-contained HTML page.

    The exporter plays the role of an embedding widget: it owns the diagram
    size and a 22-fret default, while the renderer itself defaults to 18.
    """

    DEFAULT_TOTAL_FRETS = 22
    DEFAULT_WIDTH = 960.0
    DEFAULT_HEIGHT = 180.0
    DEFAULT_PADDING = 20.0  # keeps edge strings and their markers in view

    def __init__(
        self,
        title: str = "",
        output_format: str = "html",
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        total_frets: int = DEFAULT_TOTAL_FRETS,
    ) -> None:
        normalized = output_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_FORMATS))
            raise ValueError(f"Unsupported output format '{output_format}'. Use one of: {supported}.")
        if width <= 0 or height <= 0:
            raise ValueError(f"Diagram size must be positive, got {width}x{height}.")
        self.title = title
        self.output_format = normalized
        self.width = width
        self.height = height
        self.total_frets = total_frets
        self.renderer = FretboardRenderer()

    @property
    def default_extension(self) -> str:
        return f".{self.output_format}"

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_html(self, svg: str) -> str:
        title_safe = _escape_html(self.title)
        heading = f"  <h1>{title_safe}</h1>\n" if self.title else ""

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title_safe}</title>
  <style>
    body {{
      font-family: Helvetica, Arial, sans-serif;
      background: #f0f0f0;
      margin: 0;
      padding: 2rem;
    }}
    h1 {{
      text-align: center;
      font-size: 1.6rem;
      margin-bottom: 2rem;
      color: #222;
    }}
    .fretboard {{
      background: #fff;
      box-shadow: 0 2px 8px rgba(0, 0, 0, 0.15);
      margin: 0 auto;
      max-width: 1100px;
      padding: 1rem;
    }}
    .fretboard svg {{
      display: block;
      width: 100%;
      height: auto;
    }}
    @media print {{
      body {{
        background: #fff;
        padding: 0;
      }}
      .fretboard {{
        box-shadow: none;
        max-width: 100%;
      }}
    }}
  </style>
</head>
<body>
{heading}  <div class="fretboard">{svg}</div>
</body>
</html>"""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_config(
        self,
        tuning: Sequence[str],
        highlighted_notes: Iterable[str] = (),
        highlighted_chords: Iterable[str] | None = None,
    ) -> RenderConfig:
        """Build a RenderConfig using this exporter's fret count and default colours."""
        return RenderConfig(
            tuning=tuple(tuning),
            highlighted_notes=frozenset(highlighted_notes),
            highlighted_chords=None if highlighted_chords is None else frozenset(highlighted_chords),
            total_frets=self.total_frets,
        )

    def render_svg(self, config: RenderConfig) -> str:
        surface = SvgSurface(self.width, self.height, padding=self.DEFAULT_PADDING)
        self.renderer.render(surface, config)
        return surface.to_svg()

    def render_document(self, config: RenderConfig) -> str:
        """Render *config* into the content of an output file."""
        svg = self.render_svg(config)
        if self.output_format == "svg":
            return svg
        return self._build_html(svg)

    def export(self, config: RenderConfig, output_path: str) -> None:
        """
        Render *config* and write it to *output_path*.

        Raises:
            ValueError: If the config violates a rendering precondition.
            OSError:    If the output file cannot be written.
        """
        content = self.render_document(config)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(content)
