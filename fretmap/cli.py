"""fretmap CLI entry point."""

import sys

import click

from fretmap import __version__
from fretmap.chord_resolver import Found, resolve_chord
from fretmap.fretboard_exporter import FretboardExporter
from fretmap.note_mapper import map_notes, validate_tuning
from fretmap.pitch import SEMITONES_PER_OCTAVE, UnknownPitchClass, pitch_index

STANDARD_TUNING = "E,A,D,G,B,E"
MAX_FRETS = 24


def _split_names(values: tuple[str, ...] | str) -> list[str]:
    """Split comma-separated pitch names and upper-case their letter.

    Accepts a single string or the tuple produced by a ``multiple=True``
    option, so ``--note A --note C,E`` yields ``["A", "C", "E"]``.
    """
    if isinstance(values, str):
        values = (values,)
    names: list[str] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part:
                names.append(part[:1].upper() + part[1:])
    return names


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="fretmap")
def main() -> None:
    """fretmap — fretboard note and chord diagram generator."""


# ── render subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.option(
    "--tuning",
    default=STANDARD_TUNING,
    show_default=True,
    metavar="NOTES",
    help="Comma-separated open-string pitch classes, top row first.",
)
@click.option(
    "--note",
    "-n",
    "notes",
    multiple=True,
    metavar="NOTES",
    help="Pitch class(es) to highlight. Repeat or comma-separate.",
)
@click.option(
    "--chord",
    "-c",
    "chords",
    multiple=True,
    metavar="ROOTS",
    help="Major chord root(s) whose triad tones are highlighted.",
)
@click.option(
    "--frets",
    type=click.IntRange(1, MAX_FRETS),
    default=FretboardExporter.DEFAULT_TOTAL_FRETS,
    show_default=True,
    help="Number of frets to draw.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["html", "svg"], case_sensitive=False),
    default="html",
    show_default=True,
    help="Output format: self-contained HTML page or bare SVG.",
)
@click.option(
    "--width",
    type=click.FloatRange(min=1.0),
    default=FretboardExporter.DEFAULT_WIDTH,
    show_default=True,
    help="Diagram width in pixels.",
)
@click.option(
    "--height",
    type=click.FloatRange(min=1.0),
    default=FretboardExporter.DEFAULT_HEIGHT,
    show_default=True,
    help="Diagram height in pixels.",
)
@click.option("--title", default="", metavar="TEXT", help="Heading shown in HTML output.")
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination file path. Defaults to fretboard.<format>.",
)
def render(
    tuning: str,
    notes: tuple[str, ...],
    chords: tuple[str, ...],
    frets: int,
    output_format: str,
    width: float,
    height: float,
    title: str,
    output: str | None,
) -> None:
    """
    Draw a fretboard diagram with highlighted notes and chord tones.

    \b
    Examples:
      fretmap render --note A
      fretmap render --chord C,G -o c_and_g.html --title "C and G"
      fretmap render --tuning E,A,D,G --note E --format svg --frets 12
    """
    tuning_names = _split_names(tuning)
    note_names = _split_names(notes)
    chord_names = _split_names(chords)

    exporter = FretboardExporter(
        title=title,
        output_format=output_format,
        width=width,
        height=height,
        total_frets=frets,
    )
    resolved_output = output if output is not None else f"fretboard{exporter.default_extension}"

    click.echo(f"fretmap v{__version__}")
    click.echo(f"  Tuning : {' '.join(tuning_names)}")
    click.echo(f"  Notes  : {' '.join(note_names) or '-'}")
    click.echo(f"  Chords : {' '.join(chord_names) or '-'}")
    click.echo(f"  Frets  : {frets}  |  Format: {exporter.output_format}")
    click.echo()

    for chord in chord_names:
        if not isinstance(resolve_chord(chord), Found):
            click.echo(f"  WARNING: Unknown chord '{chord}' ignored.", err=True)

    config = exporter.build_config(tuning_names, note_names, chord_names or None)
    click.echo(f"[1/2] Rendering fretboard ({width:g}x{height:g} px)...")
    click.echo(f"[2/2] Writing {exporter.output_format.upper()} file → '{resolved_output}'...")
    try:
        exporter.export(config, resolved_output)
    except UnknownPitchClass as exc:
        click.echo(f"  ERROR: Invalid tuning — {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"  ERROR: Could not render fretboard — {exc}", err=True)
        sys.exit(1)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)

    click.echo()
    click.echo(f"Done!  Open '{resolved_output}' in any browser.")


# ── chord subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("name")
def chord(name: str) -> None:
    """
    Print the tones of the major chord rooted at NAME.

    \b
    Examples:
      fretmap chord C
      fretmap chord f#
    """
    root = _split_names(name)
    result = resolve_chord(root[0] if root else name)
    if not isinstance(result, Found):
        click.echo(f"  ERROR: Unknown chord '{name}'.", err=True)
        sys.exit(1)

    # root, third, fifth
    tones = sorted(
        result.notes,
        key=lambda n: (pitch_index(n) - pitch_index(result.root)) % SEMITONES_PER_OCTAVE,
    )
    click.echo(f"{result.root}: {' '.join(tones)}")


# ── notes subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("note")
@click.option(
    "--tuning",
    default=STANDARD_TUNING,
    show_default=True,
    metavar="NOTES",
    help="Comma-separated open-string pitch classes, top row first.",
)
@click.option(
    "--frets",
    type=click.IntRange(1, MAX_FRETS),
    default=FretboardExporter.DEFAULT_TOTAL_FRETS,
    show_default=True,
    help="Highest fret to search.",
)
def notes(note: str, tuning: str, frets: int) -> None:
    """
    List the frets where NOTE sounds on every string.

    \b
    Examples:
      fretmap notes A
      fretmap notes c# --tuning D,A,D,G,A,D --frets 12
    """
    tuning_names = _split_names(tuning)
    note_names = _split_names(note)
    try:
        validate_tuning(tuning_names)
    except ValueError as exc:
        click.echo(f"  ERROR: Invalid tuning — {exc}", err=True)
        sys.exit(1)

    if not note_names:
        click.echo("  ERROR: No note given.", err=True)
        sys.exit(1)
    try:
        for name in note_names:
            pitch_index(name)
    except UnknownPitchClass as exc:
        click.echo(f"  ERROR: Invalid note — {exc}", err=True)
        sys.exit(1)

    marks = map_notes(tuning_names, note_names, None, frets)
    for string_index, open_note in enumerate(tuning_names):
        found = [str(m.fret) for m in marks if m.string_index == string_index]
        click.echo(f"  {string_index + 1}  {open_note:<2}  {', '.join(found) or '-'}")
