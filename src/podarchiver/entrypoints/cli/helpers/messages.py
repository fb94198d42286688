"""Terminal message helpers for the PODARCHIVER CLI.

Messages go to stderr so stdout stays machine-readable (the `archive` command
prints one archived path per line there).
"""

import click


def glyph(emoji: str, fallback: str) -> str:
    """Return `emoji` if stderr can encode it, otherwise `fallback`."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph('⚠️', '[!]')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr."""
    click.secho(f"{glyph('✅', '[OK]')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph('❌', '[X]')}  {msg}", fg="red", bold=True, err=True)
