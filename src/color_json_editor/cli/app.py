"""Typer CLI application with command groups."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from color_json_editor.config import default_palette_path
from color_json_editor.core.color import to_rgb
from color_json_editor.core.document import ColorDocument
from color_json_editor.core.errors import ColorJsonError
from color_json_editor.palette.store import UserPalette

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Route package logging through rich on stderr."""
    package_logger = logging.getLogger("color_json_editor")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def _swatch(color: str) -> Text:
    r, g, b = to_rgb(color)
    return Text("    ", style=f"on rgb({r},{g},{b})")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="color-json-editor",
        help="Edit hex colors inside JSON files without reformatting them.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    palette_app = typer.Typer(help="Manage the user palette (favorites).", no_args_is_help=True)
    app.add_typer(palette_app, name="palette")
    console = Console()

    PaletteOption = Annotated[
        Optional[Path],
        typer.Option("--palette", "-p", help="Palette file (default: per-user palette)"),
    ]
    OutputOption = Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the result here instead of in place"),
    ]

    def fail(message: str) -> typer.Exit:
        console.print(f"[red]Error:[/] {escape(message)}")
        return typer.Exit(1)

    def open_document(path: Path) -> ColorDocument:
        try:
            return ColorDocument.load(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise fail(f"Failed to open {path}: {exc}")

    def resolve_entry(doc: ColorDocument, ref: str) -> int:
        """Entry by exact name first, then by position."""
        entry = doc.index.find(ref)
        if entry is not None:
            return doc.index.position_of(entry)
        if ref.isascii() and ref.isdigit() and int(ref) < len(doc.index):
            return int(ref)
        raise fail(f"No color entry named or numbered {ref!r} in {doc.title}")

    def open_palette(path: Optional[Path]) -> tuple[UserPalette, Path]:
        palette_path = path or default_palette_path()
        logger.debug("Using palette file %s", palette_path)
        palette = UserPalette()
        if palette_path.exists():
            try:
                palette.load(palette_path)
            except (OSError, UnicodeDecodeError, ColorJsonError) as exc:
                raise fail(f"Failed to load user palette {palette_path}: {exc}")
        return palette, palette_path

    def save_palette(palette: UserPalette, path: Path) -> None:
        try:
            palette.save(path)
        except OSError as exc:
            raise fail(f"Failed to save user palette: {exc}")

    def write_result(doc: ColorDocument, position: int, old: str, output: Optional[Path]) -> None:
        entry = doc.index[position]
        if entry.color == old:
            console.print(f"[dim]{escape(entry.name)} is already {entry.color}[/]")
            if output is None:
                return
        try:
            saved = doc.save(output)
        except OSError as exc:
            raise fail(f"Failed to save: {exc}")
        console.print(f"[green]{escape(entry.name)}[/]: {old} → {entry.color}  ({saved})")

    @app.callback()
    def main_callback(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Edit hex colors inside JSON files without reformatting them."""
        _setup_logging(verbose)

    @app.command("list")
    def list_entries(
        path: Annotated[Path, typer.Argument(help="JSON file to inspect")],
        search: Annotated[Optional[str], typer.Option("--search", "-s", help="Filter by name or hex")] = None,
    ) -> None:
        """List color entries found in a JSON file."""
        doc = open_document(path)
        entries = doc.index.filter(search or "")

        table = Table(title=doc.title)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("Hex")
        table.add_column("")
        for entry in entries:
            position = doc.index.position_of(entry)
            table.add_row(str(position), escape(entry.name), entry.color, _swatch(entry.color))
        console.print(table)
        console.print(f"{len(entries)}/{len(doc.index)} entries")

    @app.command("set")
    def set_color(
        path: Annotated[Path, typer.Argument(help="JSON file to edit")],
        entry: Annotated[str, typer.Argument(help="Entry name or number")],
        color: Annotated[str, typer.Argument(help="New color, #RRGGBB or #RRGGBBAA")],
        exact: Annotated[bool, typer.Option("--exact", "-x", help="Write the color as given, skip alpha merge")] = False,
        output: OutputOption = None,
    ) -> None:
        """Set an entry's color (keeps the entry's alpha unless --exact)."""
        doc = open_document(path)
        position = resolve_entry(doc, entry)
        old = doc.index[position].color
        try:
            if exact:
                doc.index.apply_color(position, color)
            else:
                doc.index.apply_merged(position, color)
        except ColorJsonError as exc:
            raise fail(str(exc))
        write_result(doc, position, old, output)

    @app.command()
    def pick(
        path: Annotated[Path, typer.Argument(help="JSON file to edit")],
        entry: Annotated[str, typer.Argument(help="Entry name or number")],
        red: Annotated[int, typer.Argument(min=0, max=255)],
        green: Annotated[int, typer.Argument(min=0, max=255)],
        blue: Annotated[int, typer.Argument(min=0, max=255)],
        output: OutputOption = None,
    ) -> None:
        """Set an entry from RGB components, keeping its alpha."""
        doc = open_document(path)
        position = resolve_entry(doc, entry)
        old = doc.index[position].color
        doc.index.apply_picked_rgb(position, red, green, blue)
        write_result(doc, position, old, output)

    @app.command()
    def drop(
        path: Annotated[Path, typer.Argument(help="JSON file to edit")],
        entry: Annotated[str, typer.Argument(help="Entry name or number")],
        favorite: Annotated[int, typer.Argument(help="Palette color number", min=0)],
        palette: PaletteOption = None,
        output: OutputOption = None,
    ) -> None:
        """Apply a palette color to an entry, as if dragged onto it."""
        user_palette, palette_path = open_palette(palette)
        if favorite >= len(user_palette):
            raise fail(f"No palette color number {favorite} in {palette_path}")
        doc = open_document(path)
        position = resolve_entry(doc, entry)
        old = doc.index[position].color
        doc.index.apply_merged(position, user_palette[favorite])
        write_result(doc, position, old, output)

    @palette_app.command("show")
    def palette_show(palette: PaletteOption = None) -> None:
        """Show the user palette."""
        user_palette, palette_path = open_palette(palette)
        if len(user_palette) == 0:
            console.print(f"[yellow]Palette is empty[/] ({palette_path})")
            return
        table = Table(title=str(palette_path))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Hex")
        table.add_column("")
        for i, color in enumerate(user_palette):
            table.add_row(str(i), color, _swatch(color))
        console.print(table)

    @palette_app.command("add")
    def palette_add(
        colors: Annotated[list[str], typer.Argument(help="Colors to append")],
        palette: PaletteOption = None,
    ) -> None:
        """Append colors to the user palette."""
        user_palette, palette_path = open_palette(palette)
        try:
            added = [user_palette.add(c) for c in colors]
        except ColorJsonError as exc:
            raise fail(str(exc))
        save_palette(user_palette, palette_path)
        console.print(f"[green]Added[/] {', '.join(added)}")

    @palette_app.command("grab")
    def palette_grab(
        path: Annotated[Path, typer.Argument(help="JSON file")],
        entry: Annotated[str, typer.Argument(help="Entry name or number")],
        palette: PaletteOption = None,
    ) -> None:
        """Add a document entry's color to the user palette."""
        doc = open_document(path)
        color = doc.index[resolve_entry(doc, entry)].color
        user_palette, palette_path = open_palette(palette)
        user_palette.add(color)
        save_palette(user_palette, palette_path)
        console.print(f"[green]Added[/] {color}")

    @palette_app.command("remove")
    def palette_remove(
        number: Annotated[int, typer.Argument(help="Palette color number", min=0)],
        palette: PaletteOption = None,
    ) -> None:
        """Remove a color from the user palette."""
        user_palette, palette_path = open_palette(palette)
        if number >= len(user_palette):
            raise fail(f"No palette color number {number} in {palette_path}")
        removed = user_palette.remove(number)
        save_palette(user_palette, palette_path)
        console.print(f"[green]Removed[/] {removed}")

    @palette_app.command("import")
    def palette_import(
        source: Annotated[Path, typer.Argument(help="Palette file to load")],
        append: Annotated[bool, typer.Option("--append", "-a", help="Append instead of replacing")] = False,
        palette: PaletteOption = None,
    ) -> None:
        """Load colors from another palette file."""
        user_palette, palette_path = open_palette(palette)
        try:
            count = user_palette.load(source, replace=not append)
        except (OSError, UnicodeDecodeError, ColorJsonError) as exc:
            raise fail(f"Failed to load user palette {source}: {exc}")
        save_palette(user_palette, palette_path)
        console.print(f"[green]Loaded {count} colors[/] from {source}")

    @palette_app.command("export")
    def palette_export(
        dest: Annotated[Path, typer.Argument(help="Where to write the palette")],
        palette: PaletteOption = None,
    ) -> None:
        """Save the user palette to another file."""
        user_palette, _ = open_palette(palette)
        save_palette(user_palette, dest)
        console.print(f"[green]Saved user palette[/] → {dest}")

    return app
