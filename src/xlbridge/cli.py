"""Typer CLI application: catalogue discovery plus a few file-level commands."""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

import xlbridge
from xlbridge import router
from xlbridge.config import configure, get_config
from xlbridge.contracts.common import Target
from xlbridge.contracts.results import Err
from xlbridge.engine.defaults import PROPERTY_DEFAULTS
from xlbridge.engine.dispatcher import (
    envelope_for,
    error_envelope,
    exit_code_for,
    print_response,
    success_envelope,
)
from xlbridge.engine.operation import OPERATIONS
from xlbridge.io.fileops import fingerprint
from xlbridge.observe.events import Timer, tracer

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

_MAIN_HELP = """\
Handle-based spreadsheet operations with normalized results.

**Every command** returns a JSON `ResponseEnvelope`:
`{"ok": bool, "command": "...", "result": ..., "errors": [...], "warnings": [...], "metrics": {"duration_ms": N}}`

Discover the surface with `xlbridge groups`, `xlbridge ops --group fonts` and
`xlbridge describe get_font_size`. Drive it programmatically with `xlbridge serve --stdio`.
"""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(xlbridge.__version__)
        raise typer.Exit()


app = typer.Typer(
    name="xlbridge",
    help=_MAIN_HELP,
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@app.callback(invoke_without_command=True)
def main_callback(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Print version and exit.", is_eager=True)
    ] = False,
) -> None:
    if version:
        _version_callback(True)


# Type aliases for common options
FilePath = Annotated[str, typer.Option("--file", "-f", help="Path to .xlsx/.xlsm workbook file")]
SheetOpt = Annotated[str, typer.Option("--sheet", "-s", help="Sheet name")]
OutPath = Annotated[str, typer.Option("--out", "-o", help="Output path")]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _emit(envelope, code=None):
    print_response(envelope)
    raise typer.Exit(code if code is not None else exit_code_for(envelope))


def _open_or_emit(file: str, cmd: str):
    """Read a workbook into a handle, or emit the error envelope."""
    result = xlbridge.read(file)
    if isinstance(result, Err):
        _emit(envelope_for(cmd, result, target=Target(file=file)))
    return result.value


def _describe(name: str) -> dict[str, Any]:
    fn = router.resolve(name)
    spec = OPERATIONS[router.canonical(name)]
    params = [
        {
            "name": p.name,
            "annotation": p.annotation if isinstance(p.annotation, str) else getattr(p.annotation, "__name__", str(p.annotation)),
            "default": None if p.default is inspect.Parameter.empty else repr(p.default),
            "required": p.default is inspect.Parameter.empty,
        }
        for p in inspect.signature(fn).parameters.values()
    ]
    info = spec.model_dump(mode="json")
    info["parameters"] = params
    info["doc"] = inspect.getdoc(fn) or ""
    default = PROPERTY_DEFAULTS.get(spec.name)
    info["default_policy"] = default.model_dump(mode="json") if default else None
    info["aliases"] = [alias for alias, target in router.ALIASES.items() if target == spec.name]
    return info


# ---------------------------------------------------------------------------
# xlbridge version
# ---------------------------------------------------------------------------
@app.command()
def version():
    """Print the xlbridge version.

    Example: `xlbridge version`
    """
    env = success_envelope("version", {"version": xlbridge.__version__})
    _emit(env)


# ---------------------------------------------------------------------------
# xlbridge groups / ops / describe / defaults
# ---------------------------------------------------------------------------
@app.command("groups")
def groups_cmd():
    """List domain groups with their operation counts.

    Example: `xlbridge groups`
    """
    result = [
        {"name": g.name, "module": g.module, "count": len(g.operations)}
        for g in router.groups()
    ]
    _emit(success_envelope("groups", result))


@app.command("ops")
def ops_cmd(
    group: Annotated[Optional[str], typer.Option("--group", "-g", help="Only list this group")] = None,
):
    """List routed operations and their calling convention.

    Example: `xlbridge ops --group tables`
    """
    try:
        names = router.operations(group)
    except KeyError:
        _emit(error_envelope("ops", "ERR_GROUP_NOT_FOUND", f"Unknown group: {group}"))
        return
    router.load_all()
    result = [
        {"name": n, "group": router.ROUTES[n], "convention": OPERATIONS[n].convention.value}
        for n in names
    ]
    _emit(success_envelope("ops", result))


@app.command("describe")
def describe_cmd(
    operation: Annotated[str, typer.Argument(help="Operation name (aliases accepted)")],
):
    """Show an operation's convention, parameters and default-value policy.

    Example: `xlbridge describe get_row_height`
    """
    if operation not in router.ROUTES and operation not in router.ALIASES:
        _emit(error_envelope("describe", "ERR_OPERATION_NOT_FOUND", f"Unknown operation: {operation}"))
        return
    _emit(success_envelope("describe", _describe(operation)))


@app.command("defaults")
def defaults_cmd():
    """List getters whose unset result is replaced by a documented default.

    Example: `xlbridge defaults`
    """
    result = [entry.model_dump(mode="json") for entry in PROPERTY_DEFAULTS.values()]
    _emit(success_envelope("defaults", result))


# ---------------------------------------------------------------------------
# xlbridge sheets / cell
# ---------------------------------------------------------------------------
@app.command("sheets")
def sheets_cmd(file: FilePath):
    """List sheet names in workbook order.

    Example: `xlbridge sheets -f data.xlsx`
    """
    with Timer() as t:
        book = _open_or_emit(file, "sheets")
        names = xlbridge.get_sheet_names(book)
    _emit(success_envelope("sheets", names, target=Target(file=file), duration_ms=t.elapsed_ms))


@app.command("cell")
def cell_cmd(
    file: FilePath,
    sheet: SheetOpt,
    ref: Annotated[str, typer.Option("--ref", help="Cell address, e.g. B2")],
    formatted: Annotated[bool, typer.Option("--formatted", help="Return the value rendered with its number format")] = False,
):
    """Read one cell value.

    Example: `xlbridge cell -f data.xlsx --sheet Sheet1 --ref B2`
    """
    with Timer() as t:
        book = _open_or_emit(file, "cell")
        getter = xlbridge.get_formatted_value if formatted else xlbridge.get_cell_value
        result = getter(book, sheet, ref)
    env = envelope_for("cell", result, target=Target(file=file, sheet=sheet, ref=ref), duration_ms=t.elapsed_ms)
    _emit(env)


# ---------------------------------------------------------------------------
# xlbridge csv / compress
# ---------------------------------------------------------------------------
@app.command("csv")
def csv_cmd(
    file: FilePath,
    sheet: SheetOpt,
    out: OutPath,
    delimiter: Annotated[Optional[str], typer.Option("--delimiter", help="Field delimiter (default from config)")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="utf8, shift_jis, koi8u, koi8r, iso88598i or gbk")] = None,
    trim: Annotated[bool, typer.Option("--trim", help="Strip surrounding whitespace from values")] = False,
    wrap: Annotated[str, typer.Option("--wrap", help="Character to wrap every value with")] = "",
):
    """Export one sheet to CSV.

    Example: `xlbridge csv -f data.xlsx --sheet Sheet1 --out sheet1.csv --delimiter ";"`
    """
    config = get_config()
    options = {
        "encoding": encoding or config.csv_encoding,
        "delimiter": delimiter or config.csv_delimiter,
        "do_trim": trim,
        "wrap_with_char": wrap,
    }
    with Timer() as t:
        book = _open_or_emit(file, "csv")
        result = xlbridge.write_csv_with_options(book, sheet, out, options)
    env = envelope_for("csv", result, target=Target(file=out, sheet=sheet), duration_ms=t.elapsed_ms)
    _emit(env)


@app.command("compress")
def compress_cmd(
    file: FilePath,
    out: OutPath,
    level: Annotated[Optional[int], typer.Option("--level", "-l", help="Deflate level 0-9 (default from config)")] = None,
):
    """Re-save a workbook with a given compression level.

    Example: `xlbridge compress -f data.xlsx --out small.xlsx --level 9`
    """
    chosen = get_config().default_compression_level if level is None else level
    with Timer() as t:
        book = _open_or_emit(file, "compress")
        result = xlbridge.write_with_compression(book, out, chosen)
    if isinstance(result, Err):
        _emit(envelope_for("compress", result, target=Target(file=out), duration_ms=t.elapsed_ms))
    payload = {"level": chosen, "size": Path(out).stat().st_size, "fingerprint": fingerprint(out)}
    _emit(success_envelope("compress", payload, target=Target(file=out), duration_ms=t.elapsed_ms))


# ---------------------------------------------------------------------------
# xlbridge serve --stdio
# ---------------------------------------------------------------------------
@app.command("serve")
def serve_cmd(
    stdio: Annotated[bool, typer.Option("--stdio", help="Use stdin/stdout for JSON request/response")] = True,
    trace_out: Annotated[Optional[str], typer.Option("--trace-out", help="Record every engine call and write the trace here on exit")] = None,
):
    """Serve every routed operation over JSON lines.

    Each line is a JSON object: `{"id": "1", "op": "new", "args": [], "kwargs": {}}`

    Example: `xlbridge serve --stdio --trace-out trace.json`
    """
    from xlbridge.server.stdio import StdioServer

    if trace_out:
        configure(trace=True)
        tracer().clear()
    try:
        StdioServer().run()
    finally:
        if trace_out:
            tracer().save(trace_out)


# ---------------------------------------------------------------------------
# Entrypoint (for `python -m xlbridge`)
# ---------------------------------------------------------------------------
def main() -> None:
    try:
        app()
    except SystemExit:
        raise
    except Exception as exc:
        # machine consumers get an envelope, never a traceback
        env = error_envelope("unknown", "ERR_INTERNAL", str(exc))
        print_response(env)
        raise SystemExit(90) from exc


if __name__ == "__main__":
    main()
