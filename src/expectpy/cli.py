from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="expectpy", help="Inspect and document expectpy settings")


@app.command("config")
def show_config(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Settings YAML to load (defaults to $EXPECTPY_CONFIG)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_file: str | None = typer.Option(None, help="Also write debug output to this file"),
):
    """Print the resolved settings as YAML."""
    import yaml

    from expectpy.config import get_config, load_config
    from expectpy.verbose import setup_logger

    if verbose or debug_file:
        setup_logger(Path(debug_file) if debug_file else None, verbose=verbose)

    try:
        if config is not None:
            config_path = Path(config)
            if not config_path.exists():
                typer.echo(f"Error: config file not found: {config}", err=True)
                raise typer.Exit(1)
            resolved = load_config(config_path)
        else:
            resolved = get_config()
    except (ValueError, yaml.YAMLError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(yaml.safe_dump(resolved.model_dump(), sort_keys=False), nl=False)


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/expectpy.schema.json", help="Output path for JSON Schema"
    ),
    doc: str = typer.Option("docs/config.md", help="Output path for settings docs"),
):
    """Generate JSON Schema and docs for the settings YAML format."""
    from expectpy.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    doc_path = Path(doc)
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
