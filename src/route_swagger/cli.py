"""CLI entry point for route-swagger."""

import logging
from pathlib import Path

import click

from route_swagger.config import SwaggerConfig, default_config_yaml, load_config
from route_swagger.errors import RouteSwaggerError
from route_swagger.formatter import format_document
from route_swagger.generator import Generator
from route_swagger.routes.manifest import load_manifest
from route_swagger.storage import LocalStorage


def _output_file(config: SwaggerConfig, output: Path | None, fmt: str, storage: LocalStorage) -> Path | None:
    """Resolve where to write the document, None meaning stdout."""
    if output is not None:
        return output
    if config.output != "file":
        return None

    path = config.path
    if not storage.exists(path):
        click.echo(f"Configured path [{path}] does not exist, creating now.")
        if storage.make_directory(path):
            click.echo("The path was created successfully.")
        else:
            raise click.ClickException(f"The path [{path}] could not be created.")
    return Path(path) / f"{config.file_name}.{fmt}"


@click.group()
def main():
    """route-swagger: generate Swagger 2.0 docs from registered routes."""
    pass


@main.command()
@click.argument("manifest_path", type=click.Path(exists=True, path_type=Path))
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML configuration file.")
@click.option("--format", "fmt", default=None, type=click.Choice(["json", "yaml"]), help="Output format, defaults to the configured file_type.")
@click.option("-f", "--filters", multiple=True, help="Route prefix to document, such as /api or /v2/api. Repeatable.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="File to write the document to, defaults to stdout.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def generate(manifest_path: Path, config_path: Path | None, fmt: str | None, filters: tuple[str, ...], output: Path | None, verbose: bool):
    """Generate a Swagger document from a route manifest."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = load_config(config_path)
        manifest = load_manifest(manifest_path)
        fmt = fmt or config.file_type

        docs = Generator(
            config,
            manifest,
            list(filters) if filters else None,
            scope_registry=manifest,
        ).generate()
        formatted = format_document(docs, fmt)
    except RouteSwaggerError as e:
        raise click.ClickException(str(e)) from e

    storage = LocalStorage(Path.cwd())
    file_path = _output_file(config, output, fmt, storage)
    if file_path is None:
        click.echo(formatted)
        return

    click.echo("Writing generated data to file")
    written = storage.write(file_path, formatted)
    click.echo(f"Swagger document saved to {written}")


@main.command()
@click.option("-o", "--output", default=Path("swagger.yaml"), type=click.Path(path_type=Path), help="Where to write the configuration file.")
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
def init_config(output: Path, force: bool):
    """Write the default configuration to a YAML file."""
    if output.exists() and not force:
        raise click.ClickException(f"{output} already exists, use --force to overwrite.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(default_config_yaml(), encoding="utf-8")
    click.echo(f"Configuration written to {output}")
