import logging
import traceback
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from gce2retrofit.codegen.codegen import Codegen
from gce2retrofit.config import CliSettings, DocumentConfig, get_config

console = Console()
app = typer.Typer(
    name='gce2retrofit',
    help='Generate Retrofit interfaces and models from API discovery documents',
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _run(document_config: DocumentConfig) -> list[str]:
    with Progress(
        SpinnerColumn(),
        TextColumn('[progress.description]{task.description}'),
        console=console,
    ) as progress:
        task = progress.add_task(
            f'Generating code for {document_config.source} in {document_config.output}...',
            total=None,
        )
        locations = Codegen(document_config).generate()
        progress.update(
            task, description=f'Code generation completed for {document_config.source}!'
        )

    console.print(
        f'[green]Successfully generated code[/green] ({len(locations)} files) '
        f'in {document_config.output}'
    )
    return locations


@app.command()
def generate(
    source: Annotated[
        str, typer.Argument(help='Path or URL of the discovery document')
    ],
    output_dir: Annotated[
        Path, typer.Argument(help='Directory the Java sources are written to')
    ],
    class_map: Annotated[
        str | None,
        typer.Option(
            '--classmap',
            help='Map fields to classes. Format: field_name\\tclass_name',
        ),
    ] = None,
    methods: Annotated[
        str | None,
        typer.Option(
            '--methods',
            help='Methods to generate, either sync or async. Default is to generate both.',
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate Java models and Retrofit interfaces from a discovery document.

    Examples:
        gce2retrofit generate compute.json ./src/main/java
        gce2retrofit generate compute.json ./out --methods sync,async
        gce2retrofit generate compute.json ./out --classmap classes.tsv
    """
    _configure_logging(verbose)
    settings = CliSettings()

    try:
        document_config = DocumentConfig(
            source=source,
            output=str(output_dir),
            class_map=class_map or settings.class_map,
            methods=methods if methods is not None else settings.methods,
        )
        _run(document_config)
    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def batch(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate code for every document listed in a configuration file.

    If no config file is specified, gce2retrofit.yaml / gce2retrofit.yml /
    gce2retrofit.json in the current directory or [tool.gce2retrofit] in
    pyproject.toml is used.

    Examples:
        gce2retrofit batch
        gce2retrofit batch --config apis.yaml
    """
    _configure_logging(verbose)

    try:
        codegen_config = get_config(config)
        for document_config in codegen_config.documents:
            _run(document_config)
    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of gce2retrofit."""
    from gce2retrofit import __version__

    console.print(f'gce2retrofit version: {__version__}')


if __name__ == '__main__':
    app()
