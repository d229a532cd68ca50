import logging
import traceback
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from apistub import __version__
from apistub.codegen.codegen import Codegen
from apistub.config import get_config

console = Console()
app = typer.Typer(
    name='apistub',
    help='Generate TypeScript models and API classes from OpenAPI documents',
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f'apistub version: {__version__}')
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            '--version',
            '-v',
            help='Show the version of apistub and exit.',
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option('--verbose', help='Log debug output.')
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def get(
    source: Annotated[str, typer.Argument(help='URL or path of the OpenAPI document.')],
    directory: Annotated[
        str | None,
        typer.Option(
            '--dir', '-d', help='Directory to save the generated code to [default: ./]'
        ),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
) -> None:
    """Generate TypeScript code from an OpenAPI document.

    Examples:
        apistub get https://petstore3.swagger.io/api/v3/openapi.json
        apistub get ./openapi.json --dir ./src/api
    """
    try:
        document_config = get_config(config)
        document_config = document_config.model_copy(
            update={'source': source, 'output': directory or document_config.output}
        )

        with Progress(
            SpinnerColumn(),
            TextColumn('[progress.description]{task.description}'),
            console=console,
        ) as progress:
            task = progress.add_task(
                f'Generating code for {source} in {document_config.output}...',
                total=None,
            )
            generated_files = Codegen(document_config).generate()
            progress.update(
                task, description=f'Code generation completed for {source}!'
            )

        console.print('[dim]Generated files:[/dim]')
        for path in generated_files:
            console.print(f'  - {path}')

    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        traceback.print_exc()
        raise typer.Exit(1)


if __name__ == '__main__':
    app()
