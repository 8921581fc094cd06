"""authcore CLI application using Typer.

Command-line utilities for deploying and operating the service.
"""

import secrets

import typer
import uvicorn
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from authcore.services import PasswordHashingService
from authcore_config.settings import Settings, get_settings

app = typer.Typer(
    name="authcore",
    help="authcore - account registration and authentication CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate the JWT signing secret.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]authcore Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secret for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}", soft_wrap=True)

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep this secret secure and never commit it "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above value to your config/.env or "
        "config/.env.dev file.[/dim]\n"
    )


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        console.print(
            "[dim]Run 'authcore secrets generate' and set JWT_SECRET_KEY.[/dim]"
        )
        raise typer.Exit(code=1) from e


@app.command("hash-info")
def hash_info() -> None:
    """Show the Argon2 parameters new password hashes are created with."""
    params = _load_settings().hash_parameters()

    table = Table(title="Argon2 parameters")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("variant", "argon2i")
    table.add_row("version", str(PasswordHashingService.VERSION))
    table.add_row("memory (KiB)", str(params.memory_cost_kib))
    table.add_row("iterations", str(params.time_cost))
    table.add_row("parallelism", str(params.parallelism))
    table.add_row("hash length (bytes)", str(params.hash_length))
    console.print(table)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = _load_settings()
    uvicorn.run(
        "authcore.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
