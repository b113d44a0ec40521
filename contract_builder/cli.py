"""
Contract Builder CLI.

Lists the module catalog and networks, composes contract sources and runs
deployments through the step-by-step orchestrator.
"""

import asyncio
from pathlib import Path
from typing import Optional

import orjson
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .assembler import compose, resolve_selection
from .authoring import HttpCompletionService
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .deployment.models import DEPLOYMENT_STEPS, DeploymentSession, StepStatus
from .deployment.orchestrator import DeploymentOrchestrator
from .deployment.simulated import simulated_collaborators
from .deployment.toolchain import MxpyCompiler
from .errors import ComponentNotFoundError, ConfigurationError, GenerationError
from .logging.config import configure_logging
from .networks.profiles import NetworkConfigResolver
from .registry.catalog import default_registry

app = typer.Typer(
    name="contract-builder",
    help="Compose MultiversX smart contracts from modules and deploy them step by step",
    no_args_is_help=True,
)

console = Console(stderr=True)

STATUS_MARKS = {
    StepStatus.PENDING: "[dim]·[/dim]",
    StepStatus.CURRENT: "[cyan]…[/cyan]",
    StepStatus.COMPLETED: "[green]✓[/green]",
    StepStatus.ERROR: "[red]✗[/red]",
}


def _config(ctx: typer.Context) -> DefaultConfig:
    return ctx.obj["config"]


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to configuration YAML file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override logging level"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON"),
) -> None:
    """Load configuration and set up logging."""
    overrides: dict = {"logging": {}}
    if log_level:
        overrides["logging"]["level"] = log_level.upper()
    if json_logs:
        overrides["logging"]["format_json"] = True

    try:
        loaded = ConfigLoader.create(config_file=config).load(overrides)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    configure_logging(
        level=loaded.logging.level,
        format_json=loaded.logging.format_json,
        include_timestamp=loaded.logging.include_timestamp,
        include_caller=loaded.logging.include_caller,
    )
    ctx.obj = {"config": loaded}


@app.command()
def modules() -> None:
    """List the available contract modules."""
    table = Table(title="Contract Modules")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description")

    for module in default_registry().list():
        table.add_row(module.id, module.name, module.description)

    Console().print(table)


@app.command()
def networks() -> None:
    """List the supported deployment networks."""
    table = Table(title="Networks")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Chain ID")
    table.add_column("API")
    table.add_column("Explorer")

    for profile in NetworkConfigResolver().profiles():
        table.add_row(profile.key, profile.display_name, profile.chain_id,
                      profile.api_url, profile.explorer_url)

    Console().print(table)


@app.command("compose")
def compose_command(
    module_ids: Optional[list[str]] = typer.Argument(None, help="Module ids in the desired order"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the source to this file"),
) -> None:
    """Print the contract composed from the given modules."""
    try:
        selection = resolve_selection(default_registry(), module_ids or [])
    except ComponentNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    assembled = compose(selection)

    if output:
        output.write_text(assembled.generated_source + "\n")
        console.print(f"[green]✓[/green] Contract written to {output}")
    else:
        typer.echo(assembled.generated_source)


@app.command()
def deploy(
    ctx: typer.Context,
    network: Optional[str] = typer.Option(None, "--network", "-n", help="devnet, testnet or mainnet"),
    module_ids: Optional[list[str]] = typer.Option(None, "--module", "-m", help="Module id; repeat in order"),
    source: Optional[Path] = typer.Option(None, "--source", "-s", help="Contract source file"),
    toolchain: bool = typer.Option(False, "--toolchain", help="Compile with the local mxpy toolchain"),
) -> None:
    """Deploy a composed contract or a source file."""
    config = _config(ctx)
    network_key = network or config.deployment.default_network

    if source and module_ids:
        console.print("[bold red]Error:[/bold red] use either --source or --module, not both")
        raise typer.Exit(2)

    if source:
        try:
            contract_source = source.read_text()
        except OSError as e:
            console.print(f"[bold red]Error:[/bold red] cannot read {source}: {escape(str(e))}")
            raise typer.Exit(2)
    else:
        try:
            selection = resolve_selection(default_registry(), module_ids or [])
        except ComponentNotFoundError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            raise typer.Exit(1)
        contract_source = compose(selection).generated_source if selection else ""

    wallet, compiler, submitter, verifier = simulated_collaborators(config.simulation)
    if toolchain:
        compiler = MxpyCompiler(config.toolchain)

    orchestrator = DeploymentOrchestrator(wallet, compiler, submitter, verifier)
    orchestrator.subscribe(_StepPrinter())

    result = asyncio.run(orchestrator.deploy(contract_source, network_key))

    typer.echo(orjson.dumps(result.to_dict(), option=orjson.OPT_INDENT_2).decode())
    if not result.success:
        raise typer.Exit(1)


@app.command()
def generate(
    ctx: typer.Context,
    prompt: str = typer.Argument(..., help="Description of the contract to generate"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the source to this file"),
) -> None:
    """Generate a contract from a natural-language description."""
    service = HttpCompletionService(_config(ctx).completion)

    try:
        contract = asyncio.run(service.generate(prompt))
    except GenerationError as e:
        console.print(f"[bold red]Generation failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if output:
        output.write_text(contract + "\n")
        console.print(f"[green]✓[/green] Contract written to {output}")
    else:
        typer.echo(contract)


class _StepPrinter:
    """Session listener that prints each step status change."""

    def __init__(self):
        self.last: Optional[DeploymentSession] = None

    def __call__(self, session: DeploymentSession) -> None:
        for step in DEPLOYMENT_STEPS:
            status = session.step_statuses[step.id]
            previous = self.last.step_statuses[step.id] if self.last else StepStatus.PENDING
            if status != previous and status != StepStatus.PENDING:
                console.print(f"{STATUS_MARKS[status]} {step.title}")

        if session.error_message and (self.last is None or not self.last.error_message):
            console.print(f"[bold red]Deployment failed:[/bold red] {escape(session.error_message)}")
        elif session.result and (self.last is None or self.last.result is None):
            console.print(f"[bold green]Deployed:[/bold green] {session.result.explorer_url}")

        self.last = session


if __name__ == "__main__":
    app()
