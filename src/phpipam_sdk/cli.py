"""Command-line interface for the phpIPAM SDK."""

from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from .api.session import Session
from .config import SDKConfig, load_config
from .controllers import (
    L2DomainsController,
    SectionsController,
    SubnetsController,
    VLANsController,
)
from .observability.logger import add_context, configure_logging
from .utils.exceptions import PHPIPAMError

app = typer.Typer(
    name="phpipam",
    help="Query a phpIPAM server from the command line",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger(__name__)


class _State:
    config_file: Path | None = None


state = _State()


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="YAML configuration file (default: environment)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Override log level"),
) -> None:
    """phpIPAM command-line client."""
    state.config_file = config_file
    config = _load(config_file)
    configure_logging(
        level=log_level or config.logging.level,
        json_logs=config.logging.format == "json",
        log_file=config.logging.file,
    )
    add_context(command=ctx.invoked_subcommand)


def _load(config_file: Path | None) -> SDKConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Invalid configuration:[/red] {e}")
        raise typer.Exit(code=1) from e


def _open_session() -> Session:
    config = _load(state.config_file)
    if config.phpipam is None:
        console.print("[red]ERROR: No phpIPAM connection configured.[/red]")
        console.print("(Set PHPIPAM_APP_ID/USER_NAME/PASSWORD env vars or provide --config)")
        raise typer.Exit(code=1)
    return Session(config.phpipam)


@app.command()
def sections() -> None:
    """List all sections."""
    try:
        with _open_session() as session:
            results = SectionsController(session).list_sections()
    except PHPIPAMError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title="Sections")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Parent", justify="right")
    table.add_column("Description")
    for section in results:
        table.add_row(
            str(section.id),
            section.name,
            str(section.master_section or ""),
            section.description,
        )
    console.print(table)


@app.command()
def subnets(
    cidr: str = typer.Argument(..., help="Subnet in CIDR notation, e.g. 10.10.1.0/24"),
    section_id: int | None = typer.Option(None, "--section", "-s", help="Restrict to section ID"),
) -> None:
    """Search subnets by CIDR."""
    try:
        with _open_session() as session:
            controller = SubnetsController(session)
            if section_id is None:
                results = controller.get_subnets_by_cidr(cidr)
            else:
                results = controller.get_subnets_by_cidr_and_section(cidr, section_id)
    except PHPIPAMError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title=f"Subnets matching {cidr}")
    table.add_column("ID", justify="right")
    table.add_column("Subnet")
    table.add_column("Section", justify="right")
    table.add_column("VLAN", justify="right")
    table.add_column("Description")
    for subnet in results:
        table.add_row(
            str(subnet.id),
            f"{subnet.subnet_address}/{subnet.mask}",
            str(subnet.section_id),
            str(subnet.vlan_id or ""),
            subnet.description,
        )
    console.print(table)


@app.command("first-free")
def first_free(
    subnet_id: int = typer.Argument(..., help="Subnet ID"),
) -> None:
    """Print the first free address in a subnet."""
    try:
        with _open_session() as session:
            address = SubnetsController(session).get_first_free_address(subnet_id)
    except PHPIPAMError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if not address:
        console.print(f"[yellow]Subnet {subnet_id} has no free addresses[/yellow]")
        raise typer.Exit(code=1)
    console.print(address)


@app.command()
def vlans(
    number: int = typer.Argument(..., help="VLAN number"),
    domain_id: int | None = typer.Option(None, "--domain", "-d", help="Restrict to L2 domain ID"),
) -> None:
    """Search VLANs by number."""
    try:
        with _open_session() as session:
            controller = VLANsController(session)
            if domain_id is None:
                results = controller.get_vlans_by_number(number)
            else:
                results = controller.get_vlans_by_number_and_domain_id(number, domain_id)
    except PHPIPAMError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title=f"VLAN {number}")
    table.add_column("ID", justify="right")
    table.add_column("Number", justify="right")
    table.add_column("Name")
    table.add_column("Domain", justify="right")
    table.add_column("Description")
    for vlan in results:
        table.add_row(
            str(vlan.id), str(vlan.number), vlan.name, str(vlan.domain_id), vlan.description
        )
    console.print(table)


@app.command()
def l2domains() -> None:
    """List all L2 domains."""
    try:
        with _open_session() as session:
            results = L2DomainsController(session).list_l2domains()
    except PHPIPAMError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title="L2 domains")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Sections")
    table.add_column("Description")
    for domain in results:
        table.add_row(str(domain.id), domain.name, domain.sections, domain.description)
    console.print(table)


if __name__ == "__main__":
    app()
