"""Command-line interface for RoleGate.

This module provides CLI commands for inspecting roles and checking
permissions against the built-in role registry.
"""

import json
import sys
from typing import NoReturn

import click

from rolegate.application.services.role_registry import RoleRegistry
from rolegate.core.config import Settings, get_settings
from rolegate.core.exceptions import RoleNotFoundError
from rolegate.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_registry(settings: Settings) -> RoleRegistry:
    """Build the registry the commands operate on."""
    if settings.seed_builtin_roles:
        return RoleRegistry.with_builtin_roles()
    return RoleRegistry()


@click.group()
@click.version_option(version="0.1.0", prog_name="RoleGate")
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug mode",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides configuration)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_level: str | None) -> None:
    """RoleGate - role-based permission resolution.

    Roles compose permission strings from parent roles and answer
    membership queries with hierarchical wildcard matching.
    """
    settings = get_settings()
    overrides: dict[str, object] = {}
    if debug:
        overrides["debug"] = True
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings)
    ctx.meta["settings"] = settings
    ctx.obj = build_registry(settings)


@cli.command()
@click.pass_obj
def roles(registry: RoleRegistry) -> None:
    """List registered roles."""
    for role in registry:
        click.echo(f"{role.name:<12} {role.slug:<12} {role.kind.value:<9} {role.boost}")


@cli.command()
@click.argument("name")
@click.pass_obj
def show(registry: RoleRegistry, name: str) -> None:
    """Show a role's permissions as JSON."""
    try:
        role = registry.require(name)
    except RoleNotFoundError as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps(role.to_dict(), indent=2))


@cli.command()
@click.argument("name")
@click.argument("permission")
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Only consider permissions declared on the role itself",
)
@click.pass_obj
def check(registry: RoleRegistry, name: str, permission: str, raw: bool) -> None:
    """Check whether role NAME grants PERMISSION.

    Exits with status 0 when granted and 2 when denied.
    """
    try:
        if raw:
            granted = registry.require(name).has_in_raw(permission)
        else:
            granted = registry.check(name, permission)
    except RoleNotFoundError as e:
        raise click.ClickException(str(e)) from e

    click.echo("granted" if granted else "denied")
    if not granted:
        sys.exit(2)


@cli.command()
@click.argument("permission")
@click.pass_obj
def describe(registry: RoleRegistry, permission: str) -> None:
    """Describe a permission from the catalogue."""
    description = registry.describe(permission)
    if description is None:
        raise click.ClickException(f"Unknown permission '{permission}'")

    click.echo(description)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display RoleGate configuration."""
    settings = ctx.meta["settings"]

    click.echo(f"""
RoleGate v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  Seed Roles:   {settings.seed_builtin_roles}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `rolegate` command is run
    or when using `python -m rolegate`.
    """
    cli()


if __name__ == "__main__":
    main()
