"""CLI commands for inspecting and checking proxy configuration."""

import json
import os
from collections.abc import Mapping

import click
from rich.console import Console
from rich.table import Table

from text_to_sql_proxy.config.loader import env_var_names, load_config, port_status
from text_to_sql_proxy.config.models import DEFAULT_PORT, ProxyConfig
from text_to_sql_proxy.utils.validation import validate_tls_pair, validate_tls_path

console = Console()


def _source(field: str, env_name: str, env: Mapping[str, str]) -> str:
    if not env.get(env_name):
        return "default"
    if field == "port" and port_status(env)[1]:
        return "default (invalid)"
    return "env"


def _collect_problems(cfg: ProxyConfig, env: Mapping[str, str]) -> list[str]:
    """Return every deployment problem found in the loaded configuration."""
    problems = []
    _, port_error = port_status(env)
    if port_error:
        port_var = env_var_names()["port"]
        problems.append(
            f"{port_var}: {port_error}; port {DEFAULT_PORT} is used instead"
        )

    error = validate_tls_pair(cfg.tls_cert, cfg.tls_key)
    if error:
        problems.append(error)

    if cfg.tls_enabled() and not cfg.tls_files_exist():
        for path, label in ((cfg.tls_cert, "certificate"), (cfg.tls_key, "key")):
            error = validate_tls_path(path, label)
            if error:
                problems.append(error)
    return problems


@click.group()
def config():
    """Inspect the proxy configuration resolved from the environment."""


@config.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def show(as_json):
    """Show the resolved configuration."""
    env = dict(os.environ)
    cfg = load_config(env)

    if as_json:
        data = cfg.model_dump()
        data["tls_enabled"] = cfg.tls_enabled()
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Proxy Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Variable", style="dim")
    table.add_column("Source")

    for field, env_name in env_var_names().items():
        value = getattr(cfg, field)
        table.add_row(
            field,
            str(value) if value != "" else "-",
            env_name,
            _source(field, env_name, env),
        )

    console.print(table)
    tls_state = (
        "[green]enabled[/green]" if cfg.tls_enabled() else "[yellow]disabled[/yellow]"
    )
    console.print(f"TLS: {tls_state}")


@config.command()
def check():
    """Check the configuration before deployment.

    Exits with status 1 if the port variable was rejected, only half of the
    TLS pair is set, or a configured TLS file is missing.
    """
    env = dict(os.environ)
    cfg = load_config(env)
    problems = _collect_problems(cfg, env)

    if problems:
        console.print(f"[red]Found {len(problems)} configuration problem(s):[/red]")
        for problem in problems:
            console.print(f"  - {problem}", markup=False)
        raise SystemExit(1)

    scheme = "https" if cfg.tls_enabled() else "http"
    console.print(f"[green]Configuration OK[/green] ({scheme} on port {cfg.port})")
