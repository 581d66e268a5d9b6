#!/usr/bin/env python3
"""
Serverless Log Forwarding - resource generator

Reads a serverless.yml, adds the CloudWatch Logs subscription filters and
Lambda permission that forward every function's logs to one destination,
and prints the resulting resources block.

Usage:
    uv run sls-log-forwarding serverless.yml --stage prod
"""

import sys
from pathlib import Path

import click
import questionary
from rich.panel import Panel

from .forwarding import LogForwardingError, LogForwardingPlugin
from .forwarding.utils.console import console, dim, error, success, warning
from .forwarding.utils.service_file import load_service_file, render_resources


def confirm_overwrite(path: Path) -> bool:
    """Ask before replacing an existing output file."""
    answer = questionary.confirm(f"{path} already exists. Overwrite?", default=False).ask()
    # ask() returns None when the prompt is interrupted
    return bool(answer)


@click.command()
@click.argument(
    "service_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default="serverless.yml",
)
@click.option("--stage", "-s", help="Stage to package (defaults to provider.stage).")
@click.option("--region", "-r", help="Region to deploy to (defaults to provider.region).")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the resources block to this file instead of stdout.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
)
@click.option("--yes", "-y", is_flag=True, help="Overwrite the output file without asking.")
def main(
    service_file: Path,
    stage: str | None,
    region: str | None,
    output: Path | None,
    output_format: str,
    yes: bool,
) -> None:
    """Generate log forwarding resources for SERVICE_FILE."""
    console.print(
        Panel.fit(
            "[bold blue]Serverless Log Forwarding[/bold blue]\n"
            f"[dim]{service_file}[/dim]",
            border_style="blue",
        )
    )

    try:
        service = load_service_file(service_file)
        plugin = LogForwardingPlugin(service, {"stage": stage, "region": region})
        created = plugin.run_hook("package:initialize")
    except LogForwardingError as e:
        error(f"Error: {e}")
        sys.exit(1)

    if not created:
        # Stage excluded, nothing to write
        sys.exit(0)

    dim(f"{len(created)} resource(s) for {service.service or service_file} ({plugin.stage})")

    rendered = render_resources(service.resources or {}, output_format)
    if output is None:
        click.echo(rendered, nl=False)
        return

    if output.exists() and not yes and not confirm_overwrite(output):
        warning("Output not written.")
        sys.exit(0)

    output.write_text(rendered, encoding="utf-8")
    success(f"Wrote {output}")


if __name__ == "__main__":
    main()
