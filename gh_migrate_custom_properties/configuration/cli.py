"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer import Option
from typing_extensions import Annotated

from gh_migrate_custom_properties.configuration.env import Settings
from gh_migrate_custom_properties.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from gh_migrate_custom_properties.configuration.models import ClientConfig, SyncPropertiesConfig
from gh_migrate_custom_properties.github.exceptions import GitHubRequestError, GraphQLQueryError
from gh_migrate_custom_properties.synchronize.driver import run_sync_properties_workflow
from gh_migrate_custom_properties.synchronize.summary import print_sync_summary

load_dotenv()

typer_app = typer.Typer(
    pretty_exceptions_show_locals=False,
    help="Migrate repository custom property values from one organization to another.",
)


def configure_logging(debug: bool) -> None:
    """Configure structlog to emit events at INFO, or DEBUG when debugging."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO))


@typer_app.command(name="sync")
def sync_properties_cli(
    target_organization: Annotated[
        str, Option("--target-organization", "-t", envvar="GHMC_TARGET_ORGANIZATION", help="Target organization to sync properties to.")
    ],
    source_token: Annotated[
        str,
        Option("--source-token", "-a", envvar="GHMC_SOURCE_TOKEN", help="Source organization GitHub token. Scopes: read:org, read:user, user:email"),
    ],
    target_token: Annotated[
        str, Option("--target-token", "-b", envvar="GHMC_TARGET_TOKEN", help="Target organization GitHub token. Scopes: admin:org")
    ],
    repository_list: Annotated[
        Path,
        Option(
            "--repository-list",
            "-r",
            envvar="GHMC_REPOSITORY_LIST",
            help="File listing the repositories to sync properties from, one per line (owner/repo or repository URL).",
        ),
    ],
    source_hostname: Annotated[
        str | None,
        Option("--source-hostname", "-u", envvar="GHMC_SOURCE_HOSTNAME", help="GitHub Enterprise source hostname, e.g. https://github.example.com"),
    ] = None,
    convert_props: Annotated[
        bool,
        Option(
            "--convert-props",
            "-c",
            envvar="GHMC_CONVERT_PROPS",
            help="Convert custom property values to the target format. Currently only single-select to multi-select.",
        ),
    ] = False,
    source_organization: Annotated[
        str | None,
        Option(
            "--source-organization",
            "-s",
            envvar="GHMC_SOURCE_ORGANIZATION",
            help="Owner used for repository list entries that only name a repository.",
        ),
    ] = None,
    debug: Annotated[bool, Option("--debug", envvar="GHMC_DEBUG", help="Enable debug logging.")] = False,
) -> None:
    """Sync repository custom property values from source repositories to like-named target repositories."""
    configure_logging(debug)
    try:
        settings = Settings()
    except ValidationError as exc:
        typer.echo(f"Error: invalid environment configuration: {exc}", err=True)
        raise typer.Exit(1) from exc

    config = SyncPropertiesConfig(
        target_organization=target_organization,
        repository_list=repository_list,
        convert_props=convert_props,
        source_organization=source_organization,
        source=ClientConfig(
            token=source_token,
            hostname=source_hostname,
            app_id=settings.SOURCE_APP_ID,
            private_key=settings.SOURCE_PRIVATE_KEY,
            installation_id=settings.SOURCE_INSTALLATION_ID,
        ),
        target=ClientConfig(
            token=target_token,
            hostname=settings.TARGET_HOSTNAME,
            app_id=settings.TARGET_APP_ID,
            private_key=settings.TARGET_PRIVATE_KEY,
            installation_id=settings.TARGET_INSTALLATION_ID,
        ),
    )

    typer.echo(f"Syncing repository properties from {repository_list} to organization {target_organization}")
    if convert_props:
        typer.echo("Single-select to multi-select conversion is enabled")

    try:
        stats = asyncio.run(run_sync_properties_workflow(config))
    except (GitHubAuthenticationConfigurationUndefinedError, GitHubRequestError, GraphQLQueryError, RuntimeError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc

    print_sync_summary(stats)
    if stats.has_failures:
        raise typer.Exit(1)


if __name__ == "__main__":
    typer_app()
