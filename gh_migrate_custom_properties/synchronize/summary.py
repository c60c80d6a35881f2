"""Human-readable summary of a property sync run."""

import typer

from gh_migrate_custom_properties.synchronize.results import SyncStatistics


def _format_repository_section(title: str, repositories: list[str]) -> list[str]:
    if not repositories:
        return []
    return ["", f"{title} ({len(repositories)}):", *(f"  - {repository}" for repository in repositories)]


def format_sync_summary(stats: SyncStatistics) -> list[str]:
    """Render the statistics of a run as lines of text, failures in the order they occurred."""
    lines = [
        "",
        "=" * 70,
        "SYNC OPERATION SUMMARY",
        "=" * 70,
        f"Total repositories processed: {stats.total_processed}",
        f"Successfully fetched: {stats.successful_fetch}",
        f"Successfully created: {stats.successful_create}",
    ]
    lines += _format_repository_section("Repositories created after single-select to multi-select conversion", stats.converted)
    lines += _format_repository_section("Repositories that failed during fetch", stats.fetch_failures)
    lines += _format_repository_section("Repositories that failed during create", stats.create_failures)
    if stats.setup_errors:
        lines += ["", "Errors before the sync could start:", *(f"  - {error}" for error in stats.setup_errors)]
    lines.append("=" * 70)
    return lines


def print_sync_summary(stats: SyncStatistics) -> None:
    """Print the summary of a run to stdout."""
    for line in format_sync_summary(stats):
        typer.echo(line)
