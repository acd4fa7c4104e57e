"""CLI entry point for vbump."""

from __future__ import annotations

from pathlib import Path

import click

from .config import (
    CONFIG_FILE,
    BranchesConfig,
    ConfigFile,
    load_config,
    parse_targets,
    resolve_config,
    write_config,
)
from .errors import ConfigExists, MissingBumpKind, VbumpError
from .manifest import get_current_version
from .models import (
    DEFAULT_COMMIT_TEMPLATE,
    DEFAULT_MANIFEST,
    DEFAULT_TAG_PREFIX,
    BumpKind,
    BumpOptions,
    ConfigOverrides,
)
from .workflow import bump


def _bump_kind(major: bool, minor: bool, patch: bool) -> BumpKind:
    """Return the single requested bump kind."""
    chosen = [
        kind
        for kind, flag in (
            (BumpKind.MAJOR, major),
            (BumpKind.MINOR, minor),
            (BumpKind.PATCH, patch),
        )
        if flag
    ]
    if len(chosen) != 1:
        raise MissingBumpKind()
    return chosen[0]


@click.group(invoke_without_command=True)
@click.version_option(package_name="vbump")
@click.option("-M", "--major", is_flag=True, help="Bump major version (x.0.0).")
@click.option("-m", "--minor", is_flag=True, help="Bump minor version (0.x.0).")
@click.option("-p", "--patch", is_flag=True, help="Bump patch version (0.0.x).")
@click.option("--message", default=None, help="Custom commit message.")
@click.option(
    "-s", "--source", default=None, help="Source branch (default: current branch)."
)
@click.option(
    "-t", "--targets", default=None, help="Target branches (comma-separated)."
)
@click.option("--skip-push", is_flag=True, help="Skip pushing changes to remote.")
@click.option("--skip-merge", is_flag=True, help="Skip merging to target branches.")
@click.option(
    "-f",
    "--file",
    "manifest",
    default=None,
    help="Package file path (default: package.json).",
)
@click.option("--dry-run", is_flag=True, help="Preview changes without executing.")
@click.option(
    "--tag/--no-tag", default=None, help="Create a git tag (enabled by default)."
)
@click.option("--tag-prefix", default=None, help="Tag prefix (default: v).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=CONFIG_FILE,
    show_default=True,
    help="Configuration file.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    major: bool,
    minor: bool,
    patch: bool,
    message: str | None,
    source: str | None,
    targets: str | None,
    skip_push: bool,
    skip_merge: bool,
    manifest: str | None,
    dry_run: bool,
    tag: bool | None,
    tag_prefix: str | None,
    config_path: str,
) -> None:
    """Bump the package version and run the git release workflow."""
    ctx.obj = config_path
    if ctx.invoked_subcommand is not None:
        return

    try:
        kind = _bump_kind(major, minor, patch)
        persisted = load_config(config_path).to_overrides()
        overrides = ConfigOverrides(
            source_branch=source,
            target_branches=parse_targets(targets) if targets is not None else None,
            manifest_path=manifest,
            create_tag=tag,
            tag_prefix=tag_prefix,
        )
        config = resolve_config(persisted, overrides)
        options = BumpOptions(
            **config.model_dump(),
            bump_kind=kind,
            dry_run=dry_run,
            skip_push=skip_push,
            skip_merge=skip_merge,
            commit_message=message,
        )
        result = bump(options)
    except VbumpError as exc:
        raise click.ClickException(str(exc)) from exc

    if not dry_run:
        click.echo(
            f"\n🎉 Version successfully bumped from {result.old_version} "
            f"to {result.new_version}"
        )


@cli.command()
@click.option(
    "-f",
    "--file",
    "manifest",
    default=None,
    help="Package file path (default: package.json).",
)
@click.pass_obj
def current(config_path: str, manifest: str | None) -> None:
    """Show the current version."""
    try:
        persisted = load_config(config_path).to_overrides()
        config = resolve_config(persisted, ConfigOverrides(manifest_path=manifest))
        version = get_current_version(config.manifest_path)
    except VbumpError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"📦 Current version: {version}")


cli.add_command(current, name="c")


@cli.command()
@click.pass_obj
def init(config_path: str) -> None:
    """Create a configuration file interactively."""
    if Path(config_path).exists():
        raise click.ClickException(str(ConfigExists(config_path)))

    click.echo("🚀 Initializing vbump configuration...\n")

    source = click.prompt(
        "Source branch (leave empty to use current branch when running)",
        default="",
        show_default=False,
    ).strip()
    targets = click.prompt(
        "Target branches (comma-separated, leave empty for none)",
        default="",
        show_default=False,
    ).strip()
    template = click.prompt(
        "Commit message template (use {version} as placeholder)",
        default=DEFAULT_COMMIT_TEMPLATE,
    ).strip()
    manifest = click.prompt("Package file path", default=DEFAULT_MANIFEST).strip()
    create_tag = click.confirm("Create git tags?", default=True)
    tag_prefix = click.prompt(
        "Tag prefix", default=DEFAULT_TAG_PREFIX, show_default=True
    ).strip()

    # Only record what differs from the built-in defaults
    config = ConfigFile(
        branches=BranchesConfig(
            source=source or None,
            targets=parse_targets(targets) if targets else [],
        ),
        commit_message_template=(
            template if template and template != DEFAULT_COMMIT_TEMPLATE else None
        ),
        package_file=manifest if manifest and manifest != DEFAULT_MANIFEST else None,
        create_tag=None if create_tag else False,
        tag_prefix=tag_prefix if tag_prefix != DEFAULT_TAG_PREFIX else None,
    )

    try:
        write_config(config_path, config)
    except VbumpError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"\n✓ Configuration file created: {config_path}")
    click.echo("\nConfiguration:")
    click.echo(config.dumps(), nl=False)
    click.echo("\nYou can now run: vbump --major | --minor | --patch")
