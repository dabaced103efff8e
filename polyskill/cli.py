"""CLI interface for PolySkill."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from polyskill import __version__

console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"\n[red]{escape(message)}[/]\n")
    sys.exit(1)


def _load_config(ctx: click.Context, registry: str | None = None):
    """Load config once per invocation and configure logging."""
    import yaml

    from polyskill.config import load_config
    from polyskill.utils import setup_logging

    cfg = ctx.obj.get("config") if ctx.obj else None
    if cfg is None:
        config_path = ctx.obj.get("config_path") if ctx.obj else None
        try:
            cfg = load_config(config_path)
        except (yaml.YAMLError, ValueError, OSError) as e:
            _fail(f"Invalid configuration: {e}")
        setup_logging(cfg.logging.level, cfg.logging.format)
        ctx.ensure_object(dict)["config"] = cfg
    if registry:
        cfg.registry.url = registry
    return cfg


@click.group()
@click.version_option(version=__version__, prog_name="polyskill")
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None):
    """PolySkill - build, publish and install AI agent skills."""
    ctx.ensure_object(dict)["config_path"] = config_path


def _validate_name(ctx, param, value: str) -> str:
    from polyskill.scaffold import check_skill_name

    error = check_skill_name(value)
    if error:
        raise click.BadParameter(error)
    return value


def _validate_required(ctx, param, value: str) -> str:
    if not value.strip():
        raise click.BadParameter(f"{param.human_readable_name.capitalize()} is required")
    return value


@cli.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False, path_type=Path))
@click.option("--name", prompt="Skill name (e.g. @yourname/my-skill)", callback=_validate_name,
              help="Scoped skill name")
@click.option("--description", prompt="Description", callback=_validate_required,
              help="Skill description")
@click.option("--author", prompt="Author name", callback=_validate_required,
              help="Author name")
@click.pass_context
def init(ctx: click.Context, directory: Path, name: str, description: str, author: str):
    """Scaffold a new skill project."""
    from polyskill.scaffold import scaffold_skill

    _load_config(ctx)

    try:
        written = scaffold_skill(directory, name, description, author)
    except (ValueError, OSError) as e:
        _fail(str(e))

    console.print("\n[green]Skill scaffolded successfully![/]")
    for path in written:
        console.print(f"  [dim]{escape(str(path))}[/]")
    console.print(
        "\nNext steps:\n"
        "  1. Edit tools.json with your tool definitions\n"
        "  2. Edit instructions.md with your system prompt\n"
        "  3. Run [cyan]polyskill validate[/] to check\n"
        "  4. Run [cyan]polyskill build[/] to generate adapters\n"
    )


@cli.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, directory: Path):
    """Validate a skill project."""
    from polyskill.skills import SkillLoadError, load_skill

    _load_config(ctx)

    try:
        skill = load_skill(directory)
    except SkillLoadError as e:
        _fail(str(e))

    console.print(
        f"\n[green]All checks passed.[/] "
        f"[dim]{escape(skill.name)}@{escape(skill.version)}, {len(skill.tools)} tool(s)[/]\n"
    )


@cli.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False, path_type=Path))
@click.option("--out-dir", "-o", default=None, type=click.Path(file_okay=False, path_type=Path),
              help="Output directory (default: <directory>/dist)")
@click.pass_context
def build(ctx: click.Context, directory: Path, out_dir: Path | None):
    """Build platform-specific adapter outputs."""
    from polyskill.builder import build_skill
    from polyskill.skills import SkillLoadError

    _load_config(ctx)
    console.print("\n[bold]Building skill...[/]")

    try:
        report = build_skill(directory, out_dir)
    except (SkillLoadError, OSError) as e:
        _fail(str(e))

    for platform in report.skipped:
        console.print(f"  [yellow]Skipping unknown adapter: {escape(platform)}[/]")
    for platform, path in report.outputs.items():
        console.print(f"  [green]Built {escape(platform)} → {escape(str(path))}[/]")

    console.print("\n[green]Build complete.[/]\n")


@cli.command()
@click.argument("directory", default=".", type=click.Path(file_okay=False, path_type=Path))
@click.option("--registry", default=None, help="Registry URL")
@click.pass_context
def publish(ctx: click.Context, directory: Path, registry: str | None):
    """Publish a skill to the registry."""
    from polyskill.builder import transpile_skill
    from polyskill.registry import RegistryClient, RegistryError
    from polyskill.skills import SkillLoadError, load_skill

    cfg = _load_config(ctx, registry)

    if not cfg.registry.token:
        _fail("Not authenticated. Set POLYSKILL_TOKEN or registry.token in your config.")

    console.print("\n[bold]Publishing skill...[/]")

    try:
        skill = load_skill(directory)
    except SkillLoadError as e:
        _fail(str(e))

    adapters, _ = transpile_skill(skill)
    client = RegistryClient.from_config(cfg.registry)

    try:
        result = asyncio.run(client.publish(skill, adapters))
    except RegistryError as e:
        if e.status_code == 401:
            _fail("Authentication failed. Check POLYSKILL_TOKEN.")
        if e.status_code == 403:
            console.print(f"\n[red]{escape(e.message)}[/]")
            console.print("[dim]Skill names must match your GitHub username or agent name: @<name>/skill-name[/]\n")
            sys.exit(1)
        console.print(f"\n[red]{escape(e.message)}[/]")
        for detail in e.details:
            console.print(f"[red]  - {escape(detail)}[/]")
        console.print()
        sys.exit(1)

    console.print(f"\n[green]Published {escape(skill.name)}@{escape(skill.version)}[/]")
    console.print(f"[dim]  ID: {escape(str(result.get('id')))}[/]")
    console.print(f"[dim]  Registry: {escape(client.base_url)}[/]")
    console.print(f"\nInstall with: [cyan]polyskill install {escape(skill.name)}[/]\n")


@cli.command()
@click.argument("name")
@click.argument("version", required=False)
@click.option("--registry", default=None, help="Registry URL")
@click.option("--output", "-o", default=".", type=click.Path(file_okay=False, path_type=Path),
              help="Output directory")
@click.pass_context
def install(ctx: click.Context, name: str, version: str | None, registry: str | None, output: Path):
    """Install a skill from the registry."""
    from polyskill.registry import RegistryClient, RegistryError, install_skill

    cfg = _load_config(ctx, registry)
    client = RegistryClient.from_config(cfg.registry)

    label = f"{name}@{version}" if version else name
    console.print(f"\n[bold]Installing {escape(label)}...[/]")

    async def fetch():
        skill = await client.get_skill(name, version)
        await client.track_download(name)
        return skill

    try:
        skill = asyncio.run(fetch())
    except RegistryError as e:
        _fail(e.message)

    try:
        skill_dir = install_skill(skill, output)
    except RegistryError as e:
        _fail(e.message)
    except OSError as e:
        _fail(f"Failed to write skill files: {e}")

    badge = "[green]\\[verified][/]" if skill.verified else "[yellow]\\[unverified][/]"
    console.print(f"\n[green]Installed {escape(skill.name)}@{escape(skill.version)}[/] {badge}")
    if not skill.verified:
        console.print("[yellow]  Warning: This skill has not been verified[/]")
    console.print(f"[dim]  Location: {escape(str(skill_dir))}[/]\n")


@cli.command()
@click.argument("query", required=False)
@click.option("--type", "skill_type", type=click.Choice(["prompt", "tool", "workflow", "composite"]),
              help="Filter by skill type")
@click.option("--verified", is_flag=True, help="Only show verified skills")
@click.option("--author", help="Filter by author name")
@click.option("--keyword", help="Filter by keyword")
@click.option("--category", help="Filter by category (e.g. coding-data, productivity, automation)")
@click.option("--sort", type=click.Choice(["relevance", "downloads", "name", "recent"]),
              help="Sort results")
@click.option("--limit", default=20, show_default=True, help="Max results")
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON")
@click.option("--registry", default=None, help="Registry URL")
@click.pass_context
def search(
    ctx: click.Context,
    query: str | None,
    skill_type: str | None,
    verified: bool,
    author: str | None,
    keyword: str | None,
    category: str | None,
    sort: str | None,
    limit: int,
    as_json: bool,
    registry: str | None,
):
    """Search for skills in the registry."""
    from polyskill.registry import RegistryClient, RegistryError
    from polyskill.utils import dump_json, truncate_string

    cfg = _load_config(ctx, registry)
    client = RegistryClient.from_config(cfg.registry)

    try:
        page = asyncio.run(client.search(
            query,
            skill_type=skill_type,
            verified=verified,
            author=author,
            keyword=keyword,
            category=category,
            sort=sort,
            limit=limit,
        ))
    except RegistryError as e:
        _fail(e.message)

    if as_json:
        click.echo(dump_json(page.model_dump(mode="json")))
        return

    suffix = f' matching "{query}"' if query else ""

    if not page.skills:
        console.print(f"\n[yellow]No skills found{escape(suffix)}[/]\n")
        return

    console.print()
    for skill in page.skills:
        badge = "[green]\\[verified][/]" if skill.verified else "[yellow]\\[unverified][/]"
        category_tag = f" [dim]\\[{escape(skill.category)}][/]" if skill.category else ""
        console.print(
            f"[bold]{escape(skill.name)}[/] [dim]v{escape(skill.version)}[/] {badge} "
            f"[dim]{escape(skill.type)}[/]{category_tag}"
        )
        console.print(f"  {escape(truncate_string(skill.description))}")
        console.print(f"[cyan]  → polyskill install {escape(skill.name)}[/]\n")

    showing = len(page.skills)
    if page.total > showing:
        console.print(f"[dim]Showing {showing} of {page.total} skills{escape(suffix)}[/]\n")
    else:
        plural = "" if page.total == 1 else "s"
        console.print(f"[dim]{page.total} skill{plural} found{escape(suffix)}[/]\n")


@cli.command("adapters")
def adapters_cmd():
    """List supported adapter platforms."""
    from polyskill.adapters import list_adapters

    for platform in list_adapters():
        console.print(platform)


@cli.group()
def config():
    """Manage PolySkill configuration."""
    pass


@config.command("init")
@click.option("--path", default=None, type=click.Path(dir_okay=False, path_type=Path),
              help="Where to write the config (default: ~/.polyskill/config.yaml)")
def config_init(path: Path | None):
    """Generate a default config file."""
    from polyskill.config import DEFAULT_CONFIG_PATH, generate_default_config

    path = path or DEFAULT_CONFIG_PATH
    if path.exists():
        if not click.confirm(f"{path} already exists. Overwrite?"):
            console.print("[yellow]Cancelled.[/]")
            return

    generate_default_config(path)
    console.print(f"[green]Created {escape(str(path))}[/]")


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Show the effective configuration (token redacted)."""
    cfg = _load_config(ctx)
    data = cfg.model_dump()
    data["registry"]["token"] = "***" if cfg.registry.token else ""
    console.print(Panel.fit(escape(json.dumps(data, indent=2)), title="polyskill config"))


if __name__ == "__main__":
    cli()
