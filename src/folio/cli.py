"""Typer CLI for folio — browse and drive the portfolio API from a shell."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Ok

from folio import diagnostics
from folio.config import Config
from folio.container import StoreContainer
from folio.forms import validate_contact_form
from folio.models.contact import ContactMessage
from folio.models.state import ToastType
from folio.views import group_skills_by_category, skill_level_label

app = typer.Typer(
    name="folio",
    help="Portfolio client — inspect projects, skills and profile, send contact messages.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    api_url: Annotated[
        str | None,
        typer.Option("--api-url", help="Base URL of the portfolio API"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
    export_log: Annotated[
        Path | None,
        typer.Option("--export-log", help="Write the recent log entries as JSON on exit"),
    ] = None,
) -> None:
    """Configure logging and the API endpoint shared by every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if export_log is not None:
        handler = diagnostics.install()

        def write_log() -> None:
            diagnostics.uninstall(handler)
            export_log.write_text(handler.export(), encoding="utf-8")

        ctx.call_on_close(write_log)
    config = Config.from_env()
    if api_url:
        config = Config(api_url=api_url, timeout=config.timeout)
    ctx.obj = config


@app.command()
def projects(
    ctx: typer.Context,
    category: Annotated[str | None, typer.Option("--category", help="Only this category")] = None,
    featured: Annotated[
        bool | None,
        typer.Option("--featured/--no-featured", help="Filter on the featured flag"),
    ] = None,
) -> None:
    """List projects."""
    ok = asyncio.run(_do_projects(ctx.obj, category, featured))
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def skills(
    ctx: typer.Context,
    category: Annotated[str | None, typer.Option("--category", help="Only this category")] = None,
) -> None:
    """List skills grouped by category."""
    ok = asyncio.run(_do_skills(ctx.obj, category))
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def profile(ctx: typer.Context) -> None:
    """Show the profile."""
    ok = asyncio.run(_do_profile(ctx.obj))
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def contact(
    ctx: typer.Context,
    name: Annotated[str, typer.Option("--name", help="Your name")],
    email: Annotated[str, typer.Option("--email", help="Reply address")],
    subject: Annotated[str, typer.Option("--subject", help="Subject line")],
    message: Annotated[str, typer.Option("--message", help="Message body")],
) -> None:
    """Validate and send a contact message."""
    contact_message = ContactMessage(name=name, email=email, subject=subject, message=message)
    errors = validate_contact_form(contact_message)
    if errors:
        for field, error in errors.items():
            typer.echo(f"{field}: {error}", err=True)
        raise typer.Exit(code=1)
    ok = asyncio.run(_do_contact(ctx.obj, contact_message))
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def health(ctx: typer.Context) -> None:
    """Check that the API answers its liveness probe."""
    ok = asyncio.run(_do_health(ctx.obj))
    if not ok:
        raise typer.Exit(code=1)


async def _do_projects(config: Config, category: str | None, featured: bool | None) -> bool:
    container = StoreContainer.create(config)
    try:
        await container.projects.load(category, featured)
        _echo_toasts(container)
        if container.projects.loading.get().error is not None:
            return False
        for project in container.projects.items.get():
            marker = " *" if project.featured else ""
            techs = ", ".join(project.technologies)
            typer.echo(f"[{project.id}] {project.title} ({project.category}){marker}")
            if techs:
                typer.echo(f"    {techs}")
        return True
    finally:
        await container.close()


async def _do_skills(config: Config, category: str | None) -> bool:
    container = StoreContainer.create(config)
    try:
        await container.skills.load(category)
        _echo_toasts(container)
        if container.skills.loading.get().error is not None:
            return False
        grouped = group_skills_by_category(container.skills.items.get())
        for group in sorted(grouped):
            typer.echo(group)
            for skill in grouped[group]:
                typer.echo(f"  {skill.name} — {skill_level_label(skill.level)}")
        return True
    finally:
        await container.close()


async def _do_profile(config: Config) -> bool:
    container = StoreContainer.create(config)
    try:
        await container.profile.load()
        _echo_toasts(container)
        current = container.profile.profile.get()
        if current is None:
            return False
        typer.echo(f"{current.name} — {current.title}")
        typer.echo(f"{current.location} · {current.email}")
        typer.echo("")
        typer.echo(current.bio)
        return True
    finally:
        await container.close()


async def _do_contact(config: Config, message: ContactMessage) -> bool:
    container = StoreContainer.create(config)
    try:
        sent = await container.contact.send_message(message)
        _echo_toasts(container)
        return sent
    finally:
        await container.close()


async def _do_health(config: Config) -> bool:
    container = StoreContainer.create(config)
    try:
        result = await container.api.health()
        if isinstance(result, Ok):
            typer.echo(f"{config.health_url}: ok")
            return True
        typer.echo(f"{config.health_url}: {result.err_value.message}", err=True)
        return False
    finally:
        await container.close()


def _echo_toasts(container: StoreContainer) -> None:
    for toast in container.toasts.toasts.get():
        text = f"{toast.title}: {toast.message}" if toast.message else toast.title
        typer.echo(text, err=toast.type in (ToastType.ERROR, ToastType.WARNING))
