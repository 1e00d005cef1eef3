"""Command line interface for the places bot."""

import asyncio
import sys

import click
import httpx
from pydantic import ValidationError

from .config import Settings, get_settings
from .main import BotApplication
from .services.messenger import TelegramClient
from .utils.logging import setup_logging


def _load_settings() -> Settings:
    """Load settings or exit with a readable message."""
    try:
        return get_settings()
    except ValidationError as e:
        click.echo("❌ Error: configuration is invalid", err=True)
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            click.echo(f"   {location}: {error['msg']}", err=True)
        sys.exit(1)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Telegram places bot CLI."""
    ctx.ensure_object(dict)


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Serve the webhook and handle messages."""
    settings: Settings = _load_settings()
    setup_logging(settings.log_level)

    click.echo("🤖 Starting places bot...")
    click.echo(f"🧠 Model: {settings.openai.model}")
    click.echo(f"📏 Search radius: {settings.foursquare.radius}m")
    if settings.bot.default_query:
        click.echo(f"🎯 Default query: {settings.bot.default_query}")

    app = BotApplication(settings)

    try:
        app.run()
    except KeyboardInterrupt:
        click.echo("\n🛑 Bot stopped by user")
    except Exception as e:
        click.echo(f"❌ Bot crashed: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def check_config(ctx: click.Context) -> None:
    """Check configuration."""
    click.echo("🔍 Checking configuration...")

    settings: Settings = _load_settings()

    click.echo("✅ Telegram token configured")
    click.echo("✅ Foursquare API key configured")
    click.echo("✅ OpenAI API key configured")
    click.echo(f"🧠 Model: {settings.openai.model} (max {settings.openai.max_tokens} tokens)")
    click.echo(f"📏 Search radius: {settings.foursquare.radius}m")
    click.echo(f"💬 Non-location text: {settings.bot.fallback}")

    if settings.webhook_url:
        click.echo(f"✅ Webhook will be registered at {settings.server.public_url}")
    else:
        click.echo("⚠️ PLACEBOT_SERVER__PUBLIC_URL not set, webhook will not be registered")

    click.echo("\n🎉 Configuration looks good!")


@cli.command()
@click.option("--url", default=None, help="Webhook URL (defaults to the configured public URL)")
@click.pass_context
def set_webhook(ctx: click.Context, url: str) -> None:
    """Register the webhook with Telegram."""
    settings: Settings = _load_settings()
    setup_logging(settings.log_level)

    webhook_url = url or settings.webhook_url
    if not webhook_url:
        click.echo(
            "❌ Error: pass --url or set PLACEBOT_SERVER__PUBLIC_URL", err=True
        )
        sys.exit(1)

    async def _register() -> dict:
        client = TelegramClient(settings.telegram)
        try:
            return await client.set_webhook(webhook_url)
        finally:
            await client.aclose()

    try:
        result = asyncio.run(_register())
    except (httpx.HTTPError, ValueError) as e:
        click.echo(f"❌ Failed to set webhook: {e}", err=True)
        sys.exit(1)

    if result.get("ok"):
        click.echo("✅ Webhook registered")
    else:
        click.echo(f"❌ Telegram refused the webhook: {result.get('description')}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
