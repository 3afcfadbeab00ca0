"""CLI entry point for Link Saver."""

import asyncio
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from linksaver.adapters.api import HttpAuthGateway, HttpBookmarkRepository
from linksaver.adapters.enrichment import JinaReaderClient
from linksaver.adapters.storage import FileCredentialStore
from linksaver.config import Settings, get_settings
from linksaver.core import Bookmark, LinkSaverError, SessionContext
from linksaver.use_cases import AuthService, BookmarkViewService, CaptureService

app = typer.Typer(help="Save links with automatic summaries.", no_args_is_help=True)

ConfigOption = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config")
DebugOption = typer.Option(False, "--debug", help="Enable debug logging")


def _bootstrap(config: Path, debug: bool) -> tuple[Settings, SessionContext]:
    """Load settings and restore the saved session."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    
    settings = get_settings(config)
    session = SessionContext(FileCredentialStore(settings.credentials_file))
    session.restore()
    return settings, session


def _fail(message: str) -> NoReturn:
    print(f"❌ {message}")
    raise typer.Exit(code=1)


def _require_login(session: SessionContext) -> None:
    if not session.is_authenticated:
        _fail("Not logged in. Run `linksaver login EMAIL` first.")


def _parse_move(value: str) -> tuple[int, int]:
    """Parse a FROM:TO move given with 1-based positions."""
    try:
        source, target = value.split(":", 1)
        return int(source) - 1, int(target) - 1
    except ValueError:
        raise typer.BadParameter(f"Expected FROM:TO, got {value!r}")


def _print_bookmarks(bookmarks: tuple[Bookmark, ...]) -> None:
    for position, bookmark in enumerate(bookmarks, 1):
        print(f"\n{position}. 🔖 {bookmark.title}")
        print(f"   └─ {bookmark.url}")
        if bookmark.tags:
            print(f"   └─ 🏷️  {', '.join(bookmark.tags)}")
        if bookmark.created_at:
            print(f"   └─ Added {bookmark.created_at.strftime('%d.%m.%Y')}")
        summary = bookmark.summary.strip().splitlines()[0] if bookmark.summary.strip() else ""
        if summary:
            print(f"   └─ {summary[:100]}")


@app.command()
def login(
    email: str,
    password: str = typer.Option(..., prompt=True, hide_input=True),
    config: Path = ConfigOption,
    debug: bool = DebugOption,
) -> None:
    """Log in and remember the session."""
    settings, session = _bootstrap(config, debug)
    auth = AuthService(session, HttpAuthGateway.from_settings(settings))
    
    try:
        asyncio.run(auth.login(email, password))
    except LinkSaverError as e:
        _fail(e.message)
    
    print(f"✓ Logged in as {email}")


@app.command()
def register(
    email: str,
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
    config: Path = ConfigOption,
    debug: bool = DebugOption,
) -> None:
    """Create an account and log in."""
    settings, session = _bootstrap(config, debug)
    auth = AuthService(session, HttpAuthGateway.from_settings(settings))
    
    try:
        asyncio.run(auth.register(email, password))
    except LinkSaverError as e:
        _fail(e.message)
    
    print(f"✓ Account created, logged in as {email}")


@app.command()
def logout(config: Path = ConfigOption, debug: bool = DebugOption) -> None:
    """Forget the saved session."""
    settings, session = _bootstrap(config, debug)
    AuthService(session, HttpAuthGateway.from_settings(settings)).logout()
    print("✓ Logged out")


@app.command("list")
def list_bookmarks(
    move: Optional[list[str]] = typer.Option(
        None, "--move", help="Reorder locally, FROM:TO (1-based); repeatable"
    ),
    config: Path = ConfigOption,
    debug: bool = DebugOption,
) -> None:
    """Show saved bookmarks."""
    settings, session = _bootstrap(config, debug)
    _require_login(session)
    
    view = BookmarkViewService(session, HttpBookmarkRepository.from_settings(session, settings))
    asyncio.run(view.load())
    
    if view.error is not None:
        _fail(view.error)
    if view.is_empty:
        print("No bookmarks yet. Add your first one with `linksaver add URL`.")
        return
    
    for value in move or []:
        source, target = _parse_move(value)
        try:
            view.move(source, target)
        except LinkSaverError as e:
            _fail(e.message)
    
    print(f"\n📚 Your bookmarks ({len(view.visible_items)})")
    if move:
        print("   (local order only, not saved)")
    _print_bookmarks(view.visible_items)
    print()


@app.command()
def add(url: str, config: Path = ConfigOption, debug: bool = DebugOption) -> None:
    """Save a URL with an automatic summary."""
    settings, session = _bootstrap(config, debug)
    _require_login(session)
    
    capture = CaptureService(
        session=session,
        enricher=JinaReaderClient.from_settings(settings),
        repository=HttpBookmarkRepository.from_settings(session, settings),
        enrichment_timeout=settings.enrichment_timeout,
        success_display_seconds=settings.success_display_seconds,
    )
    
    print(f"⏳ Saving {url} ...")
    try:
        result = asyncio.run(capture.capture(url))
    except LinkSaverError as e:
        _fail(e.message)
    
    if not result.succeeded:
        _fail(result.error or "Failed to add bookmark")
    
    bookmark = result.bookmark
    print("✓ Bookmark added successfully!")
    if bookmark is not None:
        _print_bookmarks((bookmark,))
        print()


if __name__ == "__main__":
    app()
