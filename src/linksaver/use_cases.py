"""Business logic use cases."""

import asyncio
import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Optional, Union

from linksaver.core import (
    NO_SUMMARY,
    AuthGateway,
    Bookmark,
    BookmarkRepository,
    CaptureInProgressError,
    CaptureResult,
    CaptureState,
    ContentEnricher,
    Credentials,
    LinkSaverError,
    OrderingReconciler,
    SessionContext,
    Unauthorized,
    ValidationError,
    ViewState,
    normalize_url,
)

logger = logging.getLogger(__name__)

GENERIC_CAPTURE_ERROR = "Failed to add bookmark"

Observer = Callable[[Bookmark], Union[None, Awaitable[None]]]


class CaptureService:
    """Pipeline that turns a submitted URL into a stored, summarized bookmark.
    
    One instance backs one capture form. It moves through
    IDLE -> SUBMITTING -> SUCCESS/FAILED and back to IDLE once the outcome
    has been acknowledged. Only one capture can be submitting at a time.
    """
    
    def __init__(
        self,
        session: SessionContext,
        enricher: ContentEnricher,
        repository: BookmarkRepository,
        enrichment_timeout: float = 15.0,
        success_display_seconds: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.session = session
        self.enricher = enricher
        self.repository = repository
        self.enrichment_timeout = enrichment_timeout
        self.success_display_seconds = success_display_seconds
        self.clock = clock
        
        self.state = CaptureState.IDLE
        self.draft_url = ""
        self.last_result: Optional[CaptureResult] = None
        self._observers: list[Observer] = []
        self._task: Optional["asyncio.Task[CaptureResult]"] = None
        self._success_until = 0.0
    
    async def __aenter__(self) -> "CaptureService":
        return self
    
    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
    
    def add_observer(self, observer: Observer) -> None:
        """Register a callable that receives every newly created bookmark."""
        self._observers.append(observer)
    
    @property
    def success_visible(self) -> bool:
        """Whether the success indicator is still within its display window."""
        return self.state == CaptureState.SUCCESS and self.clock() < self._success_until
    
    def acknowledge(self) -> None:
        """Return to IDLE after the caller has seen a terminal outcome."""
        if self.state in (CaptureState.SUCCESS, CaptureState.FAILED):
            self.state = CaptureState.IDLE
    
    async def capture(self, url: str) -> CaptureResult:
        """Validate, enrich and persist url.
        
        Repository failures are reported in the returned result rather than
        raised, and the draft URL is kept so the caller can retry.
        
        Raises:
            ValidationError: If url is invalid or nobody is logged in.
            CaptureInProgressError: If another capture is still submitting.
        """
        target = self._begin(url)
        return await self._run(url, target)
    
    def submit(self, url: str) -> "asyncio.Task[CaptureResult]":
        """Start a capture as a task owned by this service.
        
        Validation happens immediately; the returned task can be cancelled
        with ``cancel`` or by leaving the service's ``async with`` block.
        """
        target = self._begin(url)
        self._task = asyncio.create_task(self._run(url, target))
        self._task.add_done_callback(self._on_task_done)
        return self._task
    
    def cancel(self) -> None:
        """Cancel an in-flight capture started with ``submit``."""
        if self._task is not None and not self._task.done():
            logger.info("Cancelling capture of %s", self.draft_url)
            self._task.cancel()
    
    async def close(self) -> None:
        """Cancel pending work and wait for it to unwind."""
        task = self._task
        self.cancel()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                # Propagate if close() itself is being cancelled
                if not task.cancelled():
                    raise
            except Exception:
                logger.exception("Capture task failed before close")
        self._task = None
    
    def _begin(self, url: str) -> str:
        """Check preconditions and enter SUBMITTING before any I/O."""
        if self.state == CaptureState.SUBMITTING:
            raise CaptureInProgressError("A bookmark is already being added")
        
        target = normalize_url(url)
        if not self.session.is_authenticated:
            raise ValidationError("Log in before adding bookmarks")
        
        self.acknowledge()
        self.state = CaptureState.SUBMITTING
        self.draft_url = url
        logger.info("Capturing %s", target)
        return target
    
    async def _run(self, raw_url: str, url: str) -> CaptureResult:
        try:
            summary = await self._summarize(url)
            bookmark = await self.repository.create(url, summary)
        except asyncio.CancelledError:
            self.state = CaptureState.IDLE
            raise
        except Unauthorized as e:
            self.session.clear()
            return self._fail(raw_url, e.message)
        except LinkSaverError as e:
            return self._fail(raw_url, e.message)
        except Exception:
            self.state = CaptureState.FAILED
            raise
        
        self.state = CaptureState.SUCCESS
        self.draft_url = ""
        self._success_until = self.clock() + self.success_display_seconds
        result = CaptureResult(state=CaptureState.SUCCESS, url=url, bookmark=bookmark)
        self.last_result = result
        
        for observer in self._observers:
            try:
                outcome = observer(bookmark)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                # Bookmark is already stored; the result stays SUCCESS
                logger.exception("Observer %r failed for bookmark %s", observer, bookmark.id)
        
        return result
    
    async def _summarize(self, url: str) -> str:
        """Run enrichment with a hard time bound; never raises."""
        try:
            summary = await asyncio.wait_for(self.enricher.enrich(url), timeout=self.enrichment_timeout)
        except asyncio.TimeoutError:
            logger.warning("Enrichment timed out after %.1fs for %s", self.enrichment_timeout, url)
            return NO_SUMMARY
        except Exception as e:
            logger.warning("Enrichment failed for %s: %s", url, e)
            return NO_SUMMARY
        
        return summary or NO_SUMMARY
    
    def _fail(self, raw_url: str, message: str) -> CaptureResult:
        self.state = CaptureState.FAILED
        self.draft_url = raw_url
        result = CaptureResult(
            state=CaptureState.FAILED,
            url=raw_url,
            error=message or GENERIC_CAPTURE_ERROR,
        )
        self.last_result = result
        logger.info("Capture of %s failed: %s", raw_url, result.error)
        return result
    
    def _on_task_done(self, task: "asyncio.Task[CaptureResult]") -> None:
        # A task cancelled before its first step never reaches _run's handler
        if task.cancelled() and self.state == CaptureState.SUBMITTING:
            self.state = CaptureState.IDLE


class BookmarkViewService:
    """The user's bookmark list: server membership, client-local order."""
    
    def __init__(
        self,
        session: SessionContext,
        repository: BookmarkRepository,
        reconciler: Optional[OrderingReconciler] = None,
    ) -> None:
        self.session = session
        self.repository = repository
        self.reconciler = reconciler or OrderingReconciler()
        self.state = ViewState.LOADING
        self.error: Optional[str] = None
        self._generation = 0
    
    @property
    def visible_items(self) -> tuple[Bookmark, ...]:
        """Bookmarks to display; nothing unless the last load succeeded."""
        if self.state != ViewState.READY:
            return ()
        return self.reconciler.items
    
    @property
    def is_empty(self) -> bool:
        return self.state == ViewState.READY and len(self.reconciler) == 0
    
    async def load(self) -> tuple[Bookmark, ...]:
        """Fetch the list and replace the visible order with the server's.
        
        A response that arrives after a newer load has started is dropped,
        so the view always reflects the most recent request.
        """
        self._generation += 1
        generation = self._generation
        self.state = ViewState.LOADING
        self.error = None
        
        try:
            bookmarks = await self.repository.list()
        except LinkSaverError as e:
            if isinstance(e, Unauthorized):
                self.session.clear()
            if generation == self._generation:
                self.state = ViewState.ERROR
                self.error = e.message
                logger.info("Loading bookmarks failed: %s", e.message)
            return self.visible_items
        
        if generation != self._generation:
            logger.debug("Discarding stale bookmark list (load %d superseded)", generation)
            return self.visible_items
        
        self.reconciler.refresh(bookmarks)
        self.state = ViewState.READY
        return self.visible_items
    
    async def on_bookmark_created(self, bookmark: Bookmark) -> None:
        """Capture observer: reload so the new bookmark arrives via refresh."""
        logger.debug("Reloading after creation of %s", bookmark.id)
        await self.load()
    
    def move(self, from_index: int, to_index: int) -> bool:
        """Apply a local reorder; it is not sent to the service."""
        return self.reconciler.reorder(from_index, to_index)


class AuthService:
    """Login, registration and logout against the bookmark service."""
    
    def __init__(self, session: SessionContext, gateway: AuthGateway) -> None:
        self.session = session
        self.gateway = gateway
    
    async def login(self, email: str, password: str) -> None:
        """Obtain a token and start the session.
        
        Raises:
            ValidationError: If email or password is missing.
            Unauthorized: If the service rejects the credentials.
        """
        credentials = self._credentials(email, password)
        token = await self.gateway.request_token(credentials)
        self.session.set_credential(token)
    
    async def register(self, email: str, password: str) -> None:
        """Create an account, then log straight into it."""
        credentials = self._credentials(email, password)
        await self.gateway.register(credentials)
        token = await self.gateway.request_token(credentials, failure_message="Auto-login failed")
        self.session.set_credential(token)
    
    def logout(self) -> None:
        self.session.clear()
    
    def restore(self) -> bool:
        """Resume a session saved by a previous run."""
        return self.session.restore()
    
    def _credentials(self, email: str, password: str) -> Credentials:
        try:
            return Credentials(email=(email or "").strip(), password=password or "")
        except ValueError as e:
            raise ValidationError(str(e)) from e
