import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from resume_wizard.ai.factory import get_ai_client
from resume_wizard.core.config import settings
from resume_wizard.services.resume_import import ResumeImportService
from resume_wizard.services.session import SessionStore

logger = logging.getLogger(__name__)

PURGE_INTERVAL_S = 600


def init_state(app) -> None:
    app.state.session_store = SessionStore(ttl=timedelta(minutes=settings.session_ttl_minutes))
    app.state.ai_client_factory = get_ai_client
    app.state.import_service = ResumeImportService(client_factory=get_ai_client)


@asynccontextmanager
async def lifespan(app):
    if not hasattr(app.state, "session_store"):
        init_state(app)

    stop_event = asyncio.Event()

    async def periodic_purge() -> None:
        while not stop_event.is_set():
            try:
                deleted = app.state.session_store.purge_expired()
                if deleted:
                    logger.info("session_retention_purge deleted=%s", deleted)
            except Exception as exc:  # pragma: no cover - purge must not kill the loop
                logger.warning("session_retention_purge_failed: %s", exc)
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=PURGE_INTERVAL_S)
            except asyncio.TimeoutError:
                continue

    purge_task = asyncio.create_task(periodic_purge())
    yield
    stop_event.set()
    if not purge_task.done():
        purge_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await purge_task
