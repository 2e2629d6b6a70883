"""Per-user wizard state and the in-memory store that owns it.

Each field of ``ResumeSession`` has one writer:

* ``resume`` is replaced by an import run, a prompt-generation run or a user edit;
* ``overlay`` is replaced by the enhancement stage and cleared whenever
  ``resume`` is replaced.

Runs are tagged with a monotonically increasing sequence number from
``begin_run``. A commit carrying anything but the latest number is dropped, so
a slow upload can never overwrite the result of a newer one.
"""

from __future__ import annotations

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from resume_wizard.extraction.models import ExtractionOutcome, ExtractionSource
from resume_wizard.schemas.resume import EnhancedOverlay, StructuredResume

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ExtractionRecord:
    source: ExtractionSource
    indicators_matched: int
    characters: int
    attempted: tuple[ExtractionSource, ...] = ()
    synthetic: bool = False
    notice: str | None = None

    @classmethod
    def from_outcome(cls, outcome: ExtractionOutcome) -> "ExtractionRecord":
        return cls(
            source=outcome.source,
            indicators_matched=outcome.decision.indicators_matched,
            characters=outcome.candidate.length,
            attempted=outcome.attempted,
            synthetic=outcome.synthetic,
            notice=outcome.notice,
        )


@dataclass
class ResumeSession:
    session_id: str
    resume: StructuredResume | None = None
    overlay: EnhancedOverlay | None = None
    extraction: ExtractionRecord | None = None
    latest_run: int = 0
    resume_revision: int = 0
    updated_at: datetime = field(default_factory=_utc_now)

    def begin_run(self) -> int:
        self.latest_run += 1
        return self.latest_run

    def is_current(self, run: int) -> bool:
        return run == self.latest_run

    def _replace_resume(self, resume: StructuredResume) -> None:
        self.resume = resume
        self.overlay = None
        self.resume_revision += 1
        self.updated_at = _utc_now()

    def commit_resume(
        self,
        run: int,
        resume: StructuredResume,
        *,
        overlay: EnhancedOverlay | None = None,
        extraction: ExtractionRecord | None = None,
    ) -> bool:
        """Store the result of run ``run``. Returns False when the run is stale."""
        if not self.is_current(run):
            logger.info(
                "session_commit_dropped session=%s run=%s latest=%s",
                self.session_id,
                run,
                self.latest_run,
            )
            return False
        self._replace_resume(resume)
        self.overlay = overlay
        self.extraction = extraction
        return True

    def edit_resume(self, resume: StructuredResume) -> None:
        # An explicit edit supersedes any run still in flight.
        self.begin_run()
        self._replace_resume(resume)
        self.extraction = None

    def set_overlay(self, overlay: EnhancedOverlay, revision: int) -> bool:
        """Attach an overlay built from resume revision ``revision``."""
        if revision != self.resume_revision or self.resume is None:
            logger.info(
                "session_overlay_dropped session=%s revision=%s current=%s",
                self.session_id,
                revision,
                self.resume_revision,
            )
            return False
        self.overlay = overlay
        self.updated_at = _utc_now()
        return True


class SessionNotFound(KeyError):
    pass


class SessionStore:
    def __init__(self, ttl: timedelta = timedelta(hours=6)):
        self._ttl = ttl
        self._sessions: dict[str, ResumeSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self) -> ResumeSession:
        session = ResumeSession(session_id=secrets.token_urlsafe(16))
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info("session_created session=%s", session.session_id)
        return session

    def get(self, session_id: str) -> ResumeSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def purge_expired(self) -> int:
        cutoff = _utc_now() - self._ttl
        with self._lock:
            expired = [key for key, session in self._sessions.items() if session.updated_at <= cutoff]
            for key in expired:
                del self._sessions[key]
        return len(expired)
