from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from resume_wizard.ai.errors import ResumeAIError
from resume_wizard.ai.factory import get_ai_client
from resume_wizard.ai.types import AIClient
from resume_wizard.extraction.models import RawDocument
from resume_wizard.extraction.pipeline import ExtractionPipeline, default_strategies
from resume_wizard.normalize.text import normalize_text
from resume_wizard.schemas.api import ResumePrompt
from resume_wizard.schemas.resume import EnhancedOverlay, StructuredResume
from resume_wizard.services.enhancement import enhance_resume
from resume_wizard.services.session import ExtractionRecord, ResumeSession
from resume_wizard.services.structuring import generate_resume_from_prompt, structure_resume

logger = logging.getLogger(__name__)


class ImportFailed(RuntimeError):
    """Unexpected error inside an import run. Nothing was committed."""


class NoResumeError(LookupError):
    pass


@dataclass(frozen=True)
class ImportResult:
    committed: bool
    resume: StructuredResume
    overlay: EnhancedOverlay | None = None
    extraction: ExtractionRecord | None = None
    enhancement_error: ResumeAIError | None = None


def _default_pipeline(client: AIClient) -> ExtractionPipeline:
    return ExtractionPipeline(default_strategies(client))


class ResumeImportService:
    def __init__(
        self,
        client_factory: Callable[[], AIClient] = get_ai_client,
        pipeline_factory: Callable[[AIClient], ExtractionPipeline] = _default_pipeline,
    ):
        self._client_factory = client_factory
        self._pipeline_factory = pipeline_factory

    async def import_document(self, session: ResumeSession, document: RawDocument) -> ImportResult:
        """Upload to committed resume: extract, normalize, structure, enhance, commit.

        Raises ConfigurationError before any extraction work when the AI client
        cannot be built. Structuring errors propagate and leave the session
        untouched. A failed enhancement still commits the resume, without an
        overlay.
        """
        client = self._client_factory()
        run = session.begin_run()
        started_at = time.perf_counter()
        logger.info(
            "import_started session=%s run=%s file=%s bytes=%s",
            session.session_id,
            run,
            document.filename,
            document.size,
        )

        try:
            outcome = await self._pipeline_factory(client).run(document)
            text = normalize_text(outcome.candidate.text)
            resume = await structure_resume(client, text)
        except ResumeAIError as exc:
            logger.warning("import_failed session=%s run=%s code=%s", session.session_id, run, exc.code)
            raise
        except Exception as exc:
            logger.exception("import_failed session=%s run=%s code=unexpected", session.session_id, run)
            raise ImportFailed("Resume import failed unexpectedly.") from exc

        overlay: EnhancedOverlay | None = None
        enhancement_error: ResumeAIError | None = None
        try:
            overlay = await enhance_resume(client, resume)
        except ResumeAIError as exc:
            logger.warning("import_enhancement_failed session=%s run=%s code=%s", session.session_id, run, exc.code)
            enhancement_error = exc
        except Exception:
            logger.exception("import_enhancement_failed session=%s run=%s code=unexpected", session.session_id, run)
            enhancement_error = ResumeAIError("Resume enhancement failed unexpectedly.", code="enhancement_failed")

        extraction = ExtractionRecord.from_outcome(outcome)
        committed = session.commit_resume(run, resume, overlay=overlay, extraction=extraction)
        logger.info(
            "import_finished session=%s run=%s source=%s synthetic=%s committed=%s latency_ms=%s",
            session.session_id,
            run,
            extraction.source.value,
            extraction.synthetic,
            committed,
            int((time.perf_counter() - started_at) * 1000),
        )
        return ImportResult(
            committed=committed,
            resume=resume,
            overlay=overlay,
            extraction=extraction,
            enhancement_error=enhancement_error,
        )

    async def generate(self, session: ResumeSession, prompt: ResumePrompt) -> ImportResult:
        client = self._client_factory()
        run = session.begin_run()
        try:
            resume = await generate_resume_from_prompt(client, prompt)
        except ResumeAIError as exc:
            logger.warning("generate_failed session=%s run=%s code=%s", session.session_id, run, exc.code)
            raise
        except Exception as exc:
            logger.exception("generate_failed session=%s run=%s code=unexpected", session.session_id, run)
            raise ImportFailed("Resume generation failed unexpectedly.") from exc
        committed = session.commit_resume(run, resume)
        return ImportResult(committed=committed, resume=resume)

    async def enhance(self, session: ResumeSession) -> tuple[EnhancedOverlay, bool]:
        if session.resume is None:
            raise NoResumeError(session.session_id)
        client = self._client_factory()
        revision = session.resume_revision
        overlay = await enhance_resume(client, session.resume)
        return overlay, session.set_overlay(overlay, revision)
