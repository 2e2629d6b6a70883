"""Extraction cascade: ordered strategies, validity gate, hybrid merge, fallback.

``ExtractionPipeline.run`` never raises for extraction problems. Every
strategy failure becomes an empty candidate, and when nothing passes the gate
the placeholder synthesizer guarantees the caller still receives text.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable, Sequence

from resume_wizard.ai.types import AIClient
from resume_wizard.core.config import Settings, settings

from .fallback import PLACEHOLDER_NOTICE, synthesize_fallback
from .gate import evaluate
from .hybrid import merge_candidates
from .models import (
    ExtractionCandidate,
    ExtractionFailure,
    ExtractionOutcome,
    ExtractionSource,
    RawDocument,
)
from .ocr import extract_ocr_text
from .structural import extract_structural_text
from .vision import extract_vision_text

logger = logging.getLogger(__name__)

StrategyFn = Callable[[RawDocument, int], Awaitable[ExtractionCandidate]]


@dataclass(frozen=True)
class Strategy:
    source: ExtractionSource
    run: StrategyFn
    max_pages: int
    timeout_s: float


def default_strategies(client: AIClient | None = None, cfg: Settings = settings) -> list[Strategy]:
    """Static priority order: cheapest and most exact first."""
    strategies = [
        Strategy(
            source=ExtractionSource.STRUCTURAL_TEXT,
            run=extract_structural_text,
            max_pages=cfg.structural_max_pages,
            timeout_s=cfg.structural_timeout_s,
        ),
    ]
    if cfg.ocr_enabled:
        strategies.append(
            Strategy(
                source=ExtractionSource.OCR,
                run=extract_ocr_text,
                max_pages=cfg.ocr_max_pages,
                timeout_s=cfg.ocr_timeout_s,
            )
        )
    if client is not None:
        strategies.append(
            Strategy(
                source=ExtractionSource.AI_VISION,
                run=partial(extract_vision_text, client=client),
                # Each page is one AI call.
                max_pages=cfg.vision_max_pages,
                timeout_s=cfg.ai_timeout_s * max(cfg.vision_max_pages, 1),
            )
        )
    return strategies


class ExtractionPipeline:
    def __init__(self, strategies: Sequence[Strategy]):
        self._strategies = list(strategies)

    @property
    def strategies(self) -> list[Strategy]:
        return list(self._strategies)

    async def _attempt(self, strategy: Strategy, document: RawDocument) -> ExtractionCandidate:
        try:
            candidate = await asyncio.wait_for(
                strategy.run(document, strategy.max_pages),
                timeout=strategy.timeout_s,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "extraction_strategy_failed strategy=%s reason=timeout timeout_s=%s",
                strategy.source.value,
                strategy.timeout_s,
            )
            return ExtractionCandidate.empty(strategy.source)
        except ExtractionFailure as exc:
            logger.warning("extraction_strategy_failed strategy=%s reason=%s", strategy.source.value, exc)
            return ExtractionCandidate.empty(strategy.source)
        except Exception:  # noqa: BLE001 - a broken strategy must not stop the cascade
            logger.exception("extraction_strategy_failed strategy=%s reason=unexpected", strategy.source.value)
            return ExtractionCandidate.empty(strategy.source)

        logger.info(
            "extraction_strategy_done strategy=%s chars=%s pages=%s",
            strategy.source.value,
            candidate.length,
            candidate.pages_read,
        )
        return candidate

    async def run(self, document: RawDocument) -> ExtractionOutcome:
        attempted: list[ExtractionSource] = []

        for strategy in self._strategies:
            attempted.append(strategy.source)
            candidate = await self._attempt(strategy, document)
            decision = evaluate(candidate)
            if decision.accepted:
                logger.info(
                    "extraction_accepted strategy=%s indicators=%s",
                    strategy.source.value,
                    decision.indicators_matched,
                )
                return ExtractionOutcome(candidate=candidate, decision=decision, attempted=tuple(attempted))
            logger.info(
                "extraction_rejected strategy=%s chars=%s indicators=%s",
                strategy.source.value,
                candidate.length,
                decision.indicators_matched,
            )

        if self._strategies:
            attempted.append(ExtractionSource.HYBRID)
            candidates = await asyncio.gather(
                *(self._attempt(strategy, document) for strategy in self._strategies)
            )
            merged = merge_candidates(candidates)
            decision = evaluate(merged)
            if decision.accepted:
                logger.info("extraction_accepted strategy=hybrid indicators=%s", decision.indicators_matched)
                return ExtractionOutcome(candidate=merged, decision=decision, attempted=tuple(attempted))
            logger.info(
                "extraction_rejected strategy=hybrid chars=%s indicators=%s",
                merged.length,
                decision.indicators_matched,
            )

        attempted.append(ExtractionSource.SYNTHETIC_FALLBACK)
        fallback = synthesize_fallback(document.filename, document.size)
        return ExtractionOutcome(
            candidate=fallback,
            decision=evaluate(fallback),
            attempted=tuple(attempted),
            notice=PLACEHOLDER_NOTICE,
        )


async def extract_document_text(document: RawDocument, client: AIClient | None = None) -> ExtractionOutcome:
    return await ExtractionPipeline(default_strategies(client)).run(document)
