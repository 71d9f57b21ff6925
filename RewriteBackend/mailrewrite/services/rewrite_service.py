from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from mailrewrite.config import Config
from mailrewrite.errors import ModelInvocationError, RewriteFailure
from mailrewrite.services.llm_service import LLMService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelSpec:
    """Preferred model plus the model used after it fails."""

    preferred: str
    fallback: str

    def __post_init__(self):
        if not self.preferred or not self.fallback:
            raise ValueError("Both preferred and fallback model names must be non-empty.")

    @classmethod
    def from_config(cls, cfg: Config = Config) -> "ModelSpec":
        return cls(preferred=cfg.LLM_MODEL, fallback=cfg.LLM_FALLBACK_MODEL)

    @property
    def candidates(self) -> Tuple[str, ...]:
        return (self.preferred, self.fallback)


class RewriteService:
    """Tries each candidate model in order until one returns text.

    The cause of a failed attempt is not inspected: timeouts, provider
    errors and empty answers all move on to the next candidate. With the
    default two-tier ``ModelSpec`` that is exactly one fallback attempt.
    """

    def __init__(
        self,
        cfg: Config = Config,
        llm: Optional[LLMService] = None,
        models: Optional[ModelSpec] = None,
    ):
        self.llm = llm or LLMService(cfg)
        self.models = models or ModelSpec.from_config(cfg)

    async def rewrite(self, system_prompt: str, user_text: str) -> str:
        failures: List[ModelInvocationError] = []
        for model in self.models.candidates:
            try:
                result = await self.llm.ainvoke(model, system_prompt, user_text)
            except ModelInvocationError as e:
                logger.warning("[rewrite] model=%s failed: %s", model, e.message)
                failures.append(e)
                continue
            if failures:
                logger.info("[rewrite] fallback model=%s succeeded", model)
            return result

        last = failures[-1].message if failures else None
        raise RewriteFailure(last, attempts=failures)
