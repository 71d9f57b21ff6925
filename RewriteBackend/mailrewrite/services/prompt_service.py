"""PromptService: resolves the system instruction for each rewrite.

The prompt file is read fresh on every call so operators can edit it
without restarting. Missing, unreadable, empty or whitespace-only files
all resolve to the compiled-in default; this service never raises.
"""

from __future__ import annotations

import asyncio
import logging

from mailrewrite.config import Config
from mailrewrite.errors import PromptSourceError
from mailrewrite.utils.io_utils import read_text
from prompts.business_mail_template import DEFAULT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class PromptService:
    def __init__(self, cfg: Config = Config, default_prompt: str = DEFAULT_SYSTEM_PROMPT):
        self.path = cfg.PROMPT_FILE
        self.default_prompt = default_prompt

    def resolve_prompt(self) -> str:
        try:
            text = read_text(self.path)
        except PromptSourceError as e:
            logger.debug("[prompt] %s; using default prompt", e)
            return self.default_prompt
        return text.strip() or self.default_prompt

    async def aresolve_prompt(self) -> str:
        # File read happens in a worker thread so the event loop stays free
        return await asyncio.to_thread(self.resolve_prompt)
