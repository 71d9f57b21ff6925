"""Configuration for environment variables and runtime knobs.

Provides a simple config object with model names, prompt location and
HTTP limits. Values are resolved once at import time; ``create_app``
receives the object explicitly so services never touch the environment.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

_BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class Config:
    # Base
    REWRITE_ENV = os.getenv("REWRITE_ENV", "dev")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    # Optional explicit base URL for manifest.xml; request host is used otherwise
    PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL") or None
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Static client assets (function-file.html, functions.js, ...)
    WEB_DIR = os.getenv("WEB_DIR", os.path.join(_BACKEND_DIR, "web"))
    MAX_CONTENT_MB = int(os.getenv("MAX_CONTENT_MB", "1"))

    # Chat model via langchain-google-genai
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
    LLM_MODEL = os.getenv("LLM_MODEL") or "gemini-2.5-flash"
    LLM_FALLBACK_MODEL = os.getenv("LLM_FALLBACK_MODEL") or "gemini-2.0-flash"
    # Low temperature keeps rewrites conservative
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))
    LLM_MAX_OUTPUT_TOKENS = int(os.getenv("LLM_MAX_OUTPUT_TOKENS", "1200"))
    # Per attempt; preferred and fallback each get the full budget
    LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

    # System prompt file, re-read on every request
    PROMPT_FILE = os.getenv("PROMPT_FILE") or os.path.join(_BACKEND_DIR, "prompts", "system_prompt.md")
