"""Rewrite route: POST /api/rewrite

Validates ``{"text": str}``, resolves the system prompt, runs the model
fallback chain and answers ``{"result": str}`` or ``{"error": str}``.
"""

from __future__ import annotations

import logging
from typing import Any, Tuple

from flask import Blueprint, current_app, jsonify, request

from mailrewrite.errors import RewriteFailure, ValidationError
from mailrewrite.schemas import RewriteRequest, RewriteResponse
from mailrewrite.services.prompt_service import PromptService
from mailrewrite.services.rewrite_service import RewriteService

logger = logging.getLogger(__name__)

rewrite_bp = Blueprint("rewrite", __name__)


def _resp_error(message: str, status: int = 400):
    return jsonify({"error": message}), status


async def handle_rewrite(
    payload: Any, prompts: PromptService, rewriter: RewriteService
) -> Tuple[RewriteResponse, int]:
    try:
        req = RewriteRequest.from_payload(payload)
    except ValidationError as e:
        return RewriteResponse(error=e.message), 400

    logger.info("[rewrite] request chars=%d", len(req.text))
    system_prompt = await prompts.aresolve_prompt()
    try:
        result = await rewriter.rewrite(system_prompt, req.text)
    except RewriteFailure as e:
        logger.error("[rewrite] all models failed: %s", e.message)
        return RewriteResponse(error=e.message or "internal error"), 500
    return RewriteResponse(result=result), 200


@rewrite_bp.route("/api/rewrite", methods=["POST"])
async def rewrite():
    payload = request.get_json(silent=True) or {}
    services = current_app.extensions["mailrewrite"]
    try:
        resp, status = await handle_rewrite(payload, services["prompts"], services["rewriter"])
    except Exception as e:
        logger.exception("[rewrite] unexpected error")
        return _resp_error(str(e) or "internal error", 500)
    return jsonify(resp.to_dict()), status
