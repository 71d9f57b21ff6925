"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, wire the rewrite services and register route blueprints.
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from mailrewrite.config import Config
from mailrewrite.routes.manifest import manifest_bp
from mailrewrite.routes.rewrite import rewrite_bp
from mailrewrite.routes.web import web_bp
from mailrewrite.services.llm_service import ChatModelFactory, LLMService
from mailrewrite.services.prompt_service import PromptService
from mailrewrite.services.rewrite_service import ModelSpec, RewriteService


def create_app(cfg: type = Config, chat_model_factory: Optional[ChatModelFactory] = None) -> Flask:
    app = Flask(__name__)
    # Basic config
    app.config.from_object(cfg)
    app.config["MAX_CONTENT_LENGTH"] = cfg.MAX_CONTENT_MB * 1024 * 1024
    logging.basicConfig(
        level=getattr(logging, str(cfg.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # The add-in runs inside Outlook, so any origin may call us
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        send_wildcard=True,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    # Services are stateless and shared read-only across requests
    app.extensions["mailrewrite"] = {
        "prompts": PromptService(cfg),
        "rewriter": RewriteService(
            cfg,
            llm=LLMService(cfg, chat_model_factory=chat_model_factory),
            models=ModelSpec.from_config(cfg),
        ),
    }

    # Blueprints
    app.register_blueprint(rewrite_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(manifest_bp)

    @app.get("/")
    def index():
        return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(_e):
        return jsonify({"error": f"request body exceeds {cfg.MAX_CONTENT_MB}MB"}), 413

    return app
