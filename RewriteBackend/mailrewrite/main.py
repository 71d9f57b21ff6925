"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=mailrewrite.main:app flask run --reload
- python -m mailrewrite.main
"""

from __future__ import annotations

import logging

from mailrewrite import create_app
from mailrewrite.config import Config

app = create_app()

if __name__ == "__main__":
    logging.getLogger(__name__).info("Server listening on http://%s:%d", Config.HOST, Config.PORT)
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.REWRITE_ENV == "dev")
