"""Static client routes: GET /web/<path> and placeholder icons.

Serves the add-in's HTML/JS from ``Config.WEB_DIR`` (the bundled ``web/``
directory by default) and answers the three icon URLs referenced by the
manifest with a 1x1 transparent PNG.
"""

from __future__ import annotations

from flask import Blueprint, Response, current_app, send_from_directory

from mailrewrite.utils.io_utils import decode_b64

web_bp = Blueprint("web", __name__)

TRANSPARENT_PNG = decode_b64(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAoMBgUuK2y8AAAAASUVORK5CYII="
)
ICON_SIZES = (16, 32, 80)


@web_bp.get("/web/assets/icon-<int:size>.png")
def icon(size: int) -> Response:
    if size not in ICON_SIZES:
        return Response("Not found", status=404)
    return Response(TRANSPARENT_PNG, mimetype="image/png")


@web_bp.get("/web/<path:filename>")
def web_asset(filename: str):
    # send_from_directory rejects paths escaping WEB_DIR and 404s on missing files
    return send_from_directory(current_app.config["WEB_DIR"], filename)
