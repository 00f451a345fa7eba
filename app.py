# app.py
import locale
import logging
import os
from typing import Optional

import qrcode
from flask import Flask
from werkzeug.exceptions import RequestEntityTooLarge

from config import APP_TITLE, ServerConfig
from netinfo import lan_url
from routes import register_routes
from utils import format_megabytes


def create_app(settings: Optional[ServerConfig] = None) -> Flask:
    settings = settings or ServerConfig.from_env()
    settings.ensure_dirs()

    app = Flask(
        __name__,
        static_folder=os.fspath(settings.static_dir.resolve()),
        static_url_path="",
    )
    app.config.update(MAX_CONTENT_LENGTH=settings.max_content_length)

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        limit = format_megabytes(settings.max_file_size)
        return f"File too large (limit {limit})", 413, {"Content-Type": "text/plain; charset=utf-8"}

    # register all blueprints
    register_routes(app, settings)
    return app


def print_qr(url: str) -> None:
    qr = qrcode.QRCode(border=1, error_correction=qrcode.constants.ERROR_CORRECT_L)
    qr.add_data(url)
    qr.make(fit=True)
    qr.print_ascii(invert=True)


def use_host_locale() -> None:
    """Render listing times (strftime "%c") in the host locale instead of "C"."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logging.getLogger(__name__).warning("Keeping C locale for timestamps: %s", e)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    use_host_locale()
    settings = ServerConfig.from_env()
    app = create_app(settings)

    url = lan_url(settings.port)
    print("-" * 51)
    print(f"* Starting {APP_TITLE}")
    print(f"* Local:    http://localhost:{settings.port}")
    print(f"* LAN:      {url}")
    print(f"* Storage:  {settings.upload_dir.resolve()} (limit {format_megabytes(settings.max_file_size)})")
    print("-" * 51)
    if settings.show_qr:
        print_qr(url)

    # the dev server sets no socket timeout, so long uploads are never cut off
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
