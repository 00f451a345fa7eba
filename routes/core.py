# routes/core.py
import os

from flask import Blueprint, current_app, jsonify, request, send_from_directory
from werkzeug.exceptions import RequestEntityTooLarge

from config import ServerConfig
from storage import FileTooLarge, save_upload
from utils import FilenameError, decode_filename, format_megabytes, sanitize_filename

FALLBACK_INDEX_HTML = "<html><body><h1>index.html missing</h1></body></html>"
TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


def create_blueprint(settings: ServerConfig) -> Blueprint:
    bp = Blueprint("core", __name__)
    static_dir = os.fspath(settings.static_dir.resolve())

    @bp.get("/")
    def index():
        if not (settings.static_dir / "index.html").is_file():
            return FALLBACK_INDEX_HTML
        return send_from_directory(static_dir, "index.html")

    @bp.post("/upload")
    def upload():
        f = request.files.get("file")
        if f is None or not f.filename:
            return "No file selected", 400, TEXT_PLAIN

        try:
            filename = sanitize_filename(decode_filename(f.filename))
            stored = save_upload(
                f.stream,
                settings.upload_dir,
                settings.incoming_dir,
                filename,
                settings.max_file_size,
            )
        except FilenameError as e:
            current_app.logger.warning("Rejected upload %r: %s", f.filename, e)
            return f"Invalid filename: {e}", 400, TEXT_PLAIN
        except FileTooLarge as e:
            current_app.logger.warning("Rejected upload %r: %s", f.filename, e)
            raise RequestEntityTooLarge(str(e)) from None
        except OSError as e:
            current_app.logger.error("Could not store upload %r: %s", f.filename, e)
            return f"Could not store file: {e.strerror or e}", 500, TEXT_PLAIN

        current_app.logger.info("Received %s (%s) -> %s", stored.name, format_megabytes(stored.size), stored.path)
        return jsonify(message="Upload successful", filename=stored.name, size=stored.size)

    @bp.get("/files/<path:filename>")
    def download(filename: str):
        return send_from_directory(os.fspath(settings.upload_dir.resolve()), filename)

    return bp
