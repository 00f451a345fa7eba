# routes/files.py
from flask import Blueprint, current_app, jsonify

from config import ServerConfig
from storage import list_files
from utils import format_local_time, format_megabytes


def create_blueprint(settings: ServerConfig) -> Blueprint:
    bp = Blueprint("files", __name__)

    @bp.get("/api/files")
    def get_files():
        """Return name, size in MB and local modification time of every stored file."""
        listing = list_files(settings.upload_dir)
        if not listing.ok:
            current_app.logger.warning("Cannot list uploads: %s", listing.error)
        if listing.skipped:
            current_app.logger.debug("Skipped unreadable entries: %s", ", ".join(listing.skipped))
        return jsonify(
            [
                {
                    "name": f.name,
                    "size": format_megabytes(f.size),
                    "time": format_local_time(f.modified),
                }
                for f in listing.files
            ]
        )

    return bp
