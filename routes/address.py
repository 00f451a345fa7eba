# routes/address.py
from flask import Blueprint, jsonify

from config import ServerConfig
from netinfo import lan_address, lan_url


def create_blueprint(settings: ServerConfig) -> Blueprint:
    bp = Blueprint("address", __name__)

    @bp.get("/api/address")
    def get_address():
        """Return the URL other devices on the LAN can use to reach this server."""
        ip = lan_address()
        return jsonify(url=lan_url(settings.port, ip), ip=ip)

    return bp
