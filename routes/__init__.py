# routes/__init__.py
from .core import create_blueprint as core_blueprint
from .files import create_blueprint as files_blueprint
from .address import create_blueprint as address_blueprint


def register_routes(app, settings):
    app.register_blueprint(core_blueprint(settings))
    app.register_blueprint(files_blueprint(settings))
    app.register_blueprint(address_blueprint(settings))
