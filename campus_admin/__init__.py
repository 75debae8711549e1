import os
from flask import Flask
from .extensions import db, migrate, login_manager
from .config import get_config
from .blueprints import register_blueprints
from .errors import register_error_handlers
from .utils.logs import configure_logging
from .seeds import register_commands


def create_app(config_class=None):

    app = Flask(__name__)

    if config_class is None or isinstance(config_class, str):
        config_class = get_config(config_class)

    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # Import models so that every table is known to the metadata
    from . import models  # noqa: F401

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    app.logger.info("campus_admin started (%s)", config_class.__name__)

    return app
