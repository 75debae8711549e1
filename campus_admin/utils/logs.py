import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def configure_logging(app):
    # app.logger is shared by every app built from this package
    if getattr(app.logger, "_handlers_configured", False):
        return

    level = app.config.get("LOG_LEVEL", "INFO")
    app.logger.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s"))
    app.logger.addHandler(console)

    if app.config.get("LOG_TO_FILE", True):
        log_dir = Path(app.config.get("LOG_DIR", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_dir / "app.log", maxBytes=2_000_000, backupCount=5)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(funcName)s: %(message)s"))
        app.logger.addHandler(file_handler)

    app.logger._handlers_configured = True
