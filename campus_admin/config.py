import os


class Config:

    SECRET_KEY = os.environ.get(
        "SECRET_KEY",
        "campus_admin_secret_key"
    )

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///campus_admin.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
    ALLOWED_EXTENSIONS = {"csv", "xlsx"}

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR", "logs")
    LOG_TO_FILE = True

    # Materials below this quantity are flagged as low stock
    LOW_STOCK_THRESHOLD = int(os.environ.get("LOW_STOCK_THRESHOLD", 10))


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    UPLOAD_FOLDER = os.path.join(os.environ.get("TMPDIR", "/tmp"), "campus_admin_uploads")
    LOG_TO_FILE = False
    LOG_LEVEL = "WARNING"


class ProductionConfig(Config):

    if os.environ.get("RENDER"):
        UPLOAD_FOLDER = "/tmp/uploads"
        LOG_DIR = "/tmp/logs"


CONFIGS = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name=None):
    name = name or os.environ.get("APP_ENV", "development")
    return CONFIGS.get(name, DevelopmentConfig)
