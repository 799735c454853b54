import os
from dataclasses import dataclass

from sqlalchemy.engine import URL


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(v.strip() for v in value.split(",") if v.strip())


def _default_sqlite_uri() -> str:
    # library_loans/ -> proyecto/
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    instance_dir = os.path.join(project_root, "instance")
    os.makedirs(instance_dir, exist_ok=True)
    db_path = os.path.join(instance_dir, "library.db")
    return "sqlite:///" + db_path


def _database_uri() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("DB_HOST")
    if host:
        url = URL.create(
            "mysql+pymysql",
            username=os.getenv("DB_USER") or None,
            password=os.getenv("DB_PASSWORD") or None,
            host=host,
            database=os.getenv("DB_DATABASE") or None,
        )
        return url.render_as_string(hide_password=False)

    return _default_sqlite_uri()


@dataclass(frozen=True)
class BaseConfig:
    SQLALCHEMY_DATABASE_URI: str = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # only applied to server databases (sqlite uses its own pool classes)
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))

    PORT: int = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    ENFORCE_FOREIGN_KEYS: bool = _bool(os.getenv("ENFORCE_FOREIGN_KEYS"), default=False)
    # empty = any free-text status is accepted
    LOAN_STATUSES: tuple[str, ...] = _csv(os.getenv("LOAN_STATUSES"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SEED_DATA_DIR: str = os.getenv(
        "SEED_DATA_DIR",
        os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "seed_data")),
    )


class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True


class ProductionConfig(BaseConfig):
    DEBUG: bool = False


def get_config():
    env = os.getenv("FLASK_ENV", "development").lower()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
