from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event

db = SQLAlchemy()
migrate = Migrate()
cors = CORS()


def enable_sqlite_foreign_keys(engine) -> bool:
    """
    SQLite ignores declared foreign keys unless every connection opts in.
    Other backends (MySQL/InnoDB) enforce them from the schema.
    """
    if engine.dialect.name != "sqlite":
        return False

    @event.listens_for(engine, "connect")
    def _fk_pragma(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return True
