import os

from sqlalchemy.engine import URL


def build_database_uri(host, port, user, password, name, driver="mysql+pymysql"):
    """Build the SQLAlchemy URL for the seeding target.

    For SQLite drivers ``name`` is the database file path and the
    host/credential arguments are ignored.
    """
    if driver.startswith("sqlite"):
        return URL.create(driver, database=name or None).render_as_string(hide_password=False)

    url = URL.create(
        driver,
        username=user or None,
        password=password or None,
        host=host or None,
        port=int(port) if port else None,
        database=name,
        query={"charset": "utf8mb4"} if driver.startswith("mysql") else {},
    )
    return url.render_as_string(hide_password=False)


class Config:
    DEBUG = False

    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "3306")
    DB_USER = os.getenv("DB_USER", "root")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "")
    DB_DRIVER = os.getenv("DB_DRIVER", "mysql+pymysql")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URI",
        build_database_uri(DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME, DB_DRIVER)
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,   # test connection before use
        "pool_recycle": 1800,    # recycle every 30min
        "pool_size": 5,
        "max_overflow": 10
    }

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
