"""Configuration settings for dbscope.

All values come from environment variables.  The ``PG*`` names match the
variables understood by libpq so the service can share an environment
with ``psql`` and friends.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Service settings.

    Attributes:
    ----------
        PGHOST (str): Database host.
        PGPORT (int): Database port.
        PGDATABASE (str): Database name.
        PGUSER (str): Database user.
        PGPASSWORD (str): Database password.
        HOST (str): Address the HTTP server binds to.
        PORT (int): Port the HTTP server listens on.
        DB_POOL_SIZE (int): Persistent connections kept by the pool.
        DB_MAX_OVERFLOW (int): Connections allowed beyond the pool size.
        DB_POOL_TIMEOUT (Optional[float]): Seconds a checkout may wait; None waits forever.
        POOL_SAMPLE_INTERVAL (float): Seconds between connection pool samples.
        LOG_LEVEL (str): Root log level.
        LOCAL_DEVELOPMENT (bool): Emit human-readable logs instead of JSON.
    """

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    PGHOST: str = "postgres"
    PGPORT: int = 5432
    PGDATABASE: str = "devdb"
    PGUSER: str = "devuser"
    PGPASSWORD: str = "devpass"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    DB_POOL_SIZE: int = Field(default=10, ge=1)
    DB_MAX_OVERFLOW: int = Field(default=0, ge=0)
    DB_POOL_TIMEOUT: Optional[float] = None

    POOL_SAMPLE_INTERVAL: float = Field(default=5.0, gt=0)

    LOG_LEVEL: str = "INFO"
    LOCAL_DEVELOPMENT: bool = False

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the asyncpg driver."""
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.PGUSER,
            password=self.PGPASSWORD,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        )


settings = Settings()
