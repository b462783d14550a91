"""Pydantic schema for the target database connection."""
from typing import Optional, Literal
from pydantic import BaseModel, Field
from sqlalchemy.engine import URL


class ConnectionConfig(BaseModel):
    db_type: Literal["sqlite", "postgresql"] = Field(..., description="Database engine type")

    # SQLite only
    file_path: Optional[str] = Field(None, description="Absolute path to .db file (SQLite only)")

    # PostgreSQL only
    host: Optional[str] = Field(None, description="Database host")
    port: Optional[int] = Field(5432, description="Database port")
    database: Optional[str] = Field(None, description="Database name")
    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Password")
    sslmode: Optional[str] = Field("require", description="libpq TLS mode")

    # Pool
    pool_size: int = Field(5, ge=1, description="Maximum concurrent physical connections")
    pool_timeout: int = Field(30, ge=1, description="Seconds to wait for a free connection")
    pool_recycle: int = Field(10, ge=1, description="Seconds before a pooled connection is replaced")

    @classmethod
    def from_settings(cls, s) -> "ConnectionConfig":
        return cls(
            db_type=s.DB_TYPE,
            file_path=s.SQLITE_PATH or None,
            host=s.DB_HOST,
            port=s.DB_PORT,
            database=s.DB_NAME,
            username=s.DB_USER,
            password=s.DB_PASSWORD,
            sslmode=s.DB_SSLMODE,
            pool_size=s.DB_POOL_SIZE,
            pool_timeout=s.DB_POOL_TIMEOUT_SECONDS,
            pool_recycle=s.DB_POOL_RECYCLE_SECONDS,
        )

    def get_sqlalchemy_url(self) -> URL:
        if self.db_type == "sqlite":
            return URL.create("sqlite", database=self.file_path)
        return URL.create(
            "postgresql+psycopg2",
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    def get_connect_args(self) -> dict:
        if self.db_type == "postgresql" and self.sslmode:
            return {"sslmode": self.sslmode}
        return {}
