from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional
from pathlib import Path
from sqlalchemy.engine import URL
import importlib.util

class Settings(BaseSettings):
    app_name: str = Field(default="EventHub API", alias="APP_NAME")
    env: str = Field(default="dev", alias="ENV")
    port: int = Field(default=5000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    secret_key: Optional[str] = Field(default=None, alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", alias="ALGORITHM")
    # Either a full DATABASE_URL or the DB_* parts below must be provided
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_driver: str = Field(default="postgresql+psycopg", alias="DB_DRIVER")
    db_host: Optional[str] = Field(default=None, alias="DB_HOST")
    db_port: Optional[int] = Field(default=None, alias="DB_PORT")
    db_user: Optional[str] = Field(default=None, alias="DB_USER")
    db_password: Optional[str] = Field(default=None, alias="DB_PASSWORD")
    db_name: Optional[str] = Field(default=None, alias="DB_NAME")
    upload_dir: str = Field(default="uploads", alias="UPLOAD_DIR")
    cookie_secure: bool = Field(default=False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field(default="lax", alias="COOKIE_SAMESITE")
    # Raw env value (string), parsed to a list via property to avoid JSON decoding errors
    cors_origins_raw: Optional[str] = Field(default=None, alias="CORS_ORIGINS", description="Comma separated list of allowed CORS origins")

    class Config:
        # Load env from backend/.env regardless of CWD
        env_file = str(Path(__file__).resolve().parents[2] / ".env")
        case_sensitive = False
        extra = "ignore"

    def _parse_list(self, v: Optional[str]) -> List[str]:
        if v is None:
            return []
        s = v.strip()
        if not s:
            return []
        if s.startswith("[") and s.endswith("]"):
            import json
            try:
                loaded = json.loads(s)
            except ValueError:
                loaded = None
            if isinstance(loaded, list):
                return [str(e).strip() for e in loaded if str(e).strip()]
        return [e.strip() for e in s.split(",") if e.strip()]

    @property
    def cors_origins(self) -> List[str]:
        items = self._parse_list(self.cors_origins_raw)
        # Fallback to the Vite dev server if none provided
        if not items:
            return ["http://localhost:5173", "http://127.0.0.1:5173"]
        # Dev convenience: ensure both localhost and 127.0.0.1 variants for same ports
        augmented = set(items)
        for origin in items:
            if origin.startswith("http://localhost:"):
                augmented.add("http://127.0.0.1:" + origin.rsplit(":", 1)[1])
            if origin.startswith("http://127.0.0.1:"):
                augmented.add("http://localhost:" + origin.rsplit(":", 1)[1])
        return sorted(augmented)

    def missing_required(self) -> List[str]:
        """Names of required settings that are not configured."""
        missing = []
        if not self.secret_key:
            missing.append("SECRET_KEY")
        if not self.database_url:
            for name, value in (("DB_HOST", self.db_host), ("DB_USER", self.db_user), ("DB_NAME", self.db_name)):
                if not value:
                    missing.append(name)
        return missing

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return normalize_database_url(self.database_url)
        if not (self.db_host and self.db_user and self.db_name):
            raise RuntimeError("Database is not configured: set DATABASE_URL or DB_HOST, DB_USER and DB_NAME")
        url = URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at the psycopg (v3) driver.

    A bare 'postgresql://' makes SQLAlchemy load psycopg2; only psycopg v3 is
    a dependency, so the driver is injected unless psycopg2 happens to be installed.
    """
    # Normalize legacy prefix 'postgres://' -> 'postgresql://'
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if not url.startswith("postgresql://"):
        return url
    if importlib.util.find_spec("psycopg2") is not None:
        return url
    return url.replace("postgresql://", "postgresql+psycopg://", 1)


settings = Settings()  # type: ignore
