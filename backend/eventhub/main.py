import logging
import os
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from eventhub.api.router import api_router
from eventhub.core.config import settings
from eventhub.core.errors import register_exception_handlers
from eventhub.core.logging import setup_logging
from eventhub.db.init_db import create_tables
from eventhub.db.session import check_connection
from eventhub.services.uploads import PUBLIC_PREFIX

logger = logging.getLogger(__name__)

def _run_migrations():
    """Apply Alembic migrations to head.

    Controlled by env var AUTO_APPLY_MIGRATIONS (default: '1'). Safe to run repeatedly.
    """
    if os.getenv("AUTO_APPLY_MIGRATIONS", "1") != "1":
        return
    from alembic import command
    from alembic.config import Config
    alembic_ini = Path(__file__).resolve().parents[1] / "alembic.ini"
    if not alembic_ini.exists():
        logger.warning("alembic.ini not found at %s, skipping migrations", alembic_ini)
        return
    cfg = Config(str(alembic_ini))
    # Ensure script_location resolves correctly when launched from arbitrary CWD
    cfg.set_main_option("script_location", str(alembic_ini.parent / "alembic"))
    logger.info("Applying Alembic migrations -> head")
    command.upgrade(cfg, "head")

app = FastAPI(title=settings.app_name, version="0.1.0")

# Cookie auth needs credentials; origins come from CORS_ORIGINS (dev default: Vite on :5173)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)
app.include_router(api_router)
app.mount(f"/{PUBLIC_PREFIX}", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

@app.on_event("startup")
def startup():
    """Refuse to serve without configuration or a reachable database."""
    setup_logging(settings.log_level)
    missing = settings.missing_required()
    if missing:
        logger.critical("Missing required settings: %s", ", ".join(missing))
        raise SystemExit(1)
    try:
        check_connection()
    except SQLAlchemyError as exc:
        logger.critical("Error connecting to the database: %s", exc)
        raise SystemExit(1)
    logger.info("Connected to the database")
    if settings.env.lower() == "prod":
        _run_migrations()
    else:
        create_tables()
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

def run():
    import uvicorn

    uvicorn.run("eventhub.main:app", host="0.0.0.0", port=settings.port)
