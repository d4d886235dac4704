from sqlalchemy.engine import Engine

from eventhub.db.session import get_engine
from eventhub.models import user  # noqa: F401
from eventhub.models import event  # noqa: F401
from eventhub.models import ticket  # noqa: F401
from eventhub.models.base import Base

def create_tables(engine: Engine | None = None):
    """Create missing tables directly from the models (dev and tests; prod uses alembic)."""
    Base.metadata.create_all(bind=engine or get_engine())
