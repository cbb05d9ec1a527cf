# safepin/db/init_db.py
from safepin.db.base import Base
from safepin.db.session import engine
from safepin import models  # noqa: F401


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
