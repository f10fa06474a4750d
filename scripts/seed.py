from sqlmodel import Session

from taskboard.core.config import settings
from taskboard.core.logging_setup import setup_logging
from taskboard.db.session import build_engine, init_db
from taskboard.db.seed import seed_all


def run_seed():
    setup_logging(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    engine = build_engine(settings)
    init_db(engine)
    try:
        with Session(engine) as session:
            seed_all(session, settings.SEED_PATH)
    finally:
        engine.dispose()


if __name__ == "__main__":
    run_seed()
