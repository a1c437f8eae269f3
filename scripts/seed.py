"""
Remplit les tables todos et notes depuis app/db/seed_data.yaml (si elles sont vides).

Usage (depuis la racine du repo) : python -m scripts.seed
"""

from sqlmodel import Session

from app.core.config import settings
from app.core.log_config import configure_logging
from app.db.seed import DEFAULT_SEED_PATH, seed_all
from app.db.session import build_engine, init_db


def run_seed() -> None:
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings)
    init_db(engine)
    with Session(engine) as session:
        seed_all(session, DEFAULT_SEED_PATH)
    engine.dispose()


if __name__ == "__main__":
    run_seed()
