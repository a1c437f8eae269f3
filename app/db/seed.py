import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session, func, select

from app.db.models.notes import Note, utcnow
from app.db.models.todos import Todo

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).with_name("seed_data.yaml")


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Helpers
# -----------------------------
def _is_empty(session: Session, model) -> bool:
    return session.exec(select(func.count(model.id))).one() == 0


# -----------------------------
# Seeds
# -----------------------------
def seed_todos(session: Session, items: List[Dict[str, Any]]) -> int:
    if not _is_empty(session, Todo):
        logger.info("todos déjà remplie, seed ignoré")
        return 0
    for item in items:
        if not item.get("task"):
            raise ValueError(f"Todo sans 'task' dans le seed: {item!r}")
        session.add(Todo(task=item["task"], completed=bool(item.get("completed", False))))
    session.commit()
    return len(items)


def seed_notes(session: Session, items: List[Dict[str, Any]]) -> int:
    if not _is_empty(session, Note):
        logger.info("notes déjà remplie, seed ignoré")
        return 0
    for item in items:
        if not item.get("content"):
            raise ValueError(f"Note sans 'content' dans le seed: {item!r}")
        stamp = utcnow()
        session.add(Note(title=item.get("title") or None, content=item["content"], created_at=stamp, updated_at=stamp))
    session.commit()
    return len(items)


def seed_all(session: Session, seed_path: str | Path = DEFAULT_SEED_PATH) -> Dict[str, int]:
    data = load_seed_yaml(seed_path)
    counts = {
        "todos": seed_todos(session, data.get("todos", [])),
        "notes": seed_notes(session, data.get("notes", [])),
    }
    logger.info("Seed terminé: %s", counts)
    return counts
