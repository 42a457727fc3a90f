"""
Regras de negócio de categorias
"""

import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from boardcamp.exceptions import ConflictError, ValidationError
from boardcamp.models.category import Category
from boardcamp.services import commit_unique

logger = logging.getLogger(__name__)


def serialize_category(category: Category) -> Dict:
    return {"id": category.id, "name": category.name}


def list_categories(db: Session) -> List[Dict]:
    return [serialize_category(c) for c in db.query(Category).order_by(Category.id).all()]


def create_category(db: Session, name: str) -> Category:
    if not name:
        raise ValidationError("name must not be empty")

    # Comparação exata, sensível a maiúsculas
    if db.query(Category).filter(Category.name == name).first():
        raise ConflictError(f"category '{name}' already exists")

    category = Category(name=name)
    db.add(category)
    commit_unique(db, f"category '{name}' already exists")
    db.refresh(category)
    logger.info("Categoria criada: id=%s name=%s", category.id, category.name)
    return category
