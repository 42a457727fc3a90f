"""
Regras de negócio de jogos
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from boardcamp.exceptions import ConflictError, ValidationError
from boardcamp.models.category import Category
from boardcamp.models.game import Game
from boardcamp.schemas.game import GameCreate
from boardcamp.services import commit_unique

logger = logging.getLogger(__name__)


def serialize_game(game: Game, category_name: str) -> Dict:
    return {
        "id": game.id,
        "name": game.name,
        "image": game.image,
        "stockTotal": game.stock_total,
        "categoryId": game.category_id,
        "pricePerDay": game.price_per_day,
        "categoryName": category_name,
    }


def matches_name_prefix(name: str, prefix: str) -> bool:
    """Prefixo sem diferenciar maiúsculas/minúsculas"""
    return name[:len(prefix)].lower() == prefix.lower()


def list_games(db: Session, name: Optional[str] = None) -> List[Dict]:
    rows = (
        db.query(Game, Category.name)
        .join(Category, Game.category_id == Category.id)
        .order_by(Game.id)
        .all()
    )
    if name:
        rows = [(game, category_name) for game, category_name in rows if matches_name_prefix(game.name, name)]
    return [serialize_game(game, category_name) for game, category_name in rows]


def create_game(db: Session, data: GameCreate) -> Game:
    category = db.query(Category).filter(Category.id == data.categoryId).first()
    if not category:
        raise ValidationError(f"categoryId {data.categoryId} does not reference an existing category")

    if db.query(Game).filter(Game.name == data.name).first():
        raise ConflictError(f"game '{data.name}' already exists")

    game = Game(
        name=data.name,
        image=data.image,
        stock_total=data.stockTotal,
        category_id=data.categoryId,
        price_per_day=data.pricePerDay,
    )
    db.add(game)
    commit_unique(db, f"game '{data.name}' already exists")
    db.refresh(game)
    logger.info("Jogo criado: id=%s name=%s category=%s", game.id, game.name, category.name)
    return game
