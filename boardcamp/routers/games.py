"""
Router de jogos
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from boardcamp.database import get_db
from boardcamp.schemas.game import GameCreate, GameResponse
from boardcamp.services import game_service

router = APIRouter()

@router.get("/games", response_model=List[GameResponse])
def list_games(name: Optional[str] = None, db: Session = Depends(get_db)):
    return game_service.list_games(db, name)

@router.post("/games", status_code=201)
def create_game(game: GameCreate, db: Session = Depends(get_db)):
    game_service.create_game(db, game)
    return Response(status_code=201)
