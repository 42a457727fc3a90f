"""
Modelo de categorias de jogos
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from boardcamp.database import Base

class Category(Base):
    """Categoria de jogo (ex.: Estratégia, RPG)"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, nullable=False)

    # Relacionamentos
    games = relationship("Game", back_populates="category")
