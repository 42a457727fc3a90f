"""
Modelo de jogos do acervo
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from boardcamp.database import Base

class Game(Base):
    """Jogo disponível para locação"""
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), unique=True, nullable=False)
    image = Column(Text)
    stock_total = Column("stockTotal", Integer, nullable=False)
    category_id = Column("categoryId", Integer, ForeignKey("categories.id"), nullable=False)
    price_per_day = Column("pricePerDay", Integer, nullable=False)

    # Relacionamentos
    category = relationship("Category", back_populates="games")
    rentals = relationship("Rental", back_populates="game")
