"""
Modelo de aluguéis
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from boardcamp.database import Base

class Rental(Base):
    """Aluguel de uma cópia de jogo por um cliente.

    Datas ficam gravadas como texto no formato ``YYYY-M-D`` (sem zeros à
    esquerda). ``return_date`` e ``delay_fee`` só são preenchidos na
    devolução.
    """
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column("customerId", Integer, ForeignKey("customers.id"), nullable=False)
    game_id = Column("gameId", Integer, ForeignKey("games.id"), nullable=False)
    rent_date = Column("rentDate", String(10), nullable=False)
    days_rented = Column("daysRented", Integer, nullable=False)
    return_date = Column("returnDate", String(10))
    original_price = Column("originalPrice", Integer, nullable=False)
    delay_fee = Column("delayFee", Integer)

    # Relacionamentos
    customer = relationship("Customer", back_populates="rentals")
    game = relationship("Game", back_populates="rentals")

    @property
    def is_returned(self) -> bool:
        return self.return_date is not None
