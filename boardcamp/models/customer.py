"""
Modelo de clientes
"""

from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from boardcamp.database import Base

class Customer(Base):
    """Cliente da locadora, identificado pelo CPF"""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    phone = Column(String(11), nullable=False)
    cpf = Column(String(11), unique=True, index=True, nullable=False)
    birthday = Column(Date, nullable=False)

    # Relacionamentos
    rentals = relationship("Rental", back_populates="customer")
