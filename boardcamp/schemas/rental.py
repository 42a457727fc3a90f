"""
Schemas Pydantic para aluguéis
"""

from pydantic import BaseModel, validator
from typing import Optional

class RentalCreate(BaseModel):
    customerId: int
    gameId: int
    daysRented: int

    @validator('daysRented')
    def validate_days_rented(cls, v):
        if v <= 0:
            raise ValueError('daysRented must be greater than 0')
        return v

class RentalCustomer(BaseModel):
    id: int
    name: str

class RentalGame(BaseModel):
    id: int
    name: str
    categoryId: int
    categoryName: str

class RentalResponse(BaseModel):
    id: int
    customerId: int
    gameId: int
    rentDate: str
    daysRented: int
    returnDate: Optional[str] = None
    originalPrice: int
    delayFee: Optional[int] = None
    customer: RentalCustomer
    game: RentalGame
