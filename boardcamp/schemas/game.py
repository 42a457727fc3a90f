"""
Schemas Pydantic para jogos
"""

from pydantic import BaseModel, validator
from typing import Optional

class GameCreate(BaseModel):
    name: str
    image: Optional[str] = None
    stockTotal: int
    pricePerDay: int
    categoryId: int

    @validator('name')
    def validate_name(cls, v):
        if not v:
            raise ValueError('name must not be empty')
        return v

    @validator('stockTotal')
    def validate_stock_total(cls, v):
        if v < 1:
            raise ValueError('stockTotal must be greater than 0')
        return v

    @validator('pricePerDay')
    def validate_price_per_day(cls, v):
        if v < 1:
            raise ValueError('pricePerDay must be greater than 0')
        return v

class GameResponse(BaseModel):
    id: int
    name: str
    image: Optional[str] = None
    stockTotal: int
    categoryId: int
    pricePerDay: int
    categoryName: str
