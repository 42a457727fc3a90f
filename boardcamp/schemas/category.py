"""
Schemas Pydantic para categorias
"""

from pydantic import BaseModel, validator

class CategoryCreate(BaseModel):
    name: str

    @validator('name')
    def validate_name(cls, v):
        if not v:
            raise ValueError('name must not be empty')
        return v

class CategoryResponse(BaseModel):
    id: int
    name: str
