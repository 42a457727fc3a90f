"""
Schemas Pydantic para clientes
"""

from pydantic import BaseModel, validator
from datetime import date
import re

# Limites exclusivos para a data de nascimento
MIN_BIRTHDAY = date(1922, 1, 1)
MAX_BIRTHDAY = date(2010, 1, 1)

# Somente dígitos ASCII
PHONE_PATTERN = re.compile(r"[0-9]{10,11}")
CPF_PATTERN = re.compile(r"[0-9]{11}")

class CustomerBase(BaseModel):
    name: str
    phone: str
    cpf: str
    birthday: date

    @validator('name')
    def validate_name(cls, v):
        if not v:
            raise ValueError('name must not be empty')
        return v

    @validator('phone')
    def validate_phone(cls, v):
        if not PHONE_PATTERN.fullmatch(v):
            raise ValueError('phone must have 10 or 11 digits')
        return v

    @validator('cpf')
    def validate_cpf(cls, v):
        if not CPF_PATTERN.fullmatch(v):
            raise ValueError('cpf must have exactly 11 digits')
        return v

    @validator('birthday')
    def validate_birthday(cls, v):
        if not (MIN_BIRTHDAY < v < MAX_BIRTHDAY):
            raise ValueError(
                f"birthday must be between {MIN_BIRTHDAY.isoformat()} and {MAX_BIRTHDAY.isoformat()}"
            )
        return v

class CustomerCreate(CustomerBase):
    pass

class CustomerUpdate(CustomerBase):
    """PUT substitui todos os campos, portanto nenhum é opcional"""
    pass

class CustomerResponse(BaseModel):
    id: int
    name: str
    phone: str
    cpf: str
    birthday: date
