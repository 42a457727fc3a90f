"""
Router de categorias
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List
from boardcamp.database import get_db
from boardcamp.schemas.category import CategoryCreate, CategoryResponse
from boardcamp.services import category_service

router = APIRouter()

@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return category_service.list_categories(db)

@router.post("/categories", status_code=201)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    category_service.create_category(db, category.name)
    return Response(status_code=201)
