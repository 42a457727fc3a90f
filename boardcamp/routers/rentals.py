"""
Router de aluguéis
"""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from boardcamp.database import get_db
from boardcamp.schemas.rental import RentalCreate, RentalResponse
from boardcamp.services import rental_service

router = APIRouter()

@router.get("/rentals", response_model=List[RentalResponse])
def list_rentals(
    customer_id: Optional[int] = Query(None, alias="customerId"),
    game_id: Optional[int] = Query(None, alias="gameId"),
    db: Session = Depends(get_db)
):
    return rental_service.list_rentals(db, customer_id=customer_id, game_id=game_id)

@router.post("/rentals", status_code=201)
def create_rental(rental: RentalCreate, db: Session = Depends(get_db)):
    rental_service.create_rental(db, rental)
    return Response(status_code=201)

@router.post("/rentals/{rental_id}/return")
def return_rental(rental_id: int, db: Session = Depends(get_db)):
    rental_service.return_rental(db, rental_id)
    return Response(status_code=200)

@router.delete("/rentals/{rental_id}")
def delete_rental(rental_id: int, db: Session = Depends(get_db)):
    rental_service.delete_rental(db, rental_id)
    return Response(status_code=200)
