"""
Router de clientes
"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List, Optional
from boardcamp.database import get_db
from boardcamp.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse
from boardcamp.services import customer_service

router = APIRouter()

@router.get("/customers", response_model=List[CustomerResponse])
def list_customers(cpf: Optional[str] = None, db: Session = Depends(get_db)):
    return customer_service.list_customers(db, cpf)

@router.get("/customers/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = customer_service.get_customer(db, customer_id)
    return customer_service.serialize_customer(customer)

@router.post("/customers", status_code=201)
def create_customer(customer: CustomerCreate, db: Session = Depends(get_db)):
    customer_service.create_customer(db, customer)
    return Response(status_code=201)

@router.put("/customers/{customer_id}")
def update_customer(customer_id: int, customer_update: CustomerUpdate, db: Session = Depends(get_db)):
    customer_service.update_customer(db, customer_id, customer_update)
    return Response(status_code=200)
