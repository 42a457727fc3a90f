"""
Regras de negócio de clientes
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from boardcamp.exceptions import ConflictError, NotFoundError
from boardcamp.models.customer import Customer
from boardcamp.schemas.customer import CustomerCreate, CustomerUpdate
from boardcamp.services import commit_unique

logger = logging.getLogger(__name__)


def serialize_customer(customer: Customer) -> Dict:
    return {
        "id": customer.id,
        "name": customer.name,
        "phone": customer.phone,
        "cpf": customer.cpf,
        "birthday": customer.birthday,
    }


def list_customers(db: Session, cpf: Optional[str] = None) -> List[Dict]:
    customers = db.query(Customer).order_by(Customer.id).all()
    if cpf:
        customers = [c for c in customers if c.cpf.startswith(cpf)]
    return [serialize_customer(c) for c in customers]


def get_customer(db: Session, customer_id: int) -> Customer:
    customer = db.query(Customer).filter(Customer.id == customer_id).first()
    if not customer:
        raise NotFoundError(f"customer {customer_id} not found")
    return customer


def create_customer(db: Session, data: CustomerCreate) -> Customer:
    if db.query(Customer).filter(Customer.cpf == data.cpf).first():
        raise ConflictError(f"cpf {data.cpf} already registered")

    customer = Customer(name=data.name, phone=data.phone, cpf=data.cpf, birthday=data.birthday)
    db.add(customer)
    commit_unique(db, f"cpf {data.cpf} already registered")
    db.refresh(customer)
    logger.info("Cliente criado: id=%s", customer.id)
    return customer


def update_customer(db: Session, customer_id: int, data: CustomerUpdate) -> Customer:
    customer = get_customer(db, customer_id)

    # Só há conflito se o CPF já existir e for de outro cliente
    owner = db.query(Customer).filter(Customer.cpf == data.cpf).first()
    if owner is not None and owner.id != customer_id:
        raise ConflictError(f"cpf {data.cpf} belongs to another customer")

    for field, value in data.dict().items():
        setattr(customer, field, value)

    commit_unique(db, f"cpf {data.cpf} belongs to another customer")
    db.refresh(customer)
    logger.info("Cliente atualizado: id=%s", customer.id)
    return customer
