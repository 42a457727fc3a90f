"""
Regras de negócio de aluguéis.

Ciclo de vida de um aluguel::

    ativo (returnDate nulo) -> devolvido (returnDate e delayFee) -> removido

Não existe transição de volta para ativo, e só aluguéis devolvidos podem
ser removidos.

Datas são gravadas como ``YYYY-M-D``, sem zeros à esquerda em mês e dia.
A multa por atraso é a diferença entre o dia do mês da devolução e o dia
do mês do aluguel; mês e ano não entram na conta, então devoluções em
outro mês podem gerar valores negativos.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from boardcamp.exceptions import NotFoundError, ValidationError
from boardcamp.models.customer import Customer
from boardcamp.models.game import Game
from boardcamp.models.rental import Rental
from boardcamp.schemas.rental import RentalCreate

logger = logging.getLogger(__name__)


def format_rental_date(value: date) -> str:
    """Formata a data como ``YYYY-M-D`` (ex.: 2024-3-7)"""
    return f"{value.year}-{value.month}-{value.day}"


def day_of_month(value: str) -> int:
    return int(value.split("-")[2])


def compute_delay_fee(rent_date: str, today: date) -> int:
    return today.day - day_of_month(rent_date)


def serialize_rental(rental: Rental) -> Dict:
    game = rental.game
    return {
        "id": rental.id,
        "customerId": rental.customer_id,
        "gameId": rental.game_id,
        "rentDate": rental.rent_date,
        "daysRented": rental.days_rented,
        "returnDate": rental.return_date,
        "originalPrice": rental.original_price,
        "delayFee": rental.delay_fee,
        "customer": {"id": rental.customer.id, "name": rental.customer.name},
        "game": {
            "id": game.id,
            "name": game.name,
            "categoryId": game.category_id,
            "categoryName": game.category.name,
        },
    }


def list_rentals(db: Session, customer_id: Optional[int] = None, game_id: Optional[int] = None) -> List[Dict]:
    rentals = (
        db.query(Rental)
        .options(joinedload(Rental.customer), joinedload(Rental.game).joinedload(Game.category))
        .order_by(Rental.id)
        .all()
    )
    # customerId tem precedência sobre gameId
    if customer_id is not None:
        rentals = [r for r in rentals if r.customer_id == customer_id]
    elif game_id is not None:
        rentals = [r for r in rentals if r.game_id == game_id]
    return [serialize_rental(r) for r in rentals]


def get_rental(db: Session, rental_id: int) -> Rental:
    rental = db.query(Rental).filter(Rental.id == rental_id).first()
    if not rental:
        raise NotFoundError(f"rental {rental_id} not found")
    return rental


def count_rentals_for_game(db: Session, game_id: int) -> int:
    """Quantidade de aluguéis do jogo, devolvidos ou não"""
    return db.query(func.count(Rental.id)).filter(Rental.game_id == game_id).scalar() or 0


def create_rental(db: Session, data: RentalCreate, today: Optional[date] = None) -> Rental:
    customer = db.query(Customer).filter(Customer.id == data.customerId).first()
    if not customer:
        raise ValidationError(f"customerId {data.customerId} does not reference an existing customer")

    game = db.query(Game).filter(Game.id == data.gameId).first()
    if not game:
        raise ValidationError(f"gameId {data.gameId} does not reference an existing game")

    # TODO: a contagem e o insert não são atômicos; aluguéis simultâneos do
    # mesmo jogo podem ultrapassar stockTotal até haver lock por jogo.
    if count_rentals_for_game(db, game.id) >= game.stock_total:
        raise ValidationError(f"game {game.id} has no copies available")

    rental = Rental(
        customer_id=customer.id,
        game_id=game.id,
        rent_date=format_rental_date(today or date.today()),
        days_rented=data.daysRented,
        original_price=data.daysRented * game.price_per_day,
        return_date=None,
        delay_fee=None,
    )
    db.add(rental)
    db.commit()
    db.refresh(rental)
    logger.info(
        "Aluguel criado: id=%s customer=%s game=%s price=%s",
        rental.id, rental.customer_id, rental.game_id, rental.original_price,
    )
    return rental


def return_rental(db: Session, rental_id: int, today: Optional[date] = None) -> Rental:
    rental = get_rental(db, rental_id)
    if rental.is_returned:
        raise ValidationError(f"rental {rental_id} was already returned")

    today = today or date.today()
    rental.delay_fee = compute_delay_fee(rental.rent_date, today)
    rental.return_date = format_rental_date(today)
    db.commit()
    db.refresh(rental)
    logger.info("Aluguel devolvido: id=%s delayFee=%s", rental.id, rental.delay_fee)
    return rental


def delete_rental(db: Session, rental_id: int) -> None:
    rental = get_rental(db, rental_id)
    if not rental.is_returned:
        raise ValidationError(f"rental {rental_id} must be returned before it is deleted")

    db.delete(rental)
    db.commit()
    logger.info("Aluguel removido: id=%s", rental_id)
