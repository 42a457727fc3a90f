"""
Testes para os modelos do banco de dados Boardcamp
"""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase

from boardcamp.database import Base
from boardcamp.models import Category, Game, Customer, Rental


class TestModels:

    def test_game_columns_use_stored_names(self):
        assert set(Game.__table__.columns.keys()) == {
            "id", "name", "image", "stockTotal", "categoryId", "pricePerDay"
        }
        assert set(Rental.__table__.columns.keys()) == {
            "id", "customerId", "gameId", "rentDate", "daysRented",
            "returnDate", "originalPrice", "delayFee",
        }

    def test_relationships(self, db_session):
        category = Category(name="Party")
        game = Game(name="Dixit", stock_total=2, price_per_day=300, category=category)
        customer = Customer(name="Carla", phone="11988887777", cpf="44444444444", birthday=date(2000, 1, 1))
        rental = Rental(customer=customer, game=game, rent_date="2024-5-1", days_rented=2, original_price=600)
        db_session.add(rental)
        db_session.commit()

        saved = db_session.query(Rental).first()
        assert saved.game.category.name == "Party"
        assert saved.customer.cpf == "44444444444"
        assert saved.is_returned is False
        assert category.games == [game]

    def test_unique_cpf(self, db_session):
        db_session.add(Customer(name="A", phone="1199999999", cpf="55555555555", birthday=date(1990, 1, 1)))
        db_session.commit()
        db_session.add(Customer(name="B", phone="1199999999", cpf="55555555555", birthday=date(1991, 1, 1)))
        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_declarative_base_registers_tables(self):
        assert issubclass(Base, DeclarativeBase)
        assert set(Base.metadata.tables) == {"categories", "games", "customers", "rentals"}
