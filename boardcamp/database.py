"""
Configuração do banco de dados SQLAlchemy
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
import os

# URL do banco de dados (sqlite local ou postgresql://...)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./boardcamp.db")


def build_engine(url: str):
    """Engine para a URL informada; sqlite precisa liberar o uso entre threads"""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base declarativa dos modelos da locadora"""


def get_db():
    """Dependency que entrega uma sessão por requisição"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
