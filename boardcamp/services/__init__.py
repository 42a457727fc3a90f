"""
Serviços de domínio da locadora.

Cada função recebe a ``Session`` injetada pela rota e levanta as
exceções de ``boardcamp.exceptions`` quando uma regra é violada.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boardcamp.exceptions import ConflictError


def commit_unique(db: Session, message: str) -> None:
    """Confirma a transação traduzindo violação de unicidade em 409.

    A checagem prévia feita pelos serviços não é atômica; duas requisições
    concorrentes podem passar por ela, e a constraint do banco decide.
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(message)
