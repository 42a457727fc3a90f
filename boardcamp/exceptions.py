"""
Exceções de domínio levantadas pelos serviços.

Cada exceção carrega o status HTTP correspondente e uma lista de
mensagens; o handler registrado em ``main`` as converte em JSON.
"""

from typing import List, Optional


class ServiceError(Exception):
    """Base das falhas esperadas de uma operação de serviço"""

    status_code = 500

    def __init__(self, *messages: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or []) + list(messages)
        super().__init__("; ".join(self.errors))


class ValidationError(ServiceError):
    """Campo ausente/inválido ou referência inexistente (400)"""

    status_code = 400


class NotFoundError(ServiceError):
    """Registro endereçado pela URL não existe (404)"""

    status_code = 404


class ConflictError(ServiceError):
    """Violação de unicidade (409)"""

    status_code = 409
