"""
Boardcamp - Locadora de jogos de tabuleiro
Aplicação principal FastAPI
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from contextlib import asynccontextmanager
import logging
import os
import traceback

# Carregar variáveis de ambiente do .env (antes de importar o banco)
load_dotenv()

# Importar configuração do banco de dados
from boardcamp.database import engine, Base
from boardcamp.exceptions import ServiceError
from boardcamp.logging_config import setup_logging
from boardcamp.version import APP_VERSION

# Importar modelos para criar as tabelas
import boardcamp.models  # noqa: F401

# Importar routers
from boardcamp.routers import categories, games, customers, rentals

logger = logging.getLogger("boardcamp")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerenciar ciclo de vida da aplicação"""
    # Startup
    logger.info("Iniciando Boardcamp %s...", APP_VERSION)
    Base.metadata.create_all(bind=engine)
    logger.info("Tabelas verificadas, servidor online")

    yield

    # Shutdown
    logger.info("Encerrando Boardcamp...")
    engine.dispose()


setup_logging(os.getenv("LOG_LEVEL", "INFO"))

app = FastAPI(
    title="Boardcamp",
    description="API de gestão de locadora de jogos de tabuleiro",
    version=APP_VERSION,
    lifespan=lifespan
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Incluir routers
app.include_router(categories.router, tags=["Categorias"])
app.include_router(games.router, tags=["Jogos"])
app.include_router(customers.router, tags=["Clientes"])
app.include_router(rentals.router, tags=["Aluguéis"])


@app.get("/health")
async def health_check():
    """Endpoint de verificação de saúde"""
    return {"status": "healthy", "version": APP_VERSION}


def _format_validation_error(error: dict) -> str:
    fields = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    message = error.get("msg", "invalid value")
    return f"{'.'.join(fields)}: {message}" if fields else message


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Erros de formato da requisição viram 400 com todas as mensagens"""
    return JSONResponse(
        status_code=400,
        content={"errors": [_format_validation_error(e) for e in exc.errors()]}
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Handler para regras de negócio violadas (400, 404, 409)"""
    return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc):
    """Handler para erros internos do servidor"""
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error("Erro interno em %s %s\n%s", request.method, request.url.path, tb)
    return JSONResponse(
        status_code=500,
        content={
            "error_code": 500,
            "error_message": "Erro interno do servidor",
            "detail": str(exc),
        }
    )
