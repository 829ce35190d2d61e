# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI do sistema de controle financeiro.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from controle_financeiro.config import Settings
from controle_financeiro.database import (
    Base,
    check_connection,
    create_db_engine,
    create_session_factory,
)
from controle_financeiro.errors import register_exception_handlers

# Importa todos os modelos para o SQLAlchemy registrar as tabelas e relações
from controle_financeiro.models import categoria, conta, moeda, usuario  # noqa: F401

from controle_financeiro.routes import (
    categorias_fastapi,
    contas_fastapi,
    moedas_fastapi,
    usuarios_fastapi,
)
from controle_financeiro.services import moeda_service


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=settings.log_file or None,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    settings = app.state.settings

    # Testa a conexão; banco fora do ar é registrado no log, não derruba o processo
    try:
        check_connection(engine)
        logging.info("Conexão com o banco de dados estabelecida.")
    except Exception as e:
        logging.error(f"Não foi possível conectar ao banco de dados: {e}")

    # Cria as tabelas no banco de dados com tratamento de erros
    try:
        Base.metadata.create_all(bind=engine)
        logging.info("Tabelas criadas com sucesso!")
    except Exception as e:
        logging.error(f"Erro ao criar tabelas: {e}")

    if settings.popular_moedas:
        db = app.state.session_factory()
        try:
            moeda_service.criar_moedas_padrao(db)
        except Exception as e:
            logging.error(f"Erro ao criar moedas padrão: {e}")
        finally:
            db.close()

    yield

    logging.info("Encerrando servidor...")
    engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings)

    # Inicializa a aplicação FastAPI
    app = FastAPI(
        title="API de Controle Financeiro",
        description="API para gerenciamento de usuários, categorias, contas e moedas",
        version="1.0.0",
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
        lifespan=lifespan,
    )

    # Um único pool de conexões por processo, compartilhado por todas as rotas
    engine = create_db_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Montagem dos routers
    app.include_router(usuarios_fastapi.router, prefix="/usuarios")
    app.include_router(categorias_fastapi.router, prefix="/categorias")
    app.include_router(contas_fastapi.router, prefix="/contas")
    app.include_router(moedas_fastapi.router, prefix="/moedas")

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "mensagem": "API de Controle Financeiro está online!",
            "versao": "1.0.0",
            "status": "OK",
            "endpoints": [
                {"usuarios": "/usuarios"},
                {"categorias": "/categorias"},
                {"contas": "/contas"},
                {"moedas": "/moedas"},
            ],
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
