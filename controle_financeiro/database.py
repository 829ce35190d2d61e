# -*- coding: utf-8 -*-
"""
Configuração do banco de dados SQLAlchemy para a aplicação FastAPI.

A engine (e o pool de conexões) é criada uma única vez em ``create_app`` e
guardada em ``app.state``; as rotas recebem a sessão via ``Depends(get_db)``.
"""

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Cria uma Base class
Base = declarative_base()


def normalize_database_url(url: str) -> str:
    # Se for PostgreSQL no Render, ajusta o prefixo se necessário
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # No SQLite as chaves estrangeiras vêm desligadas por conexão
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """
    Cria a engine SQLAlchemy com configurações de robustez (Pool Pre-Ping).
    """
    database_url = normalize_database_url(database_url)

    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # Banco em memória: todas as sessões precisam da mesma conexão
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        database_url,
        # pool_pre_ping=True: Verifica se a conexão está viva antes de usar
        pool_pre_ping=True,
        # pool_recycle: Recicla conexões a cada hora para evitar timeouts do banco
        pool_recycle=3600,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(engine: Engine) -> None:
    """Executa um SELECT 1; levanta a exceção do driver se o banco estiver fora."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


# Função para obter uma sessão do banco de dados (usada com Depends)
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
