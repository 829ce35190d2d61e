# -*- coding: utf-8 -*-
"""
Erros de domínio da API e conversão deles para o envelope JSON.

Os serviços levantam apenas estas classes; as rotas não inspecionam
mensagens nem códigos do driver do banco.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, mensagem: str, detalhes: Optional[Any] = None):
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.detalhes = detalhes


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PersistenceError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(erro: str, detalhes: Optional[Any] = None, **extra) -> dict:
    body = {"sucesso": False, "erro": erro}
    if detalhes is not None:
        body["detalhes"] = detalhes
    body.update(extra)
    return body


async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logging.error(f"{request.method} {request.url.path} falhou: {exc.mensagem} ({exc.detalhes})")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.mensagem, exc.detalhes))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    detalhes = [
        {
            "campo": ".".join(str(parte) for parte in erro["loc"] if parte != "body"),
            "mensagem": erro["msg"],
        }
        for erro in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Dados inválidos ou campos obrigatórios ausentes", detalhes),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("Rota não encontrada", rota_solicitada=request.url.path),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.exception(f"Erro inesperado em {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Erro interno do servidor", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
