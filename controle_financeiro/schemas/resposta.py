# -*- coding: utf-8 -*-
"""
Envelopes JSON usados em todas as respostas de sucesso.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

class Resposta(BaseModel, Generic[T]):
    sucesso: bool = True
    dados: T

class RespostaLista(BaseModel, Generic[T]):
    sucesso: bool = True
    total: int
    dados: List[T]

class RespostaMensagem(BaseModel, Generic[T]):
    sucesso: bool = True
    mensagem: str
    dados: T

class Mensagem(BaseModel):
    sucesso: bool = True
    mensagem: str
