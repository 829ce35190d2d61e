# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Conta.
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from controle_financeiro.schemas.moeda import MoedaRead

class ContaCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    tipo: Optional[str] = Field(None, max_length=30)
    saldo_inicial: Optional[Decimal] = None  # None vira 0 no serviço
    usuario_id: int
    moeda_id: Optional[int] = None

class ContaUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=100)
    tipo: Optional[str] = Field(None, max_length=30)
    saldo_inicial: Optional[Decimal] = None
    moeda_id: Optional[int] = None

class ContaResumo(BaseModel):
    id: int
    nome: str
    tipo: Optional[str] = None
    saldo_inicial: Decimal  # serializado como string para não perder precisão

    class Config:
        from_attributes = True

class ContaRead(ContaResumo):
    usuario_id: int
    moeda_id: Optional[int] = None
    moeda: Optional[MoedaRead] = None
