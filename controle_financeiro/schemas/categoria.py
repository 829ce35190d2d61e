# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Categoria Financeira.
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional

TipoCategoria = Literal["receita", "despesa", "transferencia"]

class CategoriaBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=50)
    tipo: TipoCategoria

class CategoriaCreate(CategoriaBase):
    usuario_id: int

class CategoriaUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=50)
    tipo: Optional[TipoCategoria] = None

# Usado dentro do detalhe do usuário
class CategoriaResumo(CategoriaBase):
    id: int

    class Config:
        from_attributes = True

class CategoriaRead(CategoriaResumo):
    usuario_id: int
