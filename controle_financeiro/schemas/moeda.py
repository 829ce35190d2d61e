# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Moeda.
"""

from pydantic import BaseModel, Field
from typing import Optional

class MoedaBase(BaseModel):
    nome: str = Field(..., min_length=1, max_length=50)
    codigo: Optional[str] = Field(None, min_length=3, max_length=3)
    simbolo: Optional[str] = Field(None, max_length=5)
    padrao: bool = False

class MoedaCreate(MoedaBase):
    pass

class MoedaRead(MoedaBase):
    id: int

    class Config:
        from_attributes = True
