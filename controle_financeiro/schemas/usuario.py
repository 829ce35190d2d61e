# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Usuario.

Nenhum schema de leitura expõe o campo ``senha``.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional

from controle_financeiro.schemas.categoria import CategoriaResumo
from controle_financeiro.schemas.conta import ContaResumo

class UsuarioCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    senha: str = Field(..., min_length=1)
    tipo_usuario: Optional[str] = Field(None, max_length=20)
    permite_lancamento_retroativo: bool = False

class UsuarioUpdate(BaseModel):
    nome: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    tipo_usuario: Optional[str] = Field(None, max_length=20)
    permite_lancamento_retroativo: Optional[bool] = None

    @field_validator("nome", "email", "tipo_usuario", mode="before")
    @classmethod
    def vazio_mantem_valor_atual(cls, value):
        # String vazia equivale a campo não enviado
        if isinstance(value, str) and not value.strip():
            return None
        return value

class AlterarSenha(BaseModel):
    senha_atual: str = Field(..., min_length=1, alias="senhaAtual")
    nova_senha: str = Field(..., min_length=1, alias="novaSenha")

    class Config:
        populate_by_name = True

class UsuarioRead(BaseModel):
    id: int
    nome: str
    email: str
    tipo_usuario: str
    permite_lancamento_retroativo: bool
    criado_em: datetime

    class Config:
        from_attributes = True

class UsuarioDetalhe(UsuarioRead):
    contas: List[ContaResumo] = []
    categorias: List[CategoriaResumo] = []
