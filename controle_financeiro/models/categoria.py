# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Categoria Financeira.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from controle_financeiro.database import Base

TIPOS_CATEGORIA = ("receita", "despesa", "transferencia")

class Categoria(Base):
    __tablename__ = 'categorias'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(50), index=True, nullable=False)
    tipo = Column(String(20), nullable=False)  # 'receita', 'despesa' ou 'transferencia'
    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)

    usuario = relationship("Usuario", back_populates="categorias")
