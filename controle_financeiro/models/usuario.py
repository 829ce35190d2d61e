# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Usuario.
"""
from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship
from controle_financeiro.database import Base

class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)

    # Unicidade garantida pelo banco; a violação vira ConflictError no serviço
    email = Column(String(255), unique=True, index=True, nullable=False)

    senha = Column(String(255), nullable=False)  # hash bcrypt, nunca serializado
    tipo_usuario = Column(String(20), nullable=False, default="comum")
    permite_lancamento_retroativo = Column(Boolean, nullable=False, default=False)
    criado_em = Column(DateTime, nullable=False, server_default=func.now())

    contas = relationship("Conta", back_populates="usuario", cascade="all, delete-orphan")
    categorias = relationship("Categoria", back_populates="usuario", cascade="all, delete-orphan")
