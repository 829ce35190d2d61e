# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Moeda.
"""
from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship
from controle_financeiro.database import Base

class Moeda(Base):
    __tablename__ = 'moedas'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(50), nullable=False)
    codigo = Column(String(3), unique=True, nullable=True)  # ISO 4217, ex: 'BRL'
    simbolo = Column(String(5), nullable=True)
    padrao = Column(Boolean, nullable=False, default=False)  # moeda principal aparece primeiro

    contas = relationship("Conta", back_populates="moeda")
