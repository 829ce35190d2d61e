# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Conta.
"""
from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from controle_financeiro.database import Base

class Conta(Base):
    __tablename__ = 'contas'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    tipo = Column(String(30), nullable=True)  # Ex: 'corrente', 'poupanca', 'carteira'
    saldo_inicial = Column(Numeric(15, 2), nullable=False, default=0)

    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    moeda_id = Column(Integer, ForeignKey("moedas.id", ondelete="SET NULL"), nullable=True)

    usuario = relationship("Usuario", back_populates="contas")
    moeda = relationship("Moeda", back_populates="contas")
