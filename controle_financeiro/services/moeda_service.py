# -*- coding: utf-8 -*-
"""
Regras de negócio das moedas.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from controle_financeiro.models.moeda import Moeda
from controle_financeiro.schemas.moeda import MoedaCreate
from controle_financeiro.services.persistencia import erros_de_banco

MOEDAS_PADRAO = [
    {"nome": "Real Brasileiro", "codigo": "BRL", "simbolo": "R$", "padrao": True},
    {"nome": "Dólar Americano", "codigo": "USD", "simbolo": "US$", "padrao": False},
    {"nome": "Euro", "codigo": "EUR", "simbolo": "€", "padrao": False},
]


def listar_moedas(db: Session) -> List[Moeda]:
    """Moeda padrão primeiro, as demais em ordem alfabética."""
    with erros_de_banco(db, "Erro ao buscar moedas"):
        return db.query(Moeda).order_by(Moeda.padrao.desc(), Moeda.nome, Moeda.id).all()


def criar_moeda(db: Session, dados: MoedaCreate) -> Moeda:
    db_moeda = Moeda(**dados.model_dump())
    with erros_de_banco(db, "Erro ao criar moeda", conflito="Código de moeda já cadastrado"):
        db.add(db_moeda)
        db.commit()
        db.refresh(db_moeda)
    return db_moeda


def criar_moedas_padrao(db: Session) -> int:
    """Insere BRL, USD e EUR se a tabela estiver vazia. Retorna quantas foram criadas."""
    with erros_de_banco(db, "Erro ao criar moedas padrão"):
        if db.query(Moeda).first() is not None:
            logging.info("Moedas já cadastradas, nada a fazer.")
            return 0
        db.add_all([Moeda(**moeda) for moeda in MOEDAS_PADRAO])
        db.commit()
    logging.info(f"{len(MOEDAS_PADRAO)} moedas padrão criadas")
    return len(MOEDAS_PADRAO)
