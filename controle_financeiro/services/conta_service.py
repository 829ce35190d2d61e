# -*- coding: utf-8 -*-
"""
Regras de negócio do CRUD de contas.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from controle_financeiro.errors import NotFoundError
from controle_financeiro.models.conta import Conta
from controle_financeiro.schemas.conta import ContaCreate, ContaUpdate
from controle_financeiro.services.persistencia import erros_de_banco

REFERENCIA_INEXISTENTE = "Usuário ou moeda informados não existem"


def _get_or_404(db: Session, conta_id: int) -> Conta:
    db_conta = (
        db.query(Conta)
        .options(joinedload(Conta.moeda))
        .filter(Conta.id == conta_id)
        .first()
    )
    if db_conta is None:
        raise NotFoundError("Conta não encontrada")
    return db_conta


def listar_contas(db: Session, usuario_id: Optional[int] = None) -> List[Conta]:
    with erros_de_banco(db, "Erro ao buscar contas"):
        query = db.query(Conta).options(joinedload(Conta.moeda))
        if usuario_id is not None:
            query = query.filter(Conta.usuario_id == usuario_id)
        return query.order_by(Conta.nome).all()


def buscar_conta(db: Session, conta_id: int) -> Conta:
    with erros_de_banco(db, "Erro ao buscar conta"):
        return _get_or_404(db, conta_id)


def criar_conta(db: Session, dados: ContaCreate) -> Conta:
    db_conta = Conta(
        nome=dados.nome,
        tipo=dados.tipo,
        saldo_inicial=dados.saldo_inicial if dados.saldo_inicial is not None else Decimal("0"),
        usuario_id=dados.usuario_id,
        moeda_id=dados.moeda_id,
    )
    with erros_de_banco(db, "Erro ao criar conta", referencia=REFERENCIA_INEXISTENTE):
        db.add(db_conta)
        db.commit()
        db.refresh(db_conta)
        # Recarrega a moeda junto com a conta
        return _get_or_404(db, db_conta.id)


def atualizar_conta(db: Session, conta_id: int, dados: ContaUpdate) -> Conta:
    with erros_de_banco(db, "Erro ao atualizar conta", referencia=REFERENCIA_INEXISTENTE):
        db_conta = _get_or_404(db, conta_id)
        for key, value in dados.model_dump(exclude_unset=True).items():
            # moeda_id nulo desvincula a moeda; nos demais campos nulo mantém o valor
            if value is not None or key == "moeda_id":
                setattr(db_conta, key, value)
        db.commit()
        return _get_or_404(db, conta_id)


def deletar_conta(db: Session, conta_id: int) -> None:
    with erros_de_banco(db, "Erro ao deletar conta"):
        db_conta = _get_or_404(db, conta_id)
        db.delete(db_conta)
        db.commit()
