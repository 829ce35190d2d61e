# -*- coding: utf-8 -*-
"""
Regras de negócio do CRUD de categorias financeiras.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from controle_financeiro.errors import NotFoundError, ValidationError
from controle_financeiro.models.categoria import TIPOS_CATEGORIA, Categoria
from controle_financeiro.schemas.categoria import CategoriaCreate, CategoriaUpdate
from controle_financeiro.services.persistencia import erros_de_banco

USUARIO_INEXISTENTE = "Usuário informado não existe"


def _validar_tipo(tipo: Optional[str]) -> None:
    if tipo is not None and tipo not in TIPOS_CATEGORIA:
        raise ValidationError("Tipo deve ser: receita, despesa ou transferencia")


def _get_or_404(db: Session, categoria_id: int) -> Categoria:
    db_categoria = db.query(Categoria).filter(Categoria.id == categoria_id).first()
    if db_categoria is None:
        raise NotFoundError("Categoria não encontrada")
    return db_categoria


def listar_categorias(
    db: Session, tipo: Optional[str] = None, usuario_id: Optional[int] = None
) -> List[Categoria]:
    with erros_de_banco(db, "Erro ao buscar categorias"):
        query = db.query(Categoria)
        if tipo:
            query = query.filter(Categoria.tipo == tipo)
        if usuario_id is not None:
            query = query.filter(Categoria.usuario_id == usuario_id)
        return query.order_by(Categoria.nome).all()


def buscar_categoria(db: Session, categoria_id: int) -> Categoria:
    with erros_de_banco(db, "Erro ao buscar categoria"):
        return _get_or_404(db, categoria_id)


def criar_categoria(db: Session, dados: CategoriaCreate) -> Categoria:
    # Tipo inválido é rejeitado antes de qualquer acesso ao banco
    _validar_tipo(dados.tipo)

    db_categoria = Categoria(**dados.model_dump())
    with erros_de_banco(db, "Erro ao criar categoria", referencia=USUARIO_INEXISTENTE):
        db.add(db_categoria)
        db.commit()
        db.refresh(db_categoria)
    return db_categoria


def atualizar_categoria(db: Session, categoria_id: int, dados: CategoriaUpdate) -> Categoria:
    _validar_tipo(dados.tipo)

    with erros_de_banco(db, "Erro ao atualizar categoria"):
        db_categoria = _get_or_404(db, categoria_id)
        for key, value in dados.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(db_categoria, key, value)
        db.commit()
        db.refresh(db_categoria)
    return db_categoria


def deletar_categoria(db: Session, categoria_id: int) -> None:
    with erros_de_banco(db, "Erro ao deletar categoria"):
        db_categoria = _get_or_404(db, categoria_id)
        db.delete(db_categoria)
        db.commit()
