# -*- coding: utf-8 -*-
"""
Regras de negócio do CRUD de usuários.

A unicidade do e-mail fica a cargo da restrição UNIQUE do banco: não há
consulta prévia, e a violação é devolvida como ``ConflictError``.
"""

import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from controle_financeiro.errors import AuthError, NotFoundError
from controle_financeiro.models.usuario import Usuario
from controle_financeiro.schemas.usuario import AlterarSenha, UsuarioCreate, UsuarioUpdate
from controle_financeiro.security import get_password_hash, verify_password
from controle_financeiro.services.persistencia import erros_de_banco

EMAIL_DUPLICADO = "Email já cadastrado"


def _get_or_404(db: Session, usuario_id: int) -> Usuario:
    db_usuario = db.query(Usuario).filter(Usuario.id == usuario_id).first()
    if db_usuario is None:
        raise NotFoundError("Usuário não encontrado")
    return db_usuario


def listar_usuarios(db: Session) -> List[Usuario]:
    with erros_de_banco(db, "Erro ao buscar usuários"):
        return db.query(Usuario).order_by(Usuario.criado_em.desc(), Usuario.id.desc()).all()


def buscar_usuario(db: Session, usuario_id: int) -> Usuario:
    """Retorna o usuário com suas contas e categorias já carregadas."""
    with erros_de_banco(db, "Erro ao buscar usuário"):
        db_usuario = (
            db.query(Usuario)
            .options(selectinload(Usuario.contas), selectinload(Usuario.categorias))
            .filter(Usuario.id == usuario_id)
            .first()
        )
    if db_usuario is None:
        raise NotFoundError("Usuário não encontrado")
    return db_usuario


def criar_usuario(db: Session, dados: UsuarioCreate) -> Usuario:
    db_usuario = Usuario(
        nome=dados.nome,
        email=dados.email,
        senha=get_password_hash(dados.senha),
        tipo_usuario=dados.tipo_usuario or "comum",
        permite_lancamento_retroativo=dados.permite_lancamento_retroativo,
    )
    with erros_de_banco(db, "Erro ao criar usuário", conflito=EMAIL_DUPLICADO):
        db.add(db_usuario)
        db.commit()
        db.refresh(db_usuario)
    logging.info(f"Usuário {db_usuario.id} criado")
    return db_usuario


def atualizar_usuario(db: Session, usuario_id: int, dados: UsuarioUpdate) -> Usuario:
    with erros_de_banco(db, "Erro ao atualizar usuário", conflito="Email já está em uso"):
        db_usuario = _get_or_404(db, usuario_id)

        # Campos ausentes ou nulos mantêm o valor atual
        for key, value in dados.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(db_usuario, key, value)

        db.commit()
        db.refresh(db_usuario)
    return db_usuario


def deletar_usuario(db: Session, usuario_id: int) -> None:
    with erros_de_banco(db, "Erro ao deletar usuário"):
        db_usuario = _get_or_404(db, usuario_id)
        # Contas e categorias são removidas em cascata
        db.delete(db_usuario)
        db.commit()
    logging.info(f"Usuário {usuario_id} removido")


def alterar_senha(db: Session, usuario_id: int, dados: AlterarSenha) -> None:
    with erros_de_banco(db, "Erro ao alterar senha"):
        db_usuario = _get_or_404(db, usuario_id)

        if not verify_password(dados.senha_atual, db_usuario.senha):
            raise AuthError("Senha atual incorreta")

        db_usuario.senha = get_password_hash(dados.nova_senha)
        db.commit()
