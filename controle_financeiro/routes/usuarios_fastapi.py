# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Usuários.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from controle_financeiro.database import get_db
from controle_financeiro.schemas.resposta import Mensagem, Resposta, RespostaLista, RespostaMensagem
from controle_financeiro.schemas.usuario import (
    AlterarSenha,
    UsuarioCreate,
    UsuarioDetalhe,
    UsuarioRead,
    UsuarioUpdate,
)
from controle_financeiro.services import usuario_service

router = APIRouter(
    tags=["Usuarios"],
    responses={404: {"description": "Usuário não encontrado"}},
)

@router.get("", response_model=RespostaLista[UsuarioRead])
def read_users(db: Session = Depends(get_db)):
    usuarios = usuario_service.listar_usuarios(db)
    return {"sucesso": True, "total": len(usuarios), "dados": usuarios}

@router.get("/{usuario_id}", response_model=Resposta[UsuarioDetalhe])
def read_user(usuario_id: int, db: Session = Depends(get_db)):
    """
    Retorna o usuário com suas contas e categorias.
    """
    return {"sucesso": True, "dados": usuario_service.buscar_usuario(db, usuario_id)}

@router.post("", response_model=RespostaMensagem[UsuarioRead], status_code=status.HTTP_201_CREATED)
def create_user(usuario: UsuarioCreate, db: Session = Depends(get_db)):
    db_usuario = usuario_service.criar_usuario(db, usuario)
    return {"sucesso": True, "mensagem": "Usuário criado com sucesso", "dados": db_usuario}

@router.put("/{usuario_id}", response_model=RespostaMensagem[UsuarioRead])
def update_user(usuario_id: int, usuario: UsuarioUpdate, db: Session = Depends(get_db)):
    """
    Atualiza os campos enviados; os demais mantêm o valor atual.
    """
    db_usuario = usuario_service.atualizar_usuario(db, usuario_id, usuario)
    return {"sucesso": True, "mensagem": "Usuário atualizado com sucesso", "dados": db_usuario}

@router.delete("/{usuario_id}", response_model=Mensagem)
def delete_user(usuario_id: int, db: Session = Depends(get_db)):
    usuario_service.deletar_usuario(db, usuario_id)
    return {"sucesso": True, "mensagem": "Usuário deletado com sucesso"}

@router.post("/{usuario_id}/alterar-senha", response_model=Mensagem)
def change_password(usuario_id: int, dados: AlterarSenha, db: Session = Depends(get_db)):
    usuario_service.alterar_senha(db, usuario_id, dados)
    return {"sucesso": True, "mensagem": "Senha alterada com sucesso"}
