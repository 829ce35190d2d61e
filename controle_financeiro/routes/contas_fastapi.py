# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Contas.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from controle_financeiro.database import get_db
from controle_financeiro.schemas.conta import ContaCreate, ContaRead, ContaUpdate
from controle_financeiro.schemas.resposta import Mensagem, Resposta, RespostaLista, RespostaMensagem
from controle_financeiro.services import conta_service

router = APIRouter(
    tags=["Contas"],
    responses={404: {"description": "Conta não encontrada"}},
)

@router.get("", response_model=RespostaLista[ContaRead])
def read_contas(usuario_id: Optional[int] = None, db: Session = Depends(get_db)):
    """
    Lista as contas com a moeda de cada uma, em ordem alfabética.
    """
    contas = conta_service.listar_contas(db, usuario_id=usuario_id)
    return {"sucesso": True, "total": len(contas), "dados": contas}

@router.post("", response_model=RespostaMensagem[ContaRead], status_code=status.HTTP_201_CREATED)
def create_conta(conta: ContaCreate, db: Session = Depends(get_db)):
    db_conta = conta_service.criar_conta(db, conta)
    return {"sucesso": True, "mensagem": "Conta criada com sucesso", "dados": db_conta}

@router.get("/{conta_id}", response_model=Resposta[ContaRead])
def read_conta(conta_id: int, db: Session = Depends(get_db)):
    return {"sucesso": True, "dados": conta_service.buscar_conta(db, conta_id)}

@router.put("/{conta_id}", response_model=RespostaMensagem[ContaRead])
def update_conta(conta_id: int, conta: ContaUpdate, db: Session = Depends(get_db)):
    db_conta = conta_service.atualizar_conta(db, conta_id, conta)
    return {"sucesso": True, "mensagem": "Conta atualizada com sucesso", "dados": db_conta}

@router.delete("/{conta_id}", response_model=Mensagem)
def delete_conta(conta_id: int, db: Session = Depends(get_db)):
    conta_service.deletar_conta(db, conta_id)
    return {"sucesso": True, "mensagem": "Conta deletada com sucesso"}
