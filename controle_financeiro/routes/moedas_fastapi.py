# -*- coding: utf-8 -*-
"""
Rotas FastAPI para Moedas.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from controle_financeiro.database import get_db
from controle_financeiro.schemas.moeda import MoedaCreate, MoedaRead
from controle_financeiro.schemas.resposta import RespostaLista, RespostaMensagem
from controle_financeiro.services import moeda_service

router = APIRouter(tags=["Moedas"])

@router.get("", response_model=RespostaLista[MoedaRead])
def read_moedas(db: Session = Depends(get_db)):
    """
    Lista as moedas com a moeda padrão em primeiro lugar.
    """
    moedas = moeda_service.listar_moedas(db)
    return {"sucesso": True, "total": len(moedas), "dados": moedas}

@router.post("", response_model=RespostaMensagem[MoedaRead], status_code=status.HTTP_201_CREATED)
def create_moeda(moeda: MoedaCreate, db: Session = Depends(get_db)):
    db_moeda = moeda_service.criar_moeda(db, moeda)
    return {"sucesso": True, "mensagem": "Moeda criada com sucesso", "dados": db_moeda}
