# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Categorias Financeiras.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from controle_financeiro.database import get_db
from controle_financeiro.schemas.categoria import CategoriaCreate, CategoriaRead, CategoriaUpdate, TipoCategoria
from controle_financeiro.schemas.resposta import Mensagem, Resposta, RespostaLista, RespostaMensagem
from controle_financeiro.services import categoria_service

router = APIRouter(
    tags=["Categorias"],
    responses={404: {"description": "Categoria não encontrada"}},
)

@router.get("", response_model=RespostaLista[CategoriaRead])
def read_categorias(
    tipo: Optional[TipoCategoria] = None,
    usuario_id: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """
    Lista categorias em ordem alfabética, opcionalmente filtradas por tipo ou usuário.
    """
    categorias = categoria_service.listar_categorias(db, tipo=tipo, usuario_id=usuario_id)
    return {"sucesso": True, "total": len(categorias), "dados": categorias}

@router.post("", response_model=RespostaMensagem[CategoriaRead], status_code=status.HTTP_201_CREATED)
def create_categoria(categoria: CategoriaCreate, db: Session = Depends(get_db)):
    db_categoria = categoria_service.criar_categoria(db, categoria)
    return {"sucesso": True, "mensagem": "Categoria criada com sucesso", "dados": db_categoria}

@router.get("/{categoria_id}", response_model=Resposta[CategoriaRead])
def read_categoria(categoria_id: int, db: Session = Depends(get_db)):
    return {"sucesso": True, "dados": categoria_service.buscar_categoria(db, categoria_id)}

@router.put("/{categoria_id}", response_model=RespostaMensagem[CategoriaRead])
def update_categoria(categoria_id: int, categoria: CategoriaUpdate, db: Session = Depends(get_db)):
    db_categoria = categoria_service.atualizar_categoria(db, categoria_id, categoria)
    return {"sucesso": True, "mensagem": "Categoria atualizada com sucesso", "dados": db_categoria}

@router.delete("/{categoria_id}", response_model=Mensagem)
def delete_categoria(categoria_id: int, db: Session = Depends(get_db)):
    categoria_service.deletar_categoria(db, categoria_id)
    return {"sucesso": True, "mensagem": "Categoria deletada com sucesso"}
