# -*- coding: utf-8 -*-
"""
Tradução das exceções do SQLAlchemy para os erros de domínio da API.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from controle_financeiro.errors import ConflictError, PersistenceError, ValidationError


@contextmanager
def erros_de_banco(
    db: Session,
    erro: str,
    conflito: Optional[str] = None,
    referencia: Optional[str] = None,
) -> Iterator[None]:
    """Envolve uma operação no banco, desfazendo a sessão em caso de falha.

    ``conflito`` é a mensagem usada quando a violação de integridade vem de
    uma restrição de unicidade; ``referencia``, quando vem de uma chave
    estrangeira. Sem nenhuma das duas, a violação vira ``PersistenceError``.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        if conflito:
            raise ConflictError(conflito) from e
        if referencia:
            raise ValidationError(referencia) from e
        logging.error(f"{erro}: {e.orig}")
        raise PersistenceError(erro, str(e.orig)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"{erro}: {e}")
        raise PersistenceError(erro, str(e)) from e
