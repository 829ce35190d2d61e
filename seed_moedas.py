# -*- coding: utf-8 -*-
"""
Cadastra as moedas padrão (BRL, USD, EUR) em um banco vazio.

Uso: python seed_moedas.py
"""
from controle_financeiro.config import Settings
from controle_financeiro.database import Base, create_db_engine, create_session_factory
from controle_financeiro.services.moeda_service import criar_moedas_padrao

# Importação dos modelos para garantir que o SQLAlchemy registre tudo
from controle_financeiro.models import categoria, conta, moeda, usuario  # noqa: F401

def seed_moedas(settings=None):
    settings = settings or Settings()
    engine = create_db_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    db = create_session_factory(engine)()

    try:
        criadas = criar_moedas_padrao(db)
        if criadas:
            print(f"✅ {criadas} moedas criadas com sucesso!")
        else:
            print("ℹ️ As moedas já estavam cadastradas.")
        return criadas
    finally:
        db.close()
        engine.dispose()

if __name__ == "__main__":
    seed_moedas()
