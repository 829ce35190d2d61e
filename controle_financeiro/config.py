# -*- coding: utf-8 -*-
"""
Configurações da aplicação, lidas das variáveis de ambiente ou do arquivo .env.
"""

from dataclasses import dataclass, field
from typing import List

from starlette.config import Config

config = Config(".env")  # Lê as variáveis do arquivo .env


def _origens_cors() -> List[str]:
    origens = config("CORS_ORIGINS", default="*")
    return [o.strip() for o in origens.split(",") if o.strip()]


@dataclass
class Settings:
    database_url: str = field(
        default_factory=lambda: config("DATABASE_URL", default="sqlite:///./controle_financeiro.db")
    )
    host: str = field(default_factory=lambda: config("HOST", default="0.0.0.0"))
    port: int = field(default_factory=lambda: config("PORT", cast=int, default=3000))
    log_level: str = field(default_factory=lambda: config("LOG_LEVEL", default="INFO"))
    log_file: str = field(default_factory=lambda: config("LOG_FILE", default=""))
    environment: str = field(default_factory=lambda: config("ENVIRONMENT", default="development"))
    cors_origins: List[str] = field(default_factory=_origens_cors)
    # Insere BRL, USD e EUR na inicialização se a tabela de moedas estiver vazia
    popular_moedas: bool = field(default_factory=lambda: config("POPULAR_MOEDAS", cast=bool, default=True))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
