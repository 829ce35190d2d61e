# -*- coding: utf-8 -*-
"""
Hash e verificação de senhas dos usuários.
"""
from passlib.context import CryptContext

# bcrypt com fator de custo 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)
