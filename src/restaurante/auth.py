"""
Utilitários de senha com bcrypt
"""
import bcrypt

from .config import BCRYPT_ROUNDS, STAFF_PASSWORD


def get_password_hash(password: str) -> str:
    """Hash de senha com bcrypt"""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(password: str, senha_hash: str) -> bool:
    """Verifica senha contra o hash armazenado"""
    return bcrypt.checkpw(password.encode('utf-8'), senha_hash.encode('utf-8'))


_staff_hash = None


def get_staff_password_hash() -> str:
    """Hash da senha da equipe, calculado uma única vez"""
    global _staff_hash
    if _staff_hash is None:
        _staff_hash = get_password_hash(STAFF_PASSWORD)
    return _staff_hash
