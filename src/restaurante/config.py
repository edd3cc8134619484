"""
Configuração do sistema do restaurante
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Tempo simulado de preparo por prato (segundos)
COOKING_DELAY = float(os.getenv("RESTAURANTE_COOKING_DELAY", "0.5"))

# Senha da equipe usada pelo Proxy de acesso
STAFF_PASSWORD = os.getenv("RESTAURANTE_STAFF_PASSWORD", "cozinha123")

BCRYPT_ROUNDS = int(os.getenv("RESTAURANTE_BCRYPT_ROUNDS", "12"))
