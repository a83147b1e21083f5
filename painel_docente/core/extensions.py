"""
Módulo Central de Extensões.
Evita importações circulares centralizando as instâncias das extensões.
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect

# 1. Limiter (Rate Limiting)
# Sem limite global: só as rotas que chamam o Gemini são limitadas.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    default_limits=[]
)

# 2. CSRF Protection
csrf = CSRFProtect()
