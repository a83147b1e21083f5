"""
Módulo de Configurações (Blueprint)

Dados da escola, logo, matérias, tamanho da fonte e redefinição geral.
"""

from flask import Blueprint

settings_bp = Blueprint(
    'settings_bp',
    __name__,
    template_folder='templates',
    url_prefix='/configuracoes'
)

from . import routes
