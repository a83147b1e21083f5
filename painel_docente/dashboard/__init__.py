"""
Módulo do Painel de Entrada (Blueprint)

Define o Blueprint do Flask para a tela de lançamento dos dados do formulário.
"""

from flask import Blueprint

dashboard_bp = Blueprint(
    'dashboard_bp',
    __name__,
    template_folder='templates'
)

# Importa as rotas no final para evitar dependência circular
from . import routes
