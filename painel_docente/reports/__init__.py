"""
Módulo de Relatórios (Blueprint)

Visão somente leitura: gráficos derivados do formulário e análise da IA.
"""

from flask import Blueprint

reports_bp = Blueprint(
    'reports_bp',
    __name__,
    template_folder='templates',
    url_prefix='/relatorios'
)

from . import routes
