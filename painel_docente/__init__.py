"""
Módulo Principal da Aplicação (Application Factory)
"""

import os

from flask import Flask, redirect, render_template, request, url_for
from config import Config

from .core.constants import FONTE_MAXIMA, FONTE_MINIMA
from .core.estado import AppState
from .core.extensions import csrf, limiter
from .core.formatacao import markdown_simples, porcentagem
from .core.logger import configurar_nivel, get_logger
from .core.notificacoes import CentralNotificacoes
from .core.storage import KeyValueStore

logger = get_logger(__name__)


def create_app(config_class=Config):
    """
    Cria e configura uma instância da aplicação Flask.
    """

    app = Flask(__name__,
                instance_relative_config=True,
                static_folder='static',
                template_folder='templates')

    # 1. Carrega a configuração
    app.config.from_object(config_class)
    configurar_nivel(app.config.get('LOG_LEVEL', 'INFO'))

    # 2. Extensões
    csrf.init_app(app)
    limiter.init_app(app)

    # 3. Estado da aplicação (dono único do registro)
    data_dir = app.config.get('DATA_DIR') or os.path.join(app.instance_path, 'dados')
    store = KeyValueStore(data_dir)
    app.extensions['estado'] = AppState(store)
    app.extensions['notificacoes'] = CentralNotificacoes(
        duracao=app.config.get('NOTIFICACAO_DURACAO', 5.0)
    )
    logger.info(f"Dados locais em: {data_dir}")

    # 4. Filtros de template
    app.add_template_filter(markdown_simples, 'markdown_simples')
    app.add_template_filter(porcentagem, 'porcentagem')

    # === Context Processor ===
    # Injeta escola, fonte e notificações em todos os templates.
    @app.context_processor
    def inject_app_state():
        estado = app.extensions['estado']
        central = app.extensions['notificacoes']
        return dict(
            ESCOLA=estado.escola,
            TAMANHO_FONTE=estado.tamanho_fonte,
            FONTE_MINIMA=FONTE_MINIMA,
            FONTE_MAXIMA=FONTE_MAXIMA,
            NOTIFICACOES=central.ativas(),
            tempo_restante=central.restante,
        )

    # 5. Blueprints (uma view por módulo)
    from .dashboard import dashboard_bp
    app.register_blueprint(dashboard_bp, url_prefix='/')

    from .reports import reports_bp
    app.register_blueprint(reports_bp)

    from .settings import settings_bp
    app.register_blueprint(settings_bp)

    # 6. Notificações
    @app.route('/notificacoes/<int:id_notificacao>/dispensar', methods=['POST'])
    def dispensar_notificacao(id_notificacao):
        app.extensions['notificacoes'].dispensar(id_notificacao)
        return redirect(request.referrer or url_for('dashboard_bp.index'))

    # 7. Rota de Health Check
    @app.route("/health")
    def health_check():
        return "Painel Docente no ar!", 200

    @app.errorhandler(404)
    def pagina_nao_encontrada(e):
        return render_template('404.html'), 404

    return app
