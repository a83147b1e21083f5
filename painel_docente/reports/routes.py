"""
Rotas do Módulo de Relatórios

O relatório é recalculado a cada requisição a partir do formulário atual.
A análise da IA não é gravada: aparece apenas na resposta que a gerou.
"""

from flask import abort, current_app, render_template

from . import reports_bp
from painel_docente.core import agregacao
from painel_docente.core.ai import ErroIA
from painel_docente.core.assistente import gerar_relatorio_narrativo
from painel_docente.core.constants import COR_BARRAS_SALAS, ROTULOS_BARRAS_SALAS
from painel_docente.core.estado import get_estado
from painel_docente.core.extensions import limiter
from painel_docente.core.forms import ConfirmacaoForm
from painel_docente.core.logger import get_logger
from painel_docente.core.notificacoes import notificar

logger = get_logger(__name__)


def _contexto_relatorio(form_data):
    classificacao = agregacao.dados_pizza(agregacao.itens_classificacao(form_data))
    cone = agregacao.dados_pizza(agregacao.itens_cone(form_data))
    return {
        'dados': form_data,
        'totais': agregacao.totais_estrategias(form_data),
        'classificacao': classificacao,
        'grafico_classificacao': agregacao.figura_html(agregacao.figura_pizza(classificacao)),
        'cone': cone,
        'grafico_cone': agregacao.figura_html(agregacao.figura_pizza(cone)),
        'barras_salas': agregacao.dados_barras(
            form_data['resource_rooms'], ROTULOS_BARRAS_SALAS, COR_BARRAS_SALAS
        ),
        'estrategias': agregacao.estrategias_nomeadas(form_data),
        'form': ConfirmacaoForm(),
        'url_plotlyjs': agregacao.url_plotlyjs(),
    }


@reports_bp.route('/')
def index():
    form_data = get_estado().formulario
    return render_template('relatorios.html', **_contexto_relatorio(form_data))


@reports_bp.route('/analise', methods=['POST'])
@limiter.limit(lambda: current_app.config.get('AI_RATE_LIMIT', '10 per minute'))
def analise():
    """Gera a análise narrativa da IA e devolve o relatório com ela."""
    form = ConfirmacaoForm()
    if not form.validate_on_submit():
        abort(400)

    form_data = get_estado().formulario
    analise_ia, erro_ia = None, None
    try:
        analise_ia = gerar_relatorio_narrativo(form_data)
        logger.info("Análise da IA gerada para o relatório.")
    except ErroIA as e:
        erro_ia = e.mensagem_usuario
        notificar(e.mensagem_usuario, 'error')

    return render_template(
        'relatorios.html',
        analise_ia=analise_ia,
        erro_ia=erro_ia,
        **_contexto_relatorio(form_data),
    )
