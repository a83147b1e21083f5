"""
Rotas do Painel de Entrada

Tela principal: informações gerais, tabela de estratégias (adicionar,
editar, excluir, ordenar, descrever com IA, sugerir com IA) e os três
blocos de contadores de formato fixo.
"""

from flask import (
    abort,
    current_app,
    redirect,
    render_template,
    session,
    url_for,
)

from . import dashboard_bp
from .forms import DescricaoForm, EstrategiaForm, InformacoesGeraisForm, formulario_contadores
from painel_docente.core import redutores
from painel_docente.core.ai import ErroIA
from painel_docente.core.assistente import (
    SugestaoDuplicadaError,
    descrever_estrategia,
    nome_repetido,
    sugerir_estrategia,
)
from painel_docente.core.constants import (
    CATEGORIAS_CONTADORES,
    CONTADORES_ESTRATEGIA,
    ROTULOS_ESTRATEGIA,
    TITULOS_CATEGORIAS,
)
from painel_docente.core.estado import get_estado
from painel_docente.core.extensions import limiter
from painel_docente.core.forms import ConfirmacaoForm
from painel_docente.core.logger import get_logger
from painel_docente.core.notificacoes import notificar
from painel_docente.core.ordenacao import (
    ConfigOrdenacao,
    alternar_ordenacao,
    indicador,
    ordenar_estrategias,
)

logger = get_logger(__name__)


def _limite_ia():
    return current_app.config.get('AI_RATE_LIMIT', '10 per minute')


def _estrategia_ou_404(form_data, id_estrategia):
    estrategia = redutores.buscar_estrategia(form_data, id_estrategia)
    if estrategia is None:
        abort(404)
    return estrategia


def _voltar(ancora=None):
    return redirect(url_for('dashboard_bp.index', _anchor=ancora))


# === TELA PRINCIPAL ===

@dashboard_bp.route('/')
def index():
    estado = get_estado()
    form_data = estado.formulario

    geral = InformacoesGeraisForm(data=form_data)
    geral.definir_materias(estado.materias, form_data['subject'])

    ordenacao = ConfigOrdenacao.from_dict(session.get('ordenacao'))
    linhas = ordenar_estrategias(form_data['strategies'], ordenacao)

    contadores = [
        {
            'categoria': categoria,
            'titulo': TITULOS_CATEGORIAS[categoria],
            'form': formulario_contadores(categoria)(data=form_data[categoria]),
        }
        for categoria in CATEGORIAS_CONTADORES
    ]

    return render_template(
        'dashboard.html',
        geral=geral,
        linhas=linhas,
        estrategia_form=EstrategiaForm(),
        colunas={c: ROTULOS_ESTRATEGIA[c] for c in CONTADORES_ESTRATEGIA},
        indicadores={c: indicador(ordenacao, c) for c in CONTADORES_ESTRATEGIA},
        contadores=contadores,
    )


@dashboard_bp.route('/ordenar/<coluna>')
def ordenar(coluna):
    atual = ConfigOrdenacao.from_dict(session.get('ordenacao'))
    try:
        nova = alternar_ordenacao(atual, coluna)
    except ValueError:
        abort(404)
    session['ordenacao'] = nova.to_dict()
    return _voltar('estrategias')


# === INFORMAÇÕES GERAIS E CONTADORES ===

@dashboard_bp.route('/geral', methods=['POST'])
def salvar_geral():
    estado = get_estado()
    form = InformacoesGeraisForm()
    form.definir_materias(estado.materias, estado.formulario['subject'])

    if not form.validate_on_submit():
        logger.warning(f"Informações gerais rejeitadas: {form.errors}")
        notificar('تعذر حفظ المعلومات الأساسية. تحقق من القيم المدخلة.', 'error')
        return _voltar()

    estado.atualizar_formulario(redutores.atualizar_campos, {
        'teacher_name': form.teacher_name.data,
        'semester': form.semester.data,
        'grade': form.grade.data,
        'subject': form.subject.data,
        'units': form.units.data,
        'lessons': form.lessons.data,
    })
    notificar('تم حفظ المعلومات الأساسية.', 'success')
    return _voltar()


@dashboard_bp.route('/contadores/<categoria>', methods=['POST'])
def salvar_contadores(categoria):
    if categoria not in CATEGORIAS_CONTADORES:
        abort(404)

    form = formulario_contadores(categoria)()
    if not form.validate_on_submit():
        notificar('تعذر حفظ البيانات. أعد المحاولة.', 'error')
        return _voltar(categoria)

    dados = {campo: getattr(form, campo).data for campo in CATEGORIAS_CONTADORES[categoria]}
    get_estado().atualizar_formulario(redutores.atualizar_contadores, categoria, dados)
    notificar(f"تم حفظ {TITULOS_CATEGORIAS[categoria]}.", 'success')
    return _voltar(categoria)


# === ESTRATÉGIAS ===

@dashboard_bp.route('/estrategias', methods=['POST'])
def adicionar_estrategia():
    form = ConfirmacaoForm()
    if not form.validate_on_submit():
        abort(400)
    novo = get_estado().atualizar_formulario(redutores.adicionar_estrategia)
    logger.info(f"Estratégia adicionada (id={novo['strategies'][-1]['id']})")
    return _voltar('estrategias')


@dashboard_bp.route('/estrategias/<int:id_estrategia>', methods=['POST'])
def editar_estrategia(id_estrategia):
    estado = get_estado()
    _estrategia_ou_404(estado.formulario, id_estrategia)

    form = EstrategiaForm()
    if not form.validate_on_submit():
        notificar('تعذر حفظ الاستراتيجية.', 'error')
        return _voltar('estrategias')

    estado.atualizar_formulario(redutores.atualizar_estrategia_campos, id_estrategia, {
        'name': form.name.data,
        'traditional': form.traditional.data,
        'active': form.active.data,
        'research': form.research.data,
    })
    return _voltar(f"estrategia-{id_estrategia}")


@dashboard_bp.route('/estrategias/<int:id_estrategia>/excluir', methods=['GET', 'POST'])
def excluir_estrategia(id_estrategia):
    estado = get_estado()
    estrategia = _estrategia_ou_404(estado.formulario, id_estrategia)

    form = ConfirmacaoForm()
    if form.validate_on_submit() and form.confirmar.data:
        estado.atualizar_formulario(redutores.remover_estrategia, id_estrategia)
        logger.info(f"Estratégia removida (id={id_estrategia})")
        notificar('تم حذف الاستراتيجية.', 'success')
        return _voltar('estrategias')

    nome = estrategia['name'] or f"#{id_estrategia}"
    return render_template(
        'confirmar.html',
        form=form,
        titulo='حذف الاستراتيجية',
        mensagem=f"هل أنت متأكد من حذف الاستراتيجية: {nome}؟",
        url_cancelar=url_for('dashboard_bp.index', _anchor='estrategias'),
    )


@dashboard_bp.route('/estrategias/<int:id_estrategia>/descricao', methods=['GET', 'POST'])
def descricao_estrategia(id_estrategia):
    estado = get_estado()
    estrategia = _estrategia_ou_404(estado.formulario, id_estrategia)
    if not estrategia['name'].strip():
        notificar('أدخل اسم الاستراتيجية أولاً.', 'warning')
        return _voltar('estrategias')

    form = DescricaoForm(data={'description': estrategia['description']})
    if form.validate_on_submit():
        estado.atualizar_formulario(redutores.definir_descricao, id_estrategia, form.description.data)
        notificar('تم حفظ وصف الاستراتيجية.', 'success')
        return _voltar(f"estrategia-{id_estrategia}")

    return render_template('descricao.html', form=form, estrategia=estrategia)


@dashboard_bp.route('/estrategias/<int:id_estrategia>/descricao/gerar', methods=['POST'])
@limiter.limit(_limite_ia)
def gerar_descricao(id_estrategia):
    """
    Gera o texto com a IA e devolve a tela de descrição já preenchida.
    Nada é gravado até o usuário clicar em "salvar".
    """
    estado = get_estado()
    estrategia = _estrategia_ou_404(estado.formulario, id_estrategia)

    form = DescricaoForm()
    if not form.validate_on_submit():
        abort(400)

    if not estrategia['name'].strip():
        notificar('أدخل اسم الاستراتيجية أولاً.', 'warning')
        return _voltar('estrategias')

    try:
        form.description.data = descrever_estrategia(estrategia['name'])
        notificar('تم إنشاء الوصف. راجعه ثم احفظه.', 'success')
    except ErroIA as e:
        logger.warning(f"Descrição não gerada para '{estrategia['name']}' ({e.categoria}).")
        notificar(e.mensagem_usuario, 'error')

    return render_template('descricao.html', form=form, estrategia=estrategia)


def _adicionar_sugestao(form_data, nome):
    # Revalida sob o lock do estado: outra requisição pode ter criado o nome.
    if nome_repetido(nome, [e['name'] for e in form_data['strategies']]):
        raise SugestaoDuplicadaError(nome)
    return redutores.adicionar_estrategia(form_data, nome)


@dashboard_bp.route('/estrategias/sugerir', methods=['POST'])
@limiter.limit(_limite_ia)
def sugerir():
    form = ConfirmacaoForm()
    if not form.validate_on_submit():
        abort(400)

    estado = get_estado()
    try:
        nome = sugerir_estrategia(estado.formulario)
        estado.atualizar_formulario(_adicionar_sugestao, nome)
        notificar(f"تمت إضافة الاستراتيجية المقترحة: {nome}", 'success')
    except SugestaoDuplicadaError as e:
        notificar(e.mensagem_usuario, 'warning')
    except ErroIA as e:
        notificar(e.mensagem_usuario, 'error')

    return _voltar('estrategias')

