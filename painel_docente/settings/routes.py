"""
Rotas do Módulo de Configurações
"""
import base64
import mimetypes

from flask import (
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from . import settings_bp
from .forms import EscolaForm, FonteForm, LogoForm, MateriaForm
from painel_docente.core import redutores
from painel_docente.core.estado import get_estado
from painel_docente.core.forms import ConfirmacaoForm
from painel_docente.core.logger import get_logger
from painel_docente.core.notificacoes import notificar

logger = get_logger(__name__)


def _voltar(ancora=None):
    return redirect(url_for('settings_bp.index', _anchor=ancora))


def _notificar_erros(form):
    for erros in form.errors.values():
        for erro in erros:
            notificar(erro, 'error')


def arquivo_para_data_uri(arquivo) -> str:
    """Lê o arquivo enviado e devolve 'data:<mime>;base64,<conteúdo>'."""
    conteudo = arquivo.read()
    mime = arquivo.mimetype or mimetypes.guess_type(arquivo.filename or '')[0] or 'application/octet-stream'
    return f"data:{mime};base64,{base64.b64encode(conteudo).decode('ascii')}"


@settings_bp.route('/')
def index():
    estado = get_estado()
    return render_template(
        'configuracoes.html',
        escola_form=EscolaForm(data=estado.escola),
        logo_form=LogoForm(),
        materia_form=MateriaForm(),
        fonte_form=FonteForm(data={'tamanho': estado.tamanho_fonte}),
        acao_form=ConfirmacaoForm(),
        materias=estado.materias,
    )


# === ESCOLA ===

@settings_bp.route('/escola', methods=['POST'])
def salvar_escola():
    form = EscolaForm()
    if not form.validate_on_submit():
        _notificar_erros(form)
        return _voltar('escola')

    estado = get_estado()
    estado.atualizar_escola(redutores.atualizar_escola_campos, {
        campo: getattr(form, campo).data for campo in ('name', 'branch', 'academic_year')
    })
    notificar('تم حفظ معلومات المدرسة.', 'success')
    return _voltar('escola')


@settings_bp.route('/logo', methods=['POST'])
def enviar_logo():
    form = LogoForm()
    if not form.validate_on_submit():
        _notificar_erros(form)
        return _voltar('logo')

    try:
        data_uri = arquivo_para_data_uri(form.logo.data)
    except OSError as e:
        logger.error(f"Erro ao ler o logo enviado: {e}", exc_info=True)
        notificar('تعذر قراءة ملف الصورة.', 'error')
        return _voltar('logo')

    get_estado().atualizar_escola(redutores.definir_logo, data_uri)
    logger.info(f"Logo atualizado ({len(data_uri)} caracteres).")
    notificar('تم تحديث الشعار.', 'success')
    return _voltar('logo')


@settings_bp.route('/importar', methods=['POST'])
def importar():
    form = ConfirmacaoForm()
    if form.validate_on_submit():
        notificar('سيتم تنفيذ ميزة استيراد بيانات المعلمين والاستراتيجيات من ملفات Excel و PDF في التحديثات المستقبلية.', 'info')
    return _voltar('logo')


# === MATÉRIAS ===

@settings_bp.route('/materias', methods=['POST'])
def adicionar_materia():
    form = MateriaForm()
    if not form.validate_on_submit():
        _notificar_erros(form)
        return _voltar('materias')

    estado = get_estado()
    antes = estado.materias
    depois = estado.atualizar_materias(redutores.adicionar_materia, form.nome.data)
    if depois == antes:
        notificar('المادة موجودة بالفعل.', 'warning')
    else:
        notificar(f"تمت إضافة المادة: {form.nome.data.strip()}", 'success')
    return _voltar('materias')


@settings_bp.route('/materias/excluir', methods=['GET', 'POST'])
def excluir_materia():
    nome = request.values.get('nome', '')
    estado = get_estado()
    if nome not in estado.materias:
        notificar('المادة غير موجودة.', 'warning')
        return _voltar('materias')

    form = ConfirmacaoForm()
    if form.validate_on_submit() and form.confirmar.data:
        # A matéria pode continuar gravada no formulário; não há reconciliação.
        estado.atualizar_materias(redutores.remover_materia, nome)
        logger.info(f"Matéria removida: {nome}")
        notificar(f"تم حذف المادة: {nome}", 'success')
        return _voltar('materias')

    return render_template(
        'confirmar.html',
        form=form,
        titulo='حذف مادة دراسية',
        mensagem=f"هل أنت متأكد من حذف المادة: {nome}؟",
        campos_ocultos={'nome': nome},
        url_cancelar=url_for('settings_bp.index', _anchor='materias'),
    )


# === INTERFACE ===

@settings_bp.route('/fonte', methods=['POST'])
def salvar_fonte():
    form = FonteForm()
    if form.validate_on_submit():
        tamanho = get_estado().definir_tamanho_fonte(form.tamanho.data)
        notificar(f"حجم الخط: {tamanho}px", 'info')
    return _voltar('interface')


# === ZONA DE PERIGO ===

@settings_bp.route('/resetar', methods=['GET', 'POST'])
def resetar():
    form = ConfirmacaoForm()
    if form.validate_on_submit() and form.confirmar.data:
        get_estado().resetar()
        session.pop('ordenacao', None)
        notificar('تمت إعادة تعيين جميع البيانات بنجاح.', 'success')
        return redirect(url_for('dashboard_bp.index'))

    return render_template(
        'confirmar.html',
        form=form,
        titulo='إعادة تعيين جميع البيانات',
        mensagem='هل أنت متأكد من أنك تريد إعادة تعيين كافة البيانات إلى حالتها الأولية؟ لا يمكن التراجع عن هذا الإجراء.',
        url_cancelar=url_for('settings_bp.index', _anchor='perigo'),
    )
