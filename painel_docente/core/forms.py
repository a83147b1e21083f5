"""
Formulários compartilhados entre as views.
"""
from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField

from painel_docente.core.redutores import para_inteiro_nao_negativo


def CampoInteiro(label, **kwargs):
    """
    Campo numérico tolerante: vazio, texto ou negativo viram inteiro >= 0
    (o valor é corrigido em vez de rejeitado).
    """
    return StringField(label, filters=[para_inteiro_nao_negativo], **kwargs)


class ConfirmacaoForm(FlaskForm):
    """Guarda das ações irreversíveis (excluir, redefinir)."""
    confirmar = SubmitField('تأكيد')
