from flask_wtf import FlaskForm
from wtforms import SelectField, StringField, TextAreaField
from wtforms.validators import Length

from painel_docente.core.constants import (
    CATEGORIAS_CONTADORES,
    MATERIAS_INICIAIS,
    ROTULOS_CONTADORES,
    SEMESTRES,
    SERIES,
)
from painel_docente.core.forms import CampoInteiro


class InformacoesGeraisForm(FlaskForm):
    teacher_name = StringField('اسم المعلم', validators=[Length(max=200)])
    semester = SelectField('الفصل الدراسي', choices=SEMESTRES)
    grade = SelectField('الصف', choices=SERIES)
    subject = SelectField('المادة')
    units = CampoInteiro('عدد الوحدات')
    lessons = CampoInteiro('عدد الدروس')

    def definir_materias(self, materias, atual=None):
        """
        Opções de matéria = lista atual (ou a inicial, se estiver vazia).
        A matéria já gravada continua aceita mesmo que tenha sido excluída.
        """
        opcoes = list(materias) if materias else list(MATERIAS_INICIAIS)
        if atual and atual not in opcoes:
            opcoes.append(atual)
        self.subject.choices = opcoes


class EstrategiaForm(FlaskForm):
    name = StringField('الاستراتيجية', validators=[Length(max=200)])
    traditional = CampoInteiro('تقليدي')
    active = CampoInteiro('نشط')
    research = CampoInteiro('بحثي')


class DescricaoForm(FlaskForm):
    description = TextAreaField('الوصف')


def formulario_contadores(categoria):
    """
    Monta a classe de formulário de uma categoria de contadores
    (um campo por contador, na ordem de exibição).
    """
    rotulos = ROTULOS_CONTADORES[categoria]

    class ContadoresForm(FlaskForm):
        pass

    for campo in CATEGORIAS_CONTADORES[categoria]:
        setattr(ContadoresForm, campo, CampoInteiro(rotulos.get(campo, campo)))

    ContadoresForm.__name__ = f"ContadoresForm_{categoria}"
    return ContadoresForm
