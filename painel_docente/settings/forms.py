from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField, FileRequired
from wtforms import StringField
from wtforms.validators import DataRequired, Length

EXTENSOES_IMAGEM = ['png', 'jpg', 'jpeg', 'gif', 'webp', 'svg']


class EscolaForm(FlaskForm):
    name = StringField('اسم المدرسة', validators=[Length(max=200)])
    branch = StringField('الفرع', validators=[Length(max=200)])
    academic_year = StringField('العام الدراسي', validators=[Length(max=100)])


class LogoForm(FlaskForm):
    logo = FileField('شعار المدرسة', validators=[
        FileRequired(message="اختر ملف صورة."),
        FileAllowed(EXTENSOES_IMAGEM, message="يسمح بملفات الصور فقط."),
    ])


class MateriaForm(FlaskForm):
    nome = StringField('مادة دراسية جديدة', validators=[
        DataRequired(message="اسم المادة مطلوب."),
        Length(max=100),
    ])


class FonteForm(FlaskForm):
    # Valor fora de 12..22 é ajustado ao limite mais próximo, não rejeitado
    tamanho = StringField('حجم الخط')
