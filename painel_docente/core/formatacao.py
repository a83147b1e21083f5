"""
Filtros de template.

'markdown_simples' cobre só o que o relatório da IA usa: negrito, itálico
e quebras de linha. O texto é escapado antes de qualquer marcação.
"""

import re

from markupsafe import Markup, escape

_NEGRITO = re.compile(r'\*\*(.*?)\*\*')
_ITALICO = re.compile(r'\*(.*?)\*')
_QUEBRA = re.compile(r'\r\n|\n|\r')


def markdown_simples(texto: str) -> Markup:
    if not texto:
        return Markup('')
    html = str(escape(texto))
    html = _NEGRITO.sub(r'<strong>\1</strong>', html)
    html = _ITALICO.sub(r'<em>\1</em>', html)
    html = _QUEBRA.sub('<br />', html)
    return Markup(html)


def porcentagem(fracao: float) -> str:
    return f"{fracao * 100:.1f}%"
