"""
Módulo do Assistente Pedagógico (IA)

Responsável por:
1. Descrever uma estratégia de ensino.
2. Sugerir uma estratégia nova (não repetida) para a matéria e série atuais.
3. Gerar o relatório narrativo a partir do formulário completo.

O texto devolvido pelo modelo é usado como veio (apenas aparado).
"""

import json
from typing import Dict, Iterable

from painel_docente.core.ai import ErroIA, gerar_texto
from painel_docente.core.logger import get_logger

logger = get_logger(__name__)


class SugestaoDuplicadaError(ErroIA):
    categoria = 'duplicate'
    mensagem_usuario = 'الاستراتيجية المقترحة موجودة بالفعل في القائمة. حاول مرة أخرى.'

    def __init__(self, sugestao: str):
        super().__init__(f"Sugestão repetida: {sugestao}")
        self.sugestao = sugestao


def _normalizar_nome(nome: str) -> str:
    return (nome or '').strip().casefold()


def nome_repetido(nome: str, existentes: Iterable[str]) -> bool:
    """Comparação sem diferenciar maiúsculas e ignorando espaços nas pontas."""
    alvo = _normalizar_nome(nome)
    return any(_normalizar_nome(e) == alvo for e in existentes)


def descrever_estrategia(nome: str) -> str:
    prompt = (
        f'Please provide a concise, professional description in Arabic for the educational strategy '
        f'named "{nome}". Explain its purpose and how it is typically used in a classroom.'
    )
    return gerar_texto(prompt)


def sugerir_estrategia(form: Dict) -> str:
    """
    Pede ao modelo o nome de UMA estratégia nova.

    Raises:
        SugestaoDuplicadaError: se o nome já existir na tabela.
        ErroIA: falhas do serviço.
    """
    existentes = [e['name'] for e in form['strategies'] if e['name'].strip()]
    lista = '، '.join(existentes) if existentes else '(none)'

    prompt = f"""
    You are an expert instructional designer.
    Suggest ONE active-learning teaching strategy for the subject "{form['subject']}"
    in grade "{form['grade']}".
    The strategy MUST NOT be any of these already used strategies: {lista}.
    Answer with the strategy name only, in Arabic, without numbering, quotes or explanation.
    """

    sugestao = gerar_texto(prompt)
    if nome_repetido(sugestao, existentes):
        logger.info(f"Sugestão descartada por repetição: '{sugestao}'")
        raise SugestaoDuplicadaError(sugestao)

    logger.info(f"Estratégia sugerida: '{sugestao}'")
    return sugestao


def _estrategias_utilizadas(form: Dict) -> list:
    return [
        e for e in form['strategies']
        if e['name'] and (e['active'] > 0 or e['traditional'] > 0 or e['research'] > 0)
    ]


def gerar_relatorio_narrativo(form: Dict) -> str:
    """Relatório em Markdown (árabe): resumo, pontos fortes, oportunidades e recomendações."""
    def _json(valor):
        return json.dumps(valor, ensure_ascii=False)

    prompt = f"""
    **Role**: You are an expert educational consultant.
    **Task**: Analyze the provided teacher performance data and generate a concise, constructive, and actionable report in Arabic.
    **Format**: Use Markdown for clear structure with headings.

    **Data for Analysis**:
    - **Teacher**: {form['teacher_name']}
    - **Subject & Grade**: {form['subject']} for {form['grade']}
    - **Semester Units & Lessons**: {form['units']} units, {form['lessons']} lessons.
    - **Teaching Strategies**: {_json(_estrategias_utilizadas(form))}
    - **Extracurricular Activities**: {_json(form['extracurricular'])}
    - **Resource Room Usage**: {_json(form['resource_rooms'])}
    - **Dale's Cone of Experience Distribution**: {_json(form['experience_cone'])}

    **Report Structure**:
    1.  **"ملخص الأداء" (Performance Summary)**: A brief overview of the teacher's approach.
    2.  **"نقاط القوة" (Strengths)**: Identify 2-3 key strengths with examples from the data.
    3.  **"فرص للتطوير" (Opportunities for Development)**: Suggest 2-3 specific areas for improvement, framed positively.
    4.  **"توصيات عملية" (Actionable Recommendations)**: Provide 3 concrete, easy-to-implement suggestions to enhance teaching effectiveness.

    **Tone**: Professional, supportive, and encouraging.
    """
    return gerar_texto(prompt)
