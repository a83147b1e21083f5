"""
Redutores do Registro de Domínio.

Funções puras: recebem o registro atual e devolvem um NOVO registro com
apenas o campo indicado alterado. Os demais sub-objetos são reaproveitados
(não copiados), então quem chama nunca deve mutar o resultado.
"""

from typing import Any, Dict, List, Optional

from painel_docente.core.constants import (
    CAMPOS_NUMERICOS_FORMULARIO,
    CAMPOS_TEXTO_ESTRATEGIA,
    CAMPOS_TEXTO_FORMULARIO,
    CATEGORIAS_CONTADORES,
    CONTADORES_ESTRATEGIA,
    FONTE_MAXIMA,
    FONTE_MINIMA,
    FONTE_PADRAO,
)


def para_inteiro_nao_negativo(valor: Any) -> int:
    """
    Converte a entrada de um campo numérico.
    Vazio ou inválido vira 0; negativos são limitados a 0.
    """
    if valor is None:
        return 0
    if isinstance(valor, bool):
        return int(valor)
    if isinstance(valor, int):
        return max(valor, 0)
    texto = str(valor).strip()
    if not texto:
        return 0
    try:
        numero = int(float(texto))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(numero, 0)


def para_texto(valor: Any) -> str:
    """Campo de texto ausente (None) vira string vazia."""
    return '' if valor is None else str(valor)


# === FORMULÁRIO ===

def atualizar_campo(form: Dict, campo: str, valor: Any) -> Dict:
    if campo not in CAMPOS_NUMERICOS_FORMULARIO + CAMPOS_TEXTO_FORMULARIO:
        raise KeyError(f"Campo de formulário desconhecido: {campo}")
    if campo in CAMPOS_NUMERICOS_FORMULARIO:
        valor = para_inteiro_nao_negativo(valor)
    else:
        valor = para_texto(valor)
    return {**form, campo: valor}


def atualizar_campos(form: Dict, dados: Dict[str, Any]) -> Dict:
    for campo, valor in dados.items():
        form = atualizar_campo(form, campo, valor)
    return form


def atualizar_contador(form: Dict, categoria: str, campo: str, valor: Any) -> Dict:
    """Altera um contador de 'extracurricular', 'resource_rooms' ou 'experience_cone'."""
    if campo not in CATEGORIAS_CONTADORES[categoria]:
        raise KeyError(f"Contador desconhecido: {categoria}.{campo}")
    contadores = {**form[categoria], campo: para_inteiro_nao_negativo(valor)}
    return {**form, categoria: contadores}


def atualizar_contadores(form: Dict, categoria: str, dados: Dict[str, Any]) -> Dict:
    for campo, valor in dados.items():
        form = atualizar_contador(form, categoria, campo, valor)
    return form


# === ESTRATÉGIAS ===

def proximo_id(estrategias: List[Dict]) -> int:
    if not estrategias:
        return 1
    return max(e['id'] for e in estrategias) + 1


def adicionar_estrategia(form: Dict, nome: str = '') -> Dict:
    estrategias = form['strategies']
    nova = {
        'id': proximo_id(estrategias),
        'name': para_texto(nome),
        'traditional': 0,
        'active': 0,
        'research': 0,
        'description': '',
    }
    return {**form, 'strategies': [*estrategias, nova]}


def remover_estrategia(form: Dict, id_estrategia: int) -> Dict:
    estrategias = [e for e in form['strategies'] if e['id'] != id_estrategia]
    return {**form, 'strategies': estrategias}


def atualizar_estrategia(form: Dict, id_estrategia: int, campo: str, valor: Any) -> Dict:
    """
    Edita um campo de uma linha de estratégia.
    Contadores são convertidos; 'name' e 'description' são gravados sem aparar
    (None vira string vazia).
    """
    if campo in CONTADORES_ESTRATEGIA:
        valor = para_inteiro_nao_negativo(valor)
    elif campo not in CAMPOS_TEXTO_ESTRATEGIA:
        raise KeyError(f"Campo de estratégia desconhecido: {campo}")
    else:
        valor = para_texto(valor)

    estrategias = [
        {**e, campo: valor} if e['id'] == id_estrategia else e
        for e in form['strategies']
    ]
    return {**form, 'strategies': estrategias}


def atualizar_estrategia_campos(form: Dict, id_estrategia: int, dados: Dict[str, Any]) -> Dict:
    for campo, valor in dados.items():
        form = atualizar_estrategia(form, id_estrategia, campo, valor)
    return form


def definir_descricao(form: Dict, id_estrategia: int, descricao: str) -> Dict:
    return atualizar_estrategia(form, id_estrategia, 'description', descricao)


def buscar_estrategia(form: Dict, id_estrategia: int) -> Optional[Dict]:
    return next((e for e in form['strategies'] if e['id'] == id_estrategia), None)


# === ESCOLA ===

def atualizar_escola(info: Dict, campo: str, valor: str) -> Dict:
    if campo not in ('name', 'branch', 'academic_year'):
        raise KeyError(f"Campo de escola desconhecido: {campo}")
    return {**info, campo: para_texto(valor)}


def atualizar_escola_campos(info: Dict, dados: Dict[str, str]) -> Dict:
    for campo, valor in dados.items():
        info = atualizar_escola(info, campo, valor)
    return info


def definir_logo(info: Dict, data_uri: Optional[str]) -> Dict:
    return {**info, 'logo': data_uri}


# === MATÉRIAS ===

def adicionar_materia(materias: List[str], nome: str) -> List[str]:
    """Acrescenta a matéria (sem espaços nas pontas). Vazia ou repetida é ignorada."""
    nome = (nome or '').strip()
    if not nome or nome in materias:
        return materias
    return [*materias, nome]


def remover_materia(materias: List[str], nome: str) -> List[str]:
    return [m for m in materias if m != nome]


# === FONTE ===

def normalizar_tamanho_fonte(valor: Any) -> int:
    try:
        tamanho = int(float(valor))
    except (TypeError, ValueError, OverflowError):
        return FONTE_PADRAO
    return min(max(tamanho, FONTE_MINIMA), FONTE_MAXIMA)
