"""
Contêiner de Estado da Aplicação.

Dono único do registro (escola, formulário, matérias, tamanho da fonte).
As views leem cópias prontas e enviam "intenções" na forma de redutores
puros; cada alteração é gravada de volta no KeyValueStore.
"""

import copy
import threading
from typing import Any, Callable, Dict, List

from flask import current_app

from painel_docente.core import redutores
from painel_docente.core.constants import (
    CHAVE_ESCOLA,
    CHAVE_FONTE,
    CHAVE_FORMULARIO,
    CHAVE_MATERIAS,
    CAMPOS_NUMERICOS_FORMULARIO,
    CAMPOS_TEXTO_ESTRATEGIA,
    CAMPOS_TEXTO_FORMULARIO,
    CATEGORIAS_CONTADORES,
    CONTADORES_ESTRATEGIA,
    ESCOLA_INICIAL,
    FONTE_PADRAO,
    FORMULARIO_INICIAL,
    MATERIAS_INICIAIS,
)
from painel_docente.core.logger import get_logger
from painel_docente.core.storage import KeyValueStore

logger = get_logger(__name__)

def _inteiro(valor: Any) -> bool:
    return isinstance(valor, int) and not isinstance(valor, bool) and valor >= 0


def _escola_valida(valor: Any) -> bool:
    if not isinstance(valor, dict):
        return False
    textos = ('name', 'branch', 'academic_year')
    if not all(isinstance(valor.get(c), str) for c in textos):
        return False
    return 'logo' in valor and (valor['logo'] is None or isinstance(valor['logo'], str))


def _estrategia_valida(linha: Any) -> bool:
    return (
        isinstance(linha, dict)
        and _inteiro(linha.get('id'))
        and all(isinstance(linha.get(c), str) for c in CAMPOS_TEXTO_ESTRATEGIA)
        and all(_inteiro(linha.get(c)) for c in CONTADORES_ESTRATEGIA)
    )


def _formulario_valido(valor: Any) -> bool:
    if not isinstance(valor, dict):
        return False
    if not all(isinstance(valor.get(c), str) for c in CAMPOS_TEXTO_FORMULARIO):
        return False
    if not all(_inteiro(valor.get(c)) for c in CAMPOS_NUMERICOS_FORMULARIO):
        return False
    for categoria, campos in CATEGORIAS_CONTADORES.items():
        contadores = valor.get(categoria)
        if not isinstance(contadores, dict) or not all(_inteiro(contadores.get(c)) for c in campos):
            return False
    estrategias = valor.get('strategies')
    if not isinstance(estrategias, list) or not all(_estrategia_valida(e) for e in estrategias):
        return False
    # ids repetidos quebrariam edição e exclusão por id
    return len({e['id'] for e in estrategias}) == len(estrategias)


def _materias_validas(valor: Any) -> bool:
    return isinstance(valor, list) and all(isinstance(m, str) for m in valor)


def _fonte_valida(valor: Any) -> bool:
    return isinstance(valor, (int, float)) and not isinstance(valor, bool)


# chave persistida -> (atributo em memória, valor inicial, validador da estrutura)
_PADROES = {
    CHAVE_ESCOLA: ('_escola', ESCOLA_INICIAL, _escola_valida),
    CHAVE_FORMULARIO: ('_formulario', FORMULARIO_INICIAL, _formulario_valido),
    CHAVE_MATERIAS: ('_materias', MATERIAS_INICIAIS, _materias_validas),
    CHAVE_FONTE: ('_fonte', FONTE_PADRAO, _fonte_valida),
}


class AppState:
    """
    Registro de domínio carregado do armazenamento local.

    Toda leitura-modificação-escrita acontece sob um RLock, pois o Flask
    atende requisições em threads.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._lock = threading.RLock()
        for chave, (atributo, padrao, valido) in _PADROES.items():
            setattr(self, atributo, self._carregar(chave, padrao, valido))

    def _carregar(self, chave: str, padrao: Any, valido: Callable[[Any], bool]) -> Any:
        """Lê a chave; estrutura incompleta ou tipos errados caem no valor inicial só dessa chave."""
        valor = self._store.get(chave, padrao)
        if not valido(valor):
            logger.warning(f"Formato inesperado na chave '{chave}'. Usando valor padrão.")
            return copy.deepcopy(padrao)
        if chave == CHAVE_FONTE:
            return redutores.normalizar_tamanho_fonte(valor)
        return valor

    # === LEITURA ===

    @property
    def escola(self) -> Dict:
        return copy.deepcopy(self._escola)

    @property
    def formulario(self) -> Dict:
        return copy.deepcopy(self._formulario)

    @property
    def materias(self) -> List[str]:
        return list(self._materias)

    @property
    def tamanho_fonte(self) -> int:
        return self._fonte

    def snapshot(self) -> Dict:
        with self._lock:
            return {
                'escola': self.escola,
                'formulario': self.formulario,
                'materias': self.materias,
                'tamanho_fonte': self.tamanho_fonte,
            }

    # === INTENÇÕES ===

    def _aplicar(self, chave: str, redutor: Callable, *args, **kwargs) -> Any:
        atributo = _PADROES[chave][0]
        with self._lock:
            novo = redutor(getattr(self, atributo), *args, **kwargs)
            setattr(self, atributo, novo)
            self._store.set(chave, novo)
            return copy.deepcopy(novo)

    def atualizar_formulario(self, redutor: Callable, *args, **kwargs) -> Dict:
        return self._aplicar(CHAVE_FORMULARIO, redutor, *args, **kwargs)

    def atualizar_escola(self, redutor: Callable, *args, **kwargs) -> Dict:
        return self._aplicar(CHAVE_ESCOLA, redutor, *args, **kwargs)

    def atualizar_materias(self, redutor: Callable, *args, **kwargs) -> List[str]:
        return self._aplicar(CHAVE_MATERIAS, redutor, *args, **kwargs)

    def definir_tamanho_fonte(self, valor: Any) -> int:
        return self._aplicar(CHAVE_FONTE, lambda _atual: redutores.normalizar_tamanho_fonte(valor))

    def resetar(self) -> None:
        """Volta escola, formulário, matérias e fonte ao seed, de uma só vez."""
        with self._lock:
            for chave, (atributo, padrao, _valido) in _PADROES.items():
                inicial = copy.deepcopy(padrao)
                setattr(self, atributo, inicial)
                self._store.set(chave, inicial)
        logger.info("Todos os dados foram redefinidos para os valores iniciais.")


def get_estado() -> AppState:
    """Retorna o contêiner de estado registrado pela Application Factory."""
    return current_app.extensions['estado']
