"""
Ordenação da tabela de estratégias.

A ordenação é só de exibição: a lista armazenada nunca é reordenada.
"""

from typing import Dict, List, NamedTuple, Optional

from painel_docente.core.constants import CONTADORES_ESTRATEGIA

ASCENDENTE = 'ascending'
DESCENDENTE = 'descending'


class ConfigOrdenacao(NamedTuple):
    coluna: Optional[str] = None
    direcao: str = ASCENDENTE

    def to_dict(self) -> Dict:
        return {'coluna': self.coluna, 'direcao': self.direcao}

    @classmethod
    def from_dict(cls, dados: Optional[Dict]) -> 'ConfigOrdenacao':
        """Reconstrói a configuração guardada na sessão; valores estranhos viram o padrão."""
        if not dados:
            return cls()
        coluna = dados.get('coluna')
        direcao = dados.get('direcao')
        if coluna not in CONTADORES_ESTRATEGIA or direcao not in (ASCENDENTE, DESCENDENTE):
            return cls()
        return cls(coluna, direcao)


def alternar_ordenacao(atual: ConfigOrdenacao, coluna: str) -> ConfigOrdenacao:
    """
    Clique no cabeçalho: a mesma coluna alterna a direção,
    outra coluna recomeça em ordem ascendente.
    """
    if coluna not in CONTADORES_ESTRATEGIA:
        raise ValueError(f"Coluna não ordenável: {coluna}")
    if atual.coluna == coluna and atual.direcao == ASCENDENTE:
        return ConfigOrdenacao(coluna, DESCENDENTE)
    return ConfigOrdenacao(coluna, ASCENDENTE)


def ordenar_estrategias(estrategias: List[Dict], config: ConfigOrdenacao) -> List[Dict]:
    # sorted() é estável também com reverse=True
    if config.coluna is None:
        return list(estrategias)
    return sorted(
        estrategias,
        key=lambda e: e[config.coluna],
        reverse=config.direcao == DESCENDENTE,
    )


def indicador(config: ConfigOrdenacao, coluna: str) -> str:
    if config.coluna != coluna:
        return ''
    return '▲' if config.direcao == ASCENDENTE else '▼'
