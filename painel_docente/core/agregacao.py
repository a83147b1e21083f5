"""
Agregação e mapeamento de gráficos do relatório.

Tudo aqui é recalculado a partir do formulário atual a cada leitura;
nenhum valor derivado é guardado.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import plotly.graph_objects as go
from plotly.offline import get_plotlyjs_version

from painel_docente.core.constants import (
    CONTADORES_ESTRATEGIA,
    CORES_CONE,
    CORES_ESTRATEGIA,
    ROTULOS_CONTADORES,
    ROTULOS_ESTRATEGIA,
)


def totais_estrategias(form: Dict) -> Dict[str, int]:
    """Soma dos contadores de todas as linhas, inclusive as sem nome."""
    totais = dict.fromkeys(CONTADORES_ESTRATEGIA, 0)
    for estrategia in form['strategies']:
        for coluna in CONTADORES_ESTRATEGIA:
            totais[coluna] += estrategia[coluna]
    return totais


def estrategias_nomeadas(form: Dict) -> List[Dict]:
    return [e for e in form['strategies'] if e['name'].strip()]


def dados_barras(valores: Mapping[str, int], rotulos: Mapping[str, str], cor: str) -> List[Dict]:
    """
    Barras horizontais: comprimento = valor / max(valores do grupo, 1).
    """
    maximo = max([*valores.values(), 1])
    return [
        {
            'chave': chave,
            'rotulo': rotulos.get(chave, chave),
            'valor': valor,
            'proporcao': valor / maximo,
            'cor': cor,
        }
        for chave, valor in valores.items()
    ]


def itens_classificacao(form: Dict) -> List[Dict]:
    totais = totais_estrategias(form)
    return [
        {'chave': c, 'rotulo': ROTULOS_ESTRATEGIA[c], 'valor': totais[c], 'cor': CORES_ESTRATEGIA[c]}
        for c in CONTADORES_ESTRATEGIA
    ]


def itens_cone(form: Dict) -> List[Dict]:
    cone = form['experience_cone']
    rotulos = ROTULOS_CONTADORES['experience_cone']
    return [
        {'chave': c, 'rotulo': rotulos[c], 'valor': v, 'cor': CORES_CONE.get(c, '#999999')}
        for c, v in cone.items()
    ]


def dados_pizza(itens: List[Dict]) -> Dict:
    """
    Setores proporcionais: fatia = valor / soma do grupo.
    Com soma 0 o gráfico fica vazio (a view mostra a mensagem de "sem dados").
    """
    soma = sum(item['valor'] for item in itens)
    if soma == 0:
        return {'vazio': True, 'soma': 0, 'setores': []}
    setores = [{**item, 'fracao': item['valor'] / soma} for item in itens]
    return {'vazio': False, 'soma': soma, 'setores': setores}


def figura_pizza(dados: Dict) -> Optional[go.Figure]:
    """Gráfico de rosca (Plotly) para os setores já calculados."""
    if dados['vazio']:
        return None
    setores = dados['setores']
    fig = go.Figure(
        data=[
            go.Pie(
                labels=[s['rotulo'] for s in setores],
                values=[s['valor'] for s in setores],
                marker=dict(colors=[s['cor'] for s in setores]),
                hole=0.7,
                sort=False,
                direction='clockwise',
                textinfo='none',
                hovertemplate="%{label}<br>القيمة: %{value}<br>(النسبة: %{percent:.1%})<extra></extra>",
            )
        ]
    )
    fig.update_layout(
        height=280,
        margin=dict(l=8, r=8, t=8, b=8),
        showlegend=True,
        legend=dict(orientation='h', y=-0.1),
        paper_bgcolor='rgba(0,0,0,0)',
    )
    return fig


def url_plotlyjs() -> str:
    """Bundle do CDN na mesma versão que o pacote plotly instalado gera."""
    return f"https://cdn.plot.ly/plotly-{get_plotlyjs_version()}.min.js"


def figura_html(fig: Optional[go.Figure]) -> Optional[str]:
    if fig is None:
        return None
    return fig.to_html(full_html=False, include_plotlyjs=False, config={'displayModeBar': False})
