"""
Central de Notificações.

Fila única do processo com mensagens curtas (sucesso, erro, informação,
aviso). Cada mensagem expira sozinha após 'duracao' segundos ou quando o
usuário a dispensa. Novas mensagens entram no topo; não há deduplicação.
"""

import itertools
import threading
import time
from dataclasses import dataclass
from typing import Callable, List

from flask import current_app

TIPOS_VALIDOS = ('success', 'error', 'info', 'warning')


@dataclass(frozen=True)
class Notificacao:
    id: int
    mensagem: str
    tipo: str
    criada_em: float


class CentralNotificacoes:

    def __init__(self, duracao: float = 5.0, relogio: Callable[[], float] = time.monotonic):
        self.duracao = duracao
        self._relogio = relogio
        self._fila: List[Notificacao] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def adicionar(self, mensagem: str, tipo: str = 'info') -> Notificacao:
        if tipo not in TIPOS_VALIDOS:
            raise ValueError(f"Tipo de notificação inválido: {tipo}")
        with self._lock:
            notificacao = Notificacao(next(self._ids), mensagem, tipo, self._relogio())
            self._fila.insert(0, notificacao)
            return notificacao

    def _expirar(self) -> None:
        limite = self._relogio() - self.duracao
        self._fila = [n for n in self._fila if n.criada_em > limite]

    def ativas(self) -> List[Notificacao]:
        """Remove as expiradas e devolve as restantes (mais nova primeiro)."""
        with self._lock:
            self._expirar()
            return list(self._fila)

    def restante(self, notificacao: Notificacao) -> float:
        """Segundos até a notificação expirar (usado pelo template para escondê-la)."""
        return max(notificacao.criada_em + self.duracao - self._relogio(), 0.0)

    def dispensar(self, id_notificacao: int) -> bool:
        with self._lock:
            antes = len(self._fila)
            self._fila = [n for n in self._fila if n.id != id_notificacao]
            return len(self._fila) < antes


def notificar(mensagem: str, tipo: str = 'info') -> Notificacao:
    """Atalho usado pelas rotas, no mesmo espírito do 'flash' do Flask."""
    return current_app.extensions['notificacoes'].adicionar(mensagem, tipo)
