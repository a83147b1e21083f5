"""
Módulo de Persistência Local (Key-Value Store)

Guarda valores JSON nomeados em disco, um arquivo por chave.
Contrato "fail soft": leituras com falha devolvem o valor padrão e
escritas com falha são apenas registradas em log, mantendo o valor anterior.
"""

import copy
import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Union

from painel_docente.core.logger import get_logger

logger = get_logger(__name__)

_CHAVE_VALIDA = re.compile(r'^[A-Za-z0-9_\-\.]+$')


class KeyValueStore:
    """
    Armazenamento durável de valores JSON por chave.

    Cada chave vira '<diretorio>/<chave>.json'. Um arquivo corrompido
    afeta apenas a sua própria chave.
    """

    def __init__(self, diretorio: Union[str, Path]):
        self.diretorio = Path(diretorio)
        self.diretorio.mkdir(parents=True, exist_ok=True)

    def _caminho(self, key: str) -> Path:
        if not _CHAVE_VALIDA.match(key):
            raise ValueError(f"Chave inválida para o armazenamento: {key!r}")
        return self.diretorio / f"{key}.json"

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retorna o valor armazenado em 'key' ou uma cópia de 'default'
        se a chave não existir ou não puder ser lida.
        """
        try:
            caminho = self._caminho(key)
            if not caminho.exists():
                return copy.deepcopy(default)
            with caminho.open('r', encoding='utf-8') as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning(f"Falha ao ler a chave '{key}' ({e}). Usando valor padrão.")
            return copy.deepcopy(default)

    def set(self, key: str, value: Any) -> bool:
        """
        Serializa e grava 'value' em 'key'.

        A escrita passa por um arquivo temporário e 'os.replace', então uma
        falha nunca deixa a chave pela metade.

        Returns:
            bool: True se gravou, False se a falha foi absorvida.
        """
        try:
            caminho = self._caminho(key)
            conteudo = json.dumps(value, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            logger.error(f"Valor não serializável para a chave '{key}': {e}")
            return False

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.diretorio, prefix=f".{key}.", suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                fh.write(conteudo)
            os.replace(tmp_path, caminho)
            return True
        except OSError as e:
            logger.error(f"Erro ao gravar a chave '{key}': {e}", exc_info=True)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            return False

    def delete(self, key: str) -> None:
        """Remove a chave do disco (se existir)."""
        try:
            self._caminho(key).unlink(missing_ok=True)
        except (OSError, ValueError) as e:
            logger.error(f"Erro ao remover a chave '{key}': {e}")
