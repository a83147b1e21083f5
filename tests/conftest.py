import os

# config.py falha na importação sem SECRET_KEY
os.environ.setdefault('SECRET_KEY', 'chave-de-teste')

import pytest

from config import Config
from painel_docente import create_app


class ConfigTeste(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    GOOGLE_API_KEY = None
    DATA_DIR = ''


def montar_config(data_dir, **extras):
    """Subclasse de ConfigTeste apontando para um diretório de dados próprio."""
    atributos = {'DATA_DIR': str(data_dir), **extras}
    return type('ConfigTesteLocal', (ConfigTeste,), atributos)


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / 'dados'


@pytest.fixture
def app(data_dir):
    app = create_app(montar_config(data_dir))
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def estado(app):
    return app.extensions['estado']


@pytest.fixture
def nova_app(data_dir):
    """Cria outra instância sobre o mesmo diretório de dados (simula reabrir o app)."""
    def _criar(**extras):
        return create_app(montar_config(data_dir, **extras))
    return _criar
