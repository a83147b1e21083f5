"""
Módulo de Configuração

Define a classe de configuração principal. Implementa o padrão 'Fail Fast':
se uma variável crítica estiver faltando, a aplicação nem inicia.
"""

import os
from dotenv import load_dotenv

# Carrega variáveis do arquivo .env
load_dotenv()

class Config:
    """
    Classe de configuração base da aplicação.
    """

    # === SEGURANÇA CRÍTICA (Fail Fast) ===
    # A sessão guarda a ordenação da tabela e o token CSRF dos formulários.
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        raise ValueError("ERRO CRÍTICO: 'SECRET_KEY' não encontrada no .env. A aplicação não pode iniciar insegura.")

    # === PERSISTÊNCIA LOCAL ===
    # Diretório dos arquivos JSON (uma chave por arquivo).
    # Vazio = '<instance>/dados', resolvido pela factory.
    DATA_DIR = os.environ.get('DATA_DIR', '')

    # === IA (GEMINI) ===
    GOOGLE_API_KEY = os.environ.get('GOOGLE_API_KEY')
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.5-flash')

    if not GOOGLE_API_KEY:
        print("AVISO: 'GOOGLE_API_KEY' ausente. Os recursos de IA não funcionarão.")

    # Limite por cliente nas rotas que chamam o Gemini
    AI_RATE_LIMIT = os.environ.get('AI_RATE_LIMIT', '10 per minute')

    # === INTERFACE ===
    # Tempo de vida das notificações (segundos)
    NOTIFICACAO_DURACAO = float(os.environ.get('NOTIFICACAO_DURACAO', '5'))

    # Upload do logo (base64 no JSON): limite de 2 MB por requisição
    MAX_CONTENT_LENGTH = 2 * 1024 * 1024

    # === FLASK ===
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
