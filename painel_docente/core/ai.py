"""
Configuração Centralizada de IA (GenAI).

Único ponto de contato com o Gemini. Entrada: um prompt em texto livre.
Saída: o texto gerado (sem espaços nas pontas) ou uma exceção da família
ErroIA, já com a mensagem que deve aparecer para o usuário.
"""
from typing import Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from flask import current_app

from painel_docente.core.logger import get_logger

logger = get_logger(__name__)

_chave_configurada: Optional[str] = None


# === EXCEÇÕES ===

class ErroIA(Exception):
    """Falha ao gerar texto. 'mensagem_usuario' é exibida na notificação."""
    categoria = 'generic'
    mensagem_usuario = 'حدث خطأ أثناء إنشاء النص. يرجى المحاولة مرة أخرى لاحقًا.'


class CredencialAusenteError(ErroIA):
    categoria = 'missing_credential'
    mensagem_usuario = 'مفتاح API غير مهيأ. يرجى الاتصال بالمسؤول.'


class CredencialInvalidaError(ErroIA):
    categoria = 'invalid_credential'
    mensagem_usuario = 'مفتاح API غير صالح. يرجى الاتصال بالمسؤول.'


class FalhaDeRedeError(ErroIA):
    categoria = 'network'
    mensagem_usuario = 'خطأ في الشبكة. يرجى التحقق من اتصالك بالإنترنت.'


class FalhaGeracaoError(ErroIA):
    categoria = 'generic'


_ERROS_DE_REDE = (
    google_exceptions.ServiceUnavailable,
    google_exceptions.DeadlineExceeded,
    google_exceptions.RetryError,
    ConnectionError,
    TimeoutError,
)


def classificar_erro(erro: Exception) -> ErroIA:
    """Traduz a exceção do SDK para uma categoria conhecida."""
    if isinstance(erro, ErroIA):
        return erro

    texto = str(erro).lower()
    if isinstance(erro, google_exceptions.Unauthenticated) or 'api key' in texto or 'api_key' in texto:
        return CredencialInvalidaError(str(erro))
    if isinstance(erro, _ERROS_DE_REDE) or any(p in texto for p in ('network', 'fetch', 'connection', 'timed out')):
        return FalhaDeRedeError(str(erro))
    return FalhaGeracaoError(str(erro))


# === CLIENTE ===

def configurar_genai() -> None:
    """
    Configura a API Key do Gemini. Só reconfigura se a chave mudar.
    """
    global _chave_configurada

    api_key = current_app.config.get('GOOGLE_API_KEY')
    if not api_key:
        raise CredencialAusenteError("GOOGLE_API_KEY não configurada.")

    if api_key != _chave_configurada:
        genai.configure(api_key=api_key)
        _chave_configurada = api_key


def get_generative_model() -> genai.GenerativeModel:
    configurar_genai()
    return genai.GenerativeModel(current_app.config.get('GEMINI_MODEL', 'gemini-2.5-flash'))


def gerar_texto(prompt: str) -> str:
    """
    Envia o prompt ao modelo e devolve o texto gerado.

    Raises:
        ErroIA: em qualquer falha (credencial, rede, resposta vazia, etc.).
    """
    try:
        model = get_generative_model()
        response = model.generate_content(prompt)
        texto = (response.text or '').strip()
    except ErroIA:
        raise
    except Exception as e:
        erro = classificar_erro(e)
        logger.error(f"Falha na geração ({erro.categoria}): {e}", exc_info=True)
        raise erro from e

    if not texto:
        raise FalhaGeracaoError("O modelo retornou uma resposta vazia.")
    return texto
