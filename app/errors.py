"""Erros terminais do encaminhamento de um alerta.

Todos resultam em HTTP 500 sem corpo para quem chamou; nenhum é re-tentado.
"""


class ForwarderError(Exception):
    """Base para falhas que encerram o processamento do request."""


class DecodeError(ForwarderError):
    """Corpo de entrada não é um JSON de alerta válido."""


class SerializeError(ForwarderError):
    """Documento de saída não pôde ser convertido em JSON."""


class ForwardError(ForwarderError):
    """Falha ao montar ou enviar o POST para o webhook."""


class ResponseWriteError(ForwarderError):
    """Falha ao escrever a resposta para quem chamou."""
