import logging

import requests

from .errors import ForwardError

logger = logging.getLogger(__name__)


def send_gchat_payload(webhook_url, body, timeout=None):
    """POST do JSON já serializado para o webhook do Google Chat.

    Retorna ``(status_code, response_text)``. ``response_text`` é ``None`` quando
    a leitura do corpo falha, o que não invalida o envio.
    """
    if not webhook_url:
        raise ForwardError("WEBHOOK_URL is not configured")

    try:
        resp = requests.post(
            webhook_url,
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            stream=True,
        )
    except requests.RequestException as e:
        raise ForwardError(f"post to webhook failed: {e}") from e

    with resp:
        try:
            response_text = resp.text
        except requests.RequestException as e:
            logger.warning(f"Falha ao ler resposta do webhook: {e}")
            return resp.status_code, None

    logger.info(f"[gchat response] status={resp.status_code} body={response_text}")
    return resp.status_code, response_text
