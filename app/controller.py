import logging

from flask import Flask, Response, request

from .constants import ForwarderSettings
from .errors import ForwarderError, ResponseWriteError
from .formatters import build_chat_message
from .models import Alert
from .services import send_gchat_payload
from .utils import dump_json_body, load_json_body

logger = logging.getLogger(__name__)


def write_json_response(body):
    # Só cobre a montagem do Response; a escrita dos bytes acontece depois, no servidor WSGI
    try:
        return Response(body, status=200, mimetype='application/json')
    except Exception as e:
        raise ResponseWriteError(str(e)) from e


def handle_alert(req, settings):
    """Decodifica o alerta do Grafana, monta o card, encaminha e devolve o card."""
    alert = Alert.from_dict(load_json_body(req.get_data()))
    logger.info(f"[alert log] {alert!r}")

    message = build_chat_message(alert)
    body = dump_json_body(message.to_dict())
    logger.debug(f"[DEBUG] Payload: {body[:500]!r}")

    send_gchat_payload(settings.webhook_url, body, timeout=settings.timeout_seconds)
    return write_json_response(body)


def create_app(settings=None):
    if settings is None:
        settings = ForwarderSettings.from_env()

    app = Flask(__name__)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'grafana-gchat-forwarder'}, 200

    @app.route('/', methods=['POST'])
    @app.route('/alert', methods=['POST'])
    def alert():
        try:
            return handle_alert(request, settings)
        except ForwarderError as e:
            logger.error(f"[error] {type(e).__name__}: {e}")
            return '', 500
        except Exception:
            logger.exception("[error] unexpected failure handling alert")
            return '', 500

    return app
