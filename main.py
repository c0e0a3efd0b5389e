import logging

from app.controller import create_app
from app.constants import APP_PORT, ForwarderSettings


settings = ForwarderSettings.from_env()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

app = create_app(settings)

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=APP_PORT, debug=settings.debug)
