import logging
import os
import socket

from domain_browser.ui.dash_app import create_dash_app
from domain_browser.logging_config import configure_logging

configure_logging()
logger = logging.getLogger("domain_browser.app")

CONFIG_ROOT = os.getenv("DOMAIN_BROWSER_CONFIG_ROOT", "config")

app = create_dash_app(CONFIG_ROOT)
server = app.server


def pick_port(preferred: int, attempts: int = 100) -> int:
    """First port from `preferred` upwards with nothing listening on it."""
    for port in range(preferred, preferred + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return preferred


def main() -> None:
    preferred = int(os.getenv("PORT", "8050"))
    port = pick_port(preferred)
    if port != preferred:
        logger.warning("Port %d in use, serving on %d", preferred, port)

    logger.info("Serving catalog browser", extra={"config_root": CONFIG_ROOT, "port": port})
    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
