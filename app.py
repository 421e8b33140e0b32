import logging
import os
import socket

from wildlife_dashboard.ui.dash_app import create_dash_app
from wildlife_dashboard.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = create_dash_app(os.getenv("WILDLIFE_DASHBOARD_CONFIG", "config"))
server = app.server


def find_free_port(start_port: int, host: str = "0.0.0.0", attempts: int = 100) -> int:
    """First port from start_port that can be bound on host; start_port if none can."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
            except OSError:
                continue
            return port
    return start_port


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    preferred_port = int(os.getenv("PORT", "8050"))
    final_port = find_free_port(preferred_port, host)
    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning(
            "Preferred port taken",
            extra={"preferred_port": preferred_port, "port": final_port},
        )

    app.run(host=host, port=final_port, debug=debug)
