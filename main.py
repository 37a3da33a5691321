import logging

from hashpage.config import CONFIG_PATH, load_config
from hashpage.main import create_app
from hashpage.server import Listener, build_server


logger = logging.getLogger("hashpage")


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run() -> None:
    configure_logging()
    try:
        settings = load_config(CONFIG_PATH)
    except RuntimeError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    listener = Listener()
    app = create_app(listener)
    server = build_server(app, settings, listener)
    logger.info("Serving on https://%s:%d", settings.bind_address, settings.bind_port)
    server.run()
    logger.info("Listener stopped")


if __name__ == "__main__":
    run()
