from jsontodo.api import create_app
from jsontodo.settings import TodoSettings, todo_settings
import logging
import uvicorn

logger = logging.getLogger(__name__)


def configure_logging(settings: "TodoSettings" = todo_settings):
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(settings: "TodoSettings" = todo_settings):
    configure_logging(settings=settings)
    app = create_app(settings=settings)

    logger.info("Backend server running on port %d", settings.PORT)
    logger.info("Open your frontend service URL in your browser to access the app.")
    if settings.BACKEND == "json_file":
        logger.warning(
            "Data stored in %s will NOT persist across container restarts or scale-downs.",
            settings.DB_PATH,
        )

    try:
        uvicorn.run(
            app,
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except KeyboardInterrupt:
        pass

    logger.info("Server stopped.")


if __name__ == "__main__":
    main()
