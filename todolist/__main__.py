from todolist.api import create_app
from todolist.settings import TodoListSettings
from typing import Optional
import logging

logger = logging.getLogger("todolist")


def main(settings: "Optional[TodoListSettings]" = None):
    """Builds the application and serves it, unless running in test mode."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if settings is None:
        settings = TodoListSettings()

    app = create_app(settings=settings)
    if settings.TESTING:
        return app

    logger.info("Server running on port %d", settings.PORT)
    app.run(host=settings.HOST, port=settings.PORT)
    logger.info("Server stopped.")
    return app


if __name__ == "__main__":
    main()
