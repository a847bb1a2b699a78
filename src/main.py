"""Server entrypoint: `checkers-backend` (or `uvicorn src.main:app`)."""

import uvicorn

from src.api.app import create_app
from src.core.config import get_settings
from src.core.log_setup import configure_logging

app = create_app()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
