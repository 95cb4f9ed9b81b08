from __future__ import annotations
import logging
import uvicorn
from readme_gallery.infrastructure.config import get_settings
from readme_gallery.infrastructure.repo_config import load_repo_config

logger = logging.getLogger("readme_gallery")


def main() -> None:
    """Validate the repository list, then start the uvicorn ASGI server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    # Fail at startup rather than on the first page view.
    entries = load_repo_config(settings.repos_file)
    logger.info("Serving %d repositories from %s", len(entries), settings.repos_file)
    uvicorn.run(
        "readme_gallery.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
