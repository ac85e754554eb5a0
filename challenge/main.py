import logging

from challenge.config.settings import settings
from challenge.services.runner import run_challenge

logger = logging.getLogger("challenge")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    logger.info(f"🚀 Starting {settings.APP_NAME}...")
    run_challenge()


if __name__ == "__main__":
    main()
