"""Application entry point serving a quiz file to quiz takers over HTTP."""

from __future__ import annotations

from pathlib import Path
import sys

from quiz_taker.constants.network_constants import API_PREFIX, DEFAULT_HOST, DEFAULT_PORT
from quiz_taker.constants.quiz_constants import DEFAULT_QUIZ_PATH
from quiz_taker.core.quiz_importer import QuizImportError
from quiz_taker.core.services.local_backend import LocalQuizBackend
from quiz_taker.server.api_server import start_api_server
from quiz_taker.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the quiz file and run the API server."""
    logger = configure_logging()
    quiz_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_QUIZ_PATH

    try:
        backend = LocalQuizBackend.from_file(quiz_path, shuffle=True)
    except (OSError, QuizImportError, ValueError) as exc:
        logger.error("Unable to load quiz from %s: %s", quiz_path, exc)
        sys.exit(1)

    server_thread = start_api_server(backend=backend, host=DEFAULT_HOST, port=DEFAULT_PORT)
    logger.info("Quiz API available at http://%s:%d%s/quiz/start", DEFAULT_HOST, DEFAULT_PORT, API_PREFIX)
    server_thread.join()


if __name__ == "__main__":
    main()
