"""Application entry point for Animal Quiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from animal_quiz.core.quiz_engine import QuizEngine
from animal_quiz.ui.quiz_window import QuizWindow
from animal_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the engine, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Animal Quiz…")

    engine = QuizEngine()

    app = QApplication(sys.argv)
    window = QuizWindow(engine=engine)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
