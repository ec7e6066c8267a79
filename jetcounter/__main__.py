"""Allow running JetCounter as a module: python -m jetcounter."""

import sys

from PyQt6.QtWidgets import QApplication

from .app import CountdownWindow
from .logging_config import configure_logging
from .settings import load_settings


def main() -> None:
    settings = load_settings()
    logger = configure_logging(settings.log_level)
    logger.info("JetCounter starting")

    app = QApplication(sys.argv)
    app.setApplicationName("JetCounter")
    app.setOrganizationName("JetCounter")

    window = CountdownWindow(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
