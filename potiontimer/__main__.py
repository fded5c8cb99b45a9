"""Allow running Potion Timer as a module: python -m potiontimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PotionTimerApp
from .settings import Settings


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Potion Timer")
    app.setOrganizationName("Potion Timer")

    window = PotionTimerApp(Settings())
    app.aboutToQuit.connect(window.shutdown)
    window.show()
    logging.getLogger(__name__).info("Potion Timer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
