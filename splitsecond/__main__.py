"""Allow running SplitSecond as a module: python -m splitsecond."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import SplitSecondApp


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("SPLITSECOND_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("SplitSecond")
    app.setOrganizationName("SplitSecond")

    window = SplitSecondApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
