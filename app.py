import logging
import os, sys
from PySide6.QtWidgets import QApplication
from FrontEnd.ui_main import MainWindow

def configure_logging():
    level = logging.DEBUG if os.environ.get("JEE_PROGRESS_DEBUG") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main():
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("JEE Progress")
    win = MainWindow()
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
