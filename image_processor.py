import logging
import sys

from PyQt5.QtWidgets import QApplication

from IP_Libs.EditorLib.image_processor_window import ImageProcessorWindow


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = ImageProcessorWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
