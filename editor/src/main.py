import sys
import os
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QLabel, QStatusBar
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

from components.transform_widget import TransformWidget
from utils.logger import loggerRaise, set_main_window
from utils.transform_math import matrix_to_svg_transform


class TransformEditorWindow(QMainWindow):
    """Main window hosting a single TransformWidget"""

    def __init__(self, config=None):
        super().__init__()
        self.setWindowTitle("Affine Transform Widget")
        self.resize(600, 600)

        set_main_window(self)

        self.transform_widget = TransformWidget(self, config=config)
        self.setCentralWidget(self.transform_widget)

        # Status bar shows the live matrix(...) body
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.matrix_label = QLabel()
        self.status_bar.addWidget(self.matrix_label)

        self.transform_widget.transformChanged.connect(self._on_transform_changed)
        self._on_transform_changed()

    def _on_transform_changed(self, *args):
        matrix = self.transform_widget.session.matrix()
        self.matrix_label.setText(f"matrix({matrix_to_svg_transform(matrix)})")


def _dark_palette():
    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    return dark_palette


def main():
    """Main entry point for the transform widget demo"""
    app = QtWidgets.QApplication(sys.argv)

    # Use Fusion style with dark palette
    app.setStyle("Fusion")
    app.setPalette(_dark_palette())

    try:
        window = TransformEditorWindow()
    except Exception as e:
        loggerRaise(e, "Failed to create the editor window")
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
