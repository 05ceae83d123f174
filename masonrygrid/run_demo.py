import logging
import os
import random
import sys
import traceback
import warnings
from datetime import datetime

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QScrollArea

from masonrygrid.utils.settings import layout_config_from_settings
from masonrygrid.widgets.masonry_grid_widget import MasonryGridWidget

CRASH_LOG_PATH = os.path.abspath('masonrygrid_crash.log')


def _append_crash_log(title: str, exc_info):
    """Append a timestamped traceback to the crash log."""
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    try:
        with open(CRASH_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write(f"\n{ts} | {title}\n")
            f.writelines(traceback.format_exception(*exc_info))
    except OSError as log_error:
        print(f"[CRASH] Failed to write crash log: {log_error}")
        return
    print(f"[CRASH] Details written to: {CRASH_LOG_PATH}")


def install_crash_handlers():
    """Log unhandled exceptions before the default hook reports them."""

    def _unhandled_exception(exc_type, exc_value, exc_traceback):
        _append_crash_log("UNHANDLED EXCEPTION", (exc_type, exc_value, exc_traceback))
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = _unhandled_exception


def suppress_warnings():
    """Suppress warnings when not in a development environment."""
    if os.getenv('MASONRYGRID_ENVIRONMENT') == 'development':
        print('Running in development environment.')
        return
    logging.basicConfig(level=logging.ERROR)
    warnings.simplefilter('ignore')


def build_demo_items(count: int, seed: int = 0, width: int = 180) -> list[QLabel]:
    """Labels of one width and pseudo-random heights."""
    rng = random.Random(seed)
    items = []
    for index in range(count):
        label = QLabel(f'Item {index + 1}')
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setStyleSheet('background: #3a6ea5; color: white; border-radius: 4px;')
        label.setFixedSize(width, rng.randint(60, 260))
        items.append(label)
    return items


def run_demo(count: int = 60) -> int:
    app = QApplication.instance() or QApplication([])
    app.setApplicationName('masonrygrid')
    app.setApplicationDisplayName('Masonry Grid')
    app.setStyle('Fusion')

    config = layout_config_from_settings()
    grid = MasonryGridWidget(config)
    if not config.auto_resize:
        grid.update_config(auto_resize=True)
    grid.set_items(build_demo_items(count))

    scroll_area = QScrollArea()
    scroll_area.setWidgetResizable(True)
    scroll_area.setWidget(grid)

    window = QMainWindow()
    window.setCentralWidget(scroll_area)
    window.resize(1000, 700)
    window.show()
    grid.relayout()

    exit_code = int(app.exec())
    grid.dispose()
    return exit_code


def main():
    install_crash_handlers()
    suppress_warnings()
    sys.exit(run_demo())


if __name__ == '__main__':
    main()
