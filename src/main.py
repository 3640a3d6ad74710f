"""
Main entry point for the Parameter Panel.
Launches the main frame.
"""

import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PyQt5.QtWidgets import QApplication


def configure_logging():
    """Apply PP_LOG_LEVEL / PP_LOG_FILE from the environment."""
    from src.config import get_env_log_level, get_env_log_file, LOG_LEVEL_ENV
    from src.utils.app_paths import resolve_log_file
    from src.utils.logger import logger, parse_log_level

    level_name = get_env_log_level()
    if level_name:
        level = parse_log_level(level_name)
        if level is None:
            logger.warning(f"Ignoring unknown {LOG_LEVEL_ENV}", component="APP",
                           details=level_name)
        else:
            logger.set_level(level)

    log_file = get_env_log_file()
    if log_file:
        path = resolve_log_file(log_file)
        logger.enable_file_logging(str(path))
        logger.info(f"Logging to {path}", component="APP")


def main():
    # Initialize logger first
    from src.utils.logger import logger

    configure_logging()

    logger.info("=" * 40, component="APP")
    logger.info("Parameter Panel starting", component="APP")
    logger.info("=" * 40, component="APP")
    logger.info("Drag any control, Shift for fine control", component="APP")
    logger.info("Double-click a control to reset it", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv)

    from src.gui.main_frame import MainFrame

    window = MainFrame()

    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
