import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from src.core.app_config import LOG_LEVELS, AppConfig
from src.ui.main_window import APP_TITLE, MainWindow
from src.ui.theme import available_theme_names, theme_session

logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="igcv-gui",
        description="Fraunhofer IGCV GUI framework demo",
    )
    p.add_argument("--theme", default=None, help=f"Theme name ({', '.join(available_theme_names())})")
    p.add_argument("--start-page", default=None, help="Navigation name of the page shown first")
    p.add_argument("--log-level", default=None, choices=LOG_LEVELS, type=str.upper)
    # Qt consumes its own options (e.g. -platform) from sys.argv.
    args, _unknown = p.parse_known_args(argv)
    return args


def build_config(argv=None, environ=None) -> AppConfig:
    args = _parse_args(argv)
    return AppConfig.from_env(environ).with_overrides(
        theme_name=args.theme,
        start_page=args.start_page,
        log_level=args.log_level,
    )


def main(argv=None) -> int:
    config = build_config(argv)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)

    def exception_hook(exctype, value, traceback):
        from PySide6.QtWidgets import QMessageBox
        import traceback as tb
        error_msg = "".join(tb.format_exception(exctype, value, traceback))
        print(error_msg, file=sys.stderr)
        logger.critical("Unhandled exception: %s", value)
        QMessageBox.critical(None, "Critical Error", f"An unexpected error occurred:\n{value}")
        sys.exit(1)

    sys.excepthook = exception_hook

    with theme_session():
        window = MainWindow(config)
        window.show()
        return app.exec()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
