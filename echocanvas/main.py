"""
Main entry point for Echo Canvas.
Launches the main frame with all components.
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="echo-canvas",
        description="Click to spawn fading ripples that each play a tone.",
    )
    parser.add_argument("--debug", action="store_true",
                        help="show debug messages in the terminal")
    parser.add_argument("--log-file", metavar="PATH",
                        help="also write the log to PATH")
    parser.add_argument("--connect", action="store_true",
                        help="connect to SuperCollider on startup")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Initialize logger first
    from echocanvas.utils.logger import logger, LogLevel, set_log_level

    if args.debug:
        set_log_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    logger.info("=" * 40, component="APP")
    logger.info("Echo Canvas starting", component="APP")
    logger.info("=" * 40, component="APP")
    logger.info("1. Start SuperCollider and run supercollider/echo_tone.scd", component="APP")
    logger.info("2. Click or touch the canvas to spawn echoes", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv[:1])

    from echocanvas.gui.main_frame import MainFrame

    window = MainFrame()
    if args.connect:
        window.bridge.connect()

    window.show()
    window.start()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
