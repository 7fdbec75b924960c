"""Application logging and the per-run audit line."""

import logging
from pathlib import Path

from ranking.utils import rfc3339_now

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
APP_LOG_NAME = "app.log"
RUN_LOG_NAME = "run_log.txt"
LOGGER_NAMES = ("resume_matcher", "ranking")

logger = logging.getLogger(__name__)


def setup_app_logging(log_dir: str | Path | None = None) -> logging.Logger:
    """Configure console (INFO) and file (DEBUG) logging for both packages. Safe to call twice."""
    log_dir = Path(log_dir) if log_dir else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    for name in LOGGER_NAMES:
        pkg_logger = logging.getLogger(name)
        if pkg_logger.handlers:
            continue
        pkg_logger.setLevel(logging.DEBUG)

        # Console
        ch = logging.StreamHandler()
        ch.setLevel(logging.INFO)
        ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
        pkg_logger.addHandler(ch)

        # File
        fh = logging.FileHandler(log_dir / APP_LOG_NAME, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
        pkg_logger.addHandler(fh)

    return logging.getLogger(LOGGER_NAMES[0])


def format_run_line(out_path: str | Path, total: int) -> str:
    return f"{rfc3339_now()} | Scored {total} resumes | {out_path}\n"


def append_run_log(out_path: str | Path, total: int) -> None:
    """Append one line to run_log.txt beside the results file. Failures are logged, never raised."""
    log_path = Path(out_path).parent / RUN_LOG_NAME
    try:
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(format_run_line(out_path, total))
    except OSError as e:
        logger.warning("Could not append run log %s: %s", log_path, e)
