import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

SERVICE_NAME = "wireframe_converter"
KEEP_DAYS = 7


def _today_log_file(log_dir: Path) -> Path:
    """Return path to today's log file (e.g. app-2026-02-16.log)."""
    return log_dir / f"app-{datetime.now(timezone.utc).strftime('%Y-%m-%d')}.log"


def _cleanup_old_logs(log_dir: Path) -> None:
    """Delete log files older than KEEP_DAYS."""
    cutoff = datetime.now(timezone.utc).timestamp() - (KEEP_DAYS * 86400)
    for f in log_dir.glob("app-*.log"):
        try:
            if f.stat().st_mtime < cutoff:
                f.unlink()
        except OSError:
            pass


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Apply log level and optional file output to the service logger.

    Console output is always on. When log_dir is given, lines are also
    appended to a date-based file in that directory (KEEP_DAYS retained).
    """
    logger = logging.getLogger(SERVICE_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        logger.removeHandler(handler)
        handler.close()

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            _today_log_file(path), mode="a", encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(file_handler)
        _cleanup_old_logs(path)


class StructuredLogger:
    """
    Structured logger that outputs logs in uvicorn-style format.

    All instances share the service's stdlib logger, so handlers set up by
    configure_logging apply to every module.
    """

    def __init__(self, component: str):
        self.component = component
        self.logger = logging.getLogger(SERVICE_NAME)
        self.logger.propagate = False

        has_console = any(
            type(h) is logging.StreamHandler for h in self.logger.handlers
        )
        if not has_console:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(console_handler)
            self.logger.setLevel(logging.INFO)

    def log(
        self,
        level: str,
        message: str,
        context: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        """Log a structured message in uvicorn-style format."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level_padded = level.ljust(8)

        req_id = request_id or generate_request_id()
        log_parts = [
            f"{timestamp} | {level_padded} | {self.component}:{req_id} - {message}"
        ]

        if context:
            context_str = " ".join(f"{k}={v}" for k, v in context.items())
            log_parts.append(f" - {context_str}")

        log_line = "".join(log_parts)
        log_method = getattr(self.logger, level.lower(), self.logger.info)
        log_method(log_line)

    def info(
        self,
        message: str,
        context: Optional[dict] = None,
        request_id: Optional[str] = None,
    ):
        self.log("INFO", message, context, request_id)

    def debug(
        self,
        message: str,
        context: Optional[dict] = None,
        request_id: Optional[str] = None,
    ):
        self.log("DEBUG", message, context, request_id)

    def warning(
        self,
        message: str,
        context: Optional[dict] = None,
        request_id: Optional[str] = None,
    ):
        self.log("WARNING", message, context, request_id)

    def error(
        self,
        message: str,
        context: Optional[dict] = None,
        request_id: Optional[str] = None,
    ):
        self.log("ERROR", message, context, request_id)


def generate_request_id() -> str:
    """Generate a unique request ID for tracing"""
    return f"req-{uuid.uuid4().hex[:12]}"


def get_logs_by_request_id(
    request_id: str, log_dir: Optional[str], max_lines: int = 1000
) -> list[str]:
    """Search log files for entries matching a request ID."""
    if not log_dir:
        return []

    matching_logs: list[str] = []
    log_files = sorted(Path(log_dir).glob("app-*.log"), reverse=True)

    for log_file in log_files:
        try:
            with open(log_file, "r", encoding="utf-8") as f:
                for line in f:
                    if request_id in line:
                        matching_logs.append(line.strip())
                        if len(matching_logs) >= max_lines:
                            return matching_logs
        except OSError:
            pass

    return matching_logs
