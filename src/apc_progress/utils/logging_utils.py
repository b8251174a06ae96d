import sys
import time


SEPARATOR = '-' * 45


def log(message, level="INFO"):
    """Uniform console line: timestamp, level, message. Errors go to stderr."""
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    stream = sys.stderr if level.upper() == "ERROR" else sys.stdout
    print(f"[{timestamp}] [{level.upper()}] {message}", file=stream)


def log_info(message):
    log(message, "INFO")


def log_warning(message):
    log(message, "WARN")


def log_error(message):
    log(message, "ERROR")


def log_success(message):
    log(message, "SUCCESS")
