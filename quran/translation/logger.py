import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_logger(name):
    return logging.getLogger(name)

_LOG_LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

def resolve_level(log_level_str):
    return _LOG_LEVEL_MAP.get(str(log_level_str).upper(), logging.INFO)

def setup_logging(log_dir_path=None, run_log_name="alignment", log_level_str="INFO"):
    """
    Sets up logging to the console and, when a directory is given, to a file.
    Args:
        log_dir_path (str): Directory where log files will be saved, or None for console only.
        run_log_name (str): Base name for the log file (e.g., 'alignment').
        log_level_str (str): Logging level as a string (e.g., 'INFO', 'DEBUG').
    """
    root_logger = logging.getLogger()
    log_level = resolve_level(log_level_str)

    # Only add handlers if they haven't been added already
    if not root_logger.handlers:
        root_logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

        if log_dir_path:
            os.makedirs(log_dir_path, exist_ok=True)
            log_file_path = os.path.join(log_dir_path, f"{run_log_name}.log")
            file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root_logger.addHandler(file_handler)

    # Re-applied on every call so a second call can change the level.
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers:
        handler.setLevel(log_level)
    return root_logger
