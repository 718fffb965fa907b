import logging
import sys
import os
from logging.handlers import RotatingFileHandler

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class OneLineExceptionFormatter(logging.Formatter):
    """Format exceptions on a single line for cleaner logs."""

    def formatException(self, exc_info):
        result = super().formatException(exc_info)
        return repr(result)

    def format(self, record):
        result = super().format(record)
        if record.exc_text:
            result = result.replace("\n", " | ")
        return result


def parse_level(name):
    """
    Map a level name (case-insensitive) to a logging level.

    Raises:
        ValueError: For names outside DEBUG, INFO, WARNING, ERROR
    """
    level = LEVELS.get(str(name).strip().upper())
    if level is None:
        raise ValueError(f"Invalid level: {name}. Use DEBUG, INFO, WARNING, or ERROR")
    return level


def init_logger(
    log_level=logging.INFO,
    log_file="logs/cli.log",
    file_size=2 * 1024 * 1024,
    file_count=2,
    shell_output=False,
    log_file_mode="a",
    log_format="%(asctime)s %(levelname)s %(name)s %(funcName)s(%(lineno)d) %(message)s",
    print_log_init=False,
):
    """
    Initialize root logger with rotating file handler and optional stdout output.

    Args:
        log_level: Logging level (default: INFO)
        log_file: Path to log file
        file_size: Max size per log file in bytes
        file_count: Number of backup files to keep
        shell_output: Whether to also output to stdout (off by default, the menu owns stdout)
        log_file_mode: File mode ('a' for append, 'w' for overwrite)
        log_format: Log message format string
        print_log_init: Whether to print initialization message

    Returns:
        Configured root logger
    """
    main_logger = logging.getLogger()
    main_logger.setLevel(log_level)
    log_formatter = OneLineExceptionFormatter(log_format)

    # Create log directory if needed
    log_dir = os.path.dirname(os.path.abspath(log_file))
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        if print_log_init:
            print(f"Log directory: {log_dir}")

    # Clear existing handlers to prevent duplicates
    for handler in list(main_logger.handlers):
        main_logger.removeHandler(handler)
        handler.close()

    try:
        log_rotate_handler = RotatingFileHandler(
            log_file,
            mode=log_file_mode,
            maxBytes=file_size,
            backupCount=file_count,
            encoding="utf-8",
            delay=False,
        )
        log_rotate_handler.setFormatter(log_formatter)
        log_rotate_handler.setLevel(log_level)
        main_logger.addHandler(log_rotate_handler)

    except OSError as e:
        print(f"Exception when creating file handler: {e}")

    if shell_output:
        stream_log_handler = logging.StreamHandler(stream=sys.stdout)
        stream_log_handler.setFormatter(log_formatter)
        stream_log_handler.setLevel(log_level)
        main_logger.addHandler(stream_log_handler)

    if print_log_init:
        print(f"Logging initialized: level={log_level}, file={os.path.abspath(log_file)}")

    return main_logger


class LogManager:
    """
    Manages component logger levels with smart hierarchy handling.

    Provides:
    - Curated registry of components (application vs. AWS SDK)
    - Smart auto-adjustment of root logger and handlers when needed
    """

    COMPONENTS = {
        "prompt": {
            "default": logging.INFO,
            "description": "Application logs (config, prompts, completions)",
            "loggers": ["app.prompt", "core"]
        },
        "aws": {
            "default": logging.WARNING,
            "description": "AWS SDK request/response logs",
            "loggers": ["boto3", "botocore", "urllib3"]
        },
    }

    # Third-party libraries to silence by default
    NOISY_DEFAULTS = {
        "asyncio": logging.WARNING,
        "markdown_it": logging.WARNING,
        "s3transfer": logging.WARNING,
    }

    def __init__(self, root_logger=None):
        """
        Initialize LogManager.

        Args:
            root_logger: Root logger instance (defaults to logging.getLogger())
        """
        self.root_logger = root_logger or logging.getLogger()
        self._component_loggers = {}

        # Apply defaults for components
        for component, config in self.COMPONENTS.items():
            for logger_name in config["loggers"]:
                logger = logging.getLogger(logger_name)
                logger.setLevel(config["default"])
                self._component_loggers.setdefault(component, []).append(logger)

        # Silence noisy libraries
        for logger_name, level in self.NOISY_DEFAULTS.items():
            logging.getLogger(logger_name).setLevel(level)

    def set_level(self, component, level):
        """
        Set log level for a component with smart root adjustment.

        If the target level is lower than root level, root and its handlers
        are lowered too so the messages get through.

        Args:
            component: Component name ("prompt", "aws", or "all")
            level: Logging level (logging.DEBUG, INFO, WARNING, ERROR)

        Returns:
            tuple: (success: bool, message: str) for UI display
        """
        level_name = logging.getLevelName(level)

        if component == "all":
            components_to_set = list(self.COMPONENTS.keys())
        elif component in self.COMPONENTS:
            components_to_set = [component]
        else:
            return False, f"Unknown component: {component}"

        root_adjusted = False
        if self.root_logger.level > level:
            self.root_logger.setLevel(level)
            for handler in self.root_logger.handlers:
                if handler.level > level:
                    handler.setLevel(level)
            root_adjusted = True

        for comp in components_to_set:
            for logger in self._component_loggers.get(comp, []):
                logger.setLevel(level)

        if component == "all":
            msg = f"All components set to {level_name}"
        else:
            msg = f"{component.capitalize()} logs set to {level_name}"

        if root_adjusted:
            msg += f"\n(Root level auto-adjusted to {level_name})"

        return True, msg

    def get_status(self):
        """
        Get current log levels for all components.

        Returns:
            dict: {
                "root": level_name,
                "components": {component: level_name}
            }
        """
        status = {
            "root": logging.getLevelName(self.root_logger.level),
            "components": {}
        }

        for component, loggers in self._component_loggers.items():
            # Level of the first logger stands for the group
            if loggers:
                status["components"][component] = logging.getLevelName(loggers[0].level)

        return status
