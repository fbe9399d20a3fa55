import os
import sys

import configparser
from typing import Optional
import logging
from logging.handlers import RotatingFileHandler

from stepsearch.search.registry import ALGORITHMS

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "visualizer.conf")
LOGGER_NAME = "StepSearch"


class ConfigError(Exception):
    """Base exception for configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigFileError(ConfigError):
    """Raised when there are issues with the configuration file."""
    pass


class Config:
    """Manages visualizer configuration and logging setup.

    Reads settings from an INI file, validates them, and initializes a logger
    with a console handler and, when configured, a rotating file handler.

    Attributes:
        algorithm (str): Algorithm selected when a session starts.
        speed_ms (int): Delay between two steps, in milliseconds.
        min_array_length (int): Fewest values accepted from user input.
        max_array_length (int): Most values accepted from user input.
        random_min_length (int): Shortest generated random array.
        random_max_length (int): Longest generated random array.
        random_min_value (int): Smallest generated value.
        random_max_value (int): Largest generated value.
        random_seed (Optional[int]): Seed for random arrays, None for entropy.
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        log_file (Optional[str]): Path to log file (if specified).
        logger (Optional[logging.Logger]): Configured logger instance.
    """

    VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    MAX_SPEED_MS = 5000

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Initializes the configuration from a file.

        Args:
            config_file: Path to the configuration INI file.

        Raises:
            ConfigFileError: If the config file does not exist or cannot be read.
            ConfigValidationError: If required settings are missing or invalid.
        """
        self.config_file = config_file
        self.config = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
        self.logger: Optional[logging.Logger] = None

        try:
            self._load_config_file()
            self._parse_configuration()
            self._validate_config()
            self._initiate_logger()
        except ConfigError:
            raise
        except Exception as e:
            raise ConfigError(f"Unexpected error during configuration initialization: {e}") from e

    def _load_config_file(self) -> None:
        """Loads and parses the configuration file.

        Raises:
            ConfigFileError: If file doesn't exist, can't be read, or has parsing errors.
        """
        if not os.path.exists(self.config_file):
            raise ConfigFileError(f"Configuration file '{self.config_file}' not found")

        if not os.access(self.config_file, os.R_OK):
            raise ConfigFileError(f"Configuration file '{self.config_file}' is not readable")

        try:
            self.config.read(self.config_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigFileError(f"Failed to parse configuration file '{self.config_file}': {e}") from e

        required_sections = ['VISUALIZER', 'RANDOM', 'LOGGING']
        missing_sections = [section for section in required_sections if section not in self.config]
        if missing_sections:
            raise ConfigFileError(f"Missing required sections in config file: {missing_sections}")

    def _require_value(self, section: str, key: str) -> str:
        if section not in self.config or key not in self.config[section]:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' not found")

        value = self.config[section].get(key)
        if not value or not value.strip():
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value.strip()

    def _get_required_int(self, section: str, key: str) -> int:
        """Retrieves a required integer value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to int.
        """
        value = self._require_value(section, key)
        try:
            return int(value)
        except ValueError as e:
            raise ConfigValidationError(f"Invalid integer value for '{section}.{key}': '{value}'") from e

    def _get_optional_int(self, section: str, key: str) -> Optional[int]:
        value = self._get_optional_str(section, key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError as e:
            raise ConfigValidationError(f"Invalid integer value for '{section}.{key}': '{value}'") from e

    def _get_required_str(self, section: str, key: str) -> str:
        return self._require_value(section, key)

    def _get_optional_str(self, section: str, key: str) -> Optional[str]:
        """Retrieves an optional string value from config.

        Returns:
            String value or None if not present or empty.
        """
        if section not in self.config or key not in self.config[section]:
            return None

        value = self.config[section].get(key)
        if not value or not value.strip():
            return None

        return value.strip()

    def _parse_configuration(self) -> None:
        """Parses all configuration values with strict validation."""
        self.algorithm = self._get_required_str("VISUALIZER", "ALGORITHM").lower()
        self.speed_ms = self._get_required_int("VISUALIZER", "SPEED_MS")
        self.min_array_length = self._get_required_int("VISUALIZER", "MIN_ARRAY_LENGTH")
        self.max_array_length = self._get_required_int("VISUALIZER", "MAX_ARRAY_LENGTH")

        self.random_min_length = self._get_required_int("RANDOM", "MIN_LENGTH")
        self.random_max_length = self._get_required_int("RANDOM", "MAX_LENGTH")
        self.random_min_value = self._get_required_int("RANDOM", "MIN_VALUE")
        self.random_max_value = self._get_required_int("RANDOM", "MAX_VALUE")
        self.random_seed = self._get_optional_int("RANDOM", "SEED")

        self.log_level = self._get_required_str("LOGGING", "LEVEL")
        self.log_file = self._get_optional_str("LOGGING", "FILE")

    def _prepare_log_directory(self, log_path: str) -> None:
        """Make sure the directory holding the log file exists and is writable.

        Raises:
            ConfigError: If the directory cannot be created or written to.
        """
        directory = os.path.dirname(log_path)
        if not directory:
            return
        try:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Cannot create log directory '{directory}': {e}") from e
        if not os.access(directory, os.W_OK):
            raise ConfigError(f"Log directory '{directory}' is not writable")

    def _validate_config(self) -> None:
        """Validates all configuration settings strictly.

        Raises:
            ConfigValidationError: If any settings are invalid.
        """
        if self.algorithm not in ALGORITHMS:
            raise ConfigValidationError(
                f"Invalid search algorithm '{self.algorithm}'. "
                f"Valid options: {', '.join(sorted(ALGORITHMS))}"
            )

        if not (0 <= self.speed_ms <= self.MAX_SPEED_MS):
            raise ConfigValidationError(
                f"Speed must be between 0 and {self.MAX_SPEED_MS} ms, got: {self.speed_ms}"
            )

        if self.min_array_length < 1:
            raise ConfigValidationError(f"Minimum array length must be at least 1, got: {self.min_array_length}")
        if self.max_array_length < self.min_array_length:
            raise ConfigValidationError(
                f"Maximum array length ({self.max_array_length}) is below the minimum ({self.min_array_length})"
            )

        if self.random_min_length < 1:
            raise ConfigValidationError(f"Random array length must be at least 1, got: {self.random_min_length}")
        if self.random_max_length < self.random_min_length:
            raise ConfigValidationError(
                f"RANDOM.MAX_LENGTH ({self.random_max_length}) is below RANDOM.MIN_LENGTH ({self.random_min_length})"
            )
        if self.random_max_value < self.random_min_value:
            raise ConfigValidationError(
                f"RANDOM.MAX_VALUE ({self.random_max_value}) is below RANDOM.MIN_VALUE ({self.random_min_value})"
            )

        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}'. "
                f"Valid options: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                parent_dir = os.path.dirname(log_dir)
                if parent_dir and not os.path.exists(parent_dir):
                    raise ConfigValidationError(f"Log file parent directory does not exist: '{parent_dir}'")

    def _initiate_logger(self) -> None:
        """Attaches a stderr handler and, when LOGGING.FILE is set, a rotating
        file handler (10MB per file, 3 backups) to the StepSearch logger.

        Raises:
            ConfigError: If the log file cannot be opened.
        """
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        log_level = getattr(logging, self.log_level.upper())

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(log_level)

        # A logger is process-wide, drop handlers left by an earlier Config
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if self.log_file:
            self._prepare_log_directory(self.log_file)
            try:
                file_handler = RotatingFileHandler(
                    self.log_file,
                    maxBytes=10 * 1024 * 1024,
                    backupCount=3,
                    encoding="utf-8",
                )
            except OSError as e:
                raise ConfigError(f"Failed to open log file '{self.log_file}': {e}") from e
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def __str__(self) -> str:
        return (
            f"Config(algorithm='{self.algorithm}', speed_ms={self.speed_ms}, "
            f"array_length={self.min_array_length}..{self.max_array_length}, "
            f"random_seed={self.random_seed}, log_level='{self.log_level}')"
        )

    def reload(self) -> bool:
        """Re-reads the configuration file.

        The new settings are parsed and validated on a separate instance and
        only then copied over this one, so a rejected file leaves every
        attribute untouched.

        Returns:
            bool: True if any setting changed.

        Raises:
            ConfigError: If the file can no longer be loaded or is invalid.
        """
        try:
            fresh = Config(self.config_file)
        except ConfigError as e:
            raise ConfigError(f"Failed to reload configuration: {e}") from e

        changed = str(fresh) != str(self)
        self.__dict__.update(fresh.__dict__)
        if changed:
            self.logger.info("Configuration reloaded: %s", self)
        return changed
