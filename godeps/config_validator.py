"""Configuration validation for godeps."""

from typing import Any, Dict, List

from godeps.batcher import MIN_MAX_CHARS
from godeps.utils.log_setup import VALID_LEVELS


class ConfigValidator:
    """Validates godeps configuration."""

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if "query" not in config:
            errors.append("Missing 'query' section in configuration")
            return errors

        if not isinstance(config["query"], dict):
            errors.append("'query' section must be a mapping")
            return errors

        errors.extend(self.validate_query(config["query"]))

        if "logging" in config:
            errors.extend(self.validate_logging(config["logging"]))

        return errors

    def validate_query(self, query_config: Dict[str, Any]) -> List[str]:
        """Validate the query section.

        Args:
            query_config: Query configuration dictionary

        Returns:
            List of validation error messages
        """
        errors = []

        binary = query_config.get("go_binary")
        if not isinstance(binary, str) or not binary.strip():
            errors.append("'go_binary' must be a non-empty string")

        max_chars = query_config.get("max_batch_chars")
        if not isinstance(max_chars, int) or isinstance(max_chars, bool):
            errors.append("'max_batch_chars' must be an integer")
        elif max_chars < MIN_MAX_CHARS:
            errors.append(f"'max_batch_chars' must be at least {MIN_MAX_CHARS}, got {max_chars}")

        timeout = query_config.get("timeout")
        if timeout is not None:
            if not isinstance(timeout, (int, float)) or isinstance(timeout, bool):
                errors.append("'timeout' must be a number or null")
            elif timeout <= 0:
                errors.append(f"'timeout' must be positive, got {timeout}")

        return errors

    def validate_logging(self, logging_config: Any) -> List[str]:
        errors = []
        if not isinstance(logging_config, dict):
            return ["'logging' section must be a mapping"]

        level = logging_config.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in VALID_LEVELS:
            errors.append(
                f"'level' must be one of {', '.join(VALID_LEVELS)}, got {level!r}"
            )
        return errors
