"""
Structured operation logging for model loading and field value access.
"""

import logging
from typing import Any, Dict

from wordvec.core.config import get_log_level


class StructuredLogger:
    """Structured logger for word2vec model loading and doc values operations."""

    def __init__(self, name: str = "wordvec"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(get_log_level())

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status == "failed":
            self.logger.error(message)
        else:
            self.logger.info(message)

    def log_model_operation(self, operation: str, source: str, details: Dict[str, Any] = None, status: str = "success"):
        """Log a model loading operation."""
        log_details = {"source": source}
        if details:
            log_details.update(details)

        self.log_operation(f"model.{operation}", status, log_details)

    def log_model_failure(self, source: str, error: BaseException, details: Dict[str, Any] = None):
        """Log a failed model load with the error type and a truncated message."""
        message = str(error)
        log_details = {
            "error_type": type(error).__name__,
            "error": message[:200] + "..." if len(message) > 200 else message
        }
        if details:
            log_details.update(details)

        self.log_model_operation("load", source, log_details, status="failed")

    def log_doc_values_operation(self, operation: str, field: str, details: Dict[str, Any] = None, status: str = "success"):
        """Log a doc values operation."""
        log_details = {"field": field}
        if details:
            log_details.update(details)

        self.log_operation(f"doc_values.{operation}", status, log_details)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
