"""Activity logging service for the configuration audit trail."""
import logging
from typing import Any, Dict, Optional
from datetime import datetime

logger = logging.getLogger(__name__)


class ActivityLogger:
    """Records configuration changes made through the plugin pages."""

    def log(self, action: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an activity.

        Args:
            action: Action identifier (e.g., "dot_path_saved")
            metadata: Optional additional data to log
        """
        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "action": action,
            "metadata": metadata or {},
        }
        logger.info(f"Activity: {action}", extra=log_entry)
