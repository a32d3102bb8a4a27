import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class LogManager:
    """Configures walker logging: console always, daily log files on request"""

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up console and file handlers on the root logger"""
        level = getattr(logging, log_level.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        # Console goes to stderr so printed triples stay clean on stdout
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        if self.log_dir is None:
            return

        all_logs_file = self.log_dir / f"ontowalk_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        error_file = self.log_dir / f"errors_{datetime.now().strftime('%Y%m%d')}.log"
        error_handler = logging.FileHandler(error_file)
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

    def export_metrics_json(self, metrics_data: Dict[str, Any], filename: str = None) -> Path:
        """Export metrics to a JSON file in the log directory (or cwd)"""
        if filename is None:
            filename = f"metrics_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

        export_path = (self.log_dir or Path('.')) / filename
        with open(export_path, 'w') as f:
            json.dump(metrics_data, f, indent=2, default=str)

        logger.info(f"Metrics exported to {export_path}")
        return export_path
