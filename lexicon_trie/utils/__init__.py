from .logger_utils import Log, log
from .config_manager import Config
from .metrics_tracker import Metrics

__all__ = ["Log", "log", "Config", "Metrics"]
