from dataclasses import dataclass
from typing import Optional

from ..error_handler import RetryConfig
from ..fetching.web_fetcher import DEFAULT_USER_AGENT


@dataclass
class WalkConfig:
    """Configuration for an ontology walk

    Every bound defaults to None, meaning unbounded. ``max_nodes`` counts
    identifiers taken off the fringe for fetching; the start node has
    depth 0; ``deadline`` is wall-clock seconds for the whole walk.
    """
    max_nodes: Optional[int] = None
    max_depth: Optional[int] = None
    deadline: Optional[float] = None
    concurrency: int = 1
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    report_interval: Optional[float] = None
    retry: RetryConfig = None

    def __post_init__(self):
        if self.retry is None:
            self.retry = RetryConfig()
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError("max_nodes must be at least 1")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must not be negative")
        if self.deadline is not None and self.deadline <= 0:
            raise ValueError("deadline must be positive")
        if self.concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.report_interval is not None and self.report_interval <= 0:
            raise ValueError("report_interval must be positive")
