"""
Configuration for the bag grading service.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv


# Load environment variables from .env file
load_dotenv()


DEFAULT_MAX_SWAPS = 7


@dataclass
class Config:
    """Service configuration."""
    max_swaps: int = DEFAULT_MAX_SWAPS
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        """Override defaults from the environment."""
        self.max_swaps = int(os.getenv("BAG_GRADER_MAX_SWAPS", self.max_swaps))
        self.log_level = os.getenv("BAG_GRADER_LOG_LEVEL", self.log_level).upper()

        origins = os.getenv("BAG_GRADER_CORS_ORIGINS")
        if origins:
            self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]


def get_config() -> Config:
    """Get service configuration."""
    return Config()
