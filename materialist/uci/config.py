"""
Engine configuration for the UCI front end.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from materialist import __author__, __version__


def default_log_file() -> Path:
    return Path.home() / ".materialist" / "engine.log"


@dataclass
class EngineConfig:
    """Configuration for the UCI engine.

    Identification strings, the fixed search depth and logging settings
    live here so the command loop itself holds no constants.
    """

    # Identification
    name: str = "Materialist"
    """Engine name sent in 'id name'"""

    version: str = __version__
    """Engine version appended to the name"""

    author: str = __author__
    """Author sent in 'id author'"""

    # Search
    search_depth: int = 4
    """Fixed search depth in plies, used when 'go' gives no depth"""

    # Logging
    debug: bool = False
    """Log at DEBUG level (every command and response)"""

    log_file: Optional[Path] = field(default_factory=default_log_file)
    """Log file path (None disables file logging)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        if self.search_depth < 1:
            raise ValueError(f"search_depth must be at least 1, got {self.search_depth}")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Engine: {self.name} {self.version} by {self.author}\n"
            f"  Search depth: {self.search_depth}\n"
            f"  Log: {self.log_file or 'disabled'} (debug={self.debug})\n"
            f")"
        )
