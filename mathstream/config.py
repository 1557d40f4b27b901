from dataclasses import dataclass


@dataclass
class MathStreamConfig:
    # Live display
    refresh_per_second: int = 10
    code_theme: str = "monokai"
    show_progress: bool = True

    # Demo stream pacing
    chunk_min: int = 1
    chunk_max: int = 3
    interval_min: float = 0.05
    interval_max: float = 0.15

    log_level: str = "WARNING"
