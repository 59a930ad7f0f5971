from .logger import get_logger
from .rounding import round_half_away, round_half_away_array

__all__ = ["get_logger", "round_half_away", "round_half_away_array"]
