from .num_utils import truncate_channels, round_channels

__all__ = ["truncate_channels", "round_channels"]
