"""
Utility functions for the Courtside Scoreboard application.

This module contains common utility functions used throughout the application.
"""


def fmt_mmss(seconds: int) -> str:
    """
    Format seconds as MM:SS string.
    
    Args:
        seconds: Number of seconds to format
        
    Returns:
        Formatted time string in MM:SS format
        
    Example:
        >>> fmt_mmss(90)
        '01:30'
        >>> fmt_mmss(3661)
        '61:01'
    """
    seconds = max(0, int(seconds))
    m = seconds // 60
    s = seconds % 60
    return f"{m:02d}:{s:02d}"
