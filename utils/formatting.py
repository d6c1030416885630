"""utils/formatting.py"""
import numpy as np

from config.config import SESSION_CONFIG


def format_number(value, spec=None):
    """按 %g 输出：512, 0.5, 1e+06, inf, nan"""
    spec = spec or SESSION_CONFIG["number_format"]
    return format(float(np.float64(value)), spec)
