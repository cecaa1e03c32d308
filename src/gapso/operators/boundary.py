import numpy as np


def clamp(values, lo: float, hi: float):
    """Pin values into [lo, hi]. Scalars stay scalars."""
    if np.isscalar(values):
        return float(min(hi, max(lo, values)))
    return np.clip(values, lo, hi)
