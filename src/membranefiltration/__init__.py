"""Interactive membrane filtration explorer (J = Pe(ΔP−Δπ), q = J·A)."""
__version__ = "0.1.0"
