from .monomials import (
    compute_constant_series,
    compute_monomials,
    compute_multi_indices,
    get_p_max_total,
    max_order_within,
)

__all__ = [
    "compute_constant_series",
    "compute_monomials",
    "compute_multi_indices",
    "get_p_max_total",
    "max_order_within",
]
