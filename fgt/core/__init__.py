from .base import ClusteringBase, ClusteringParams
from .farthest_numpy import FarthestPointNumpy
from .gonzalez import GonzalezClustering
from .model import ClusterModel
from .transform import direct_gauss_transform, ifgt_transform
from .truncation import (
    TRUNCATION_NUMBER_UPPER_LIMIT,
    TruncationResult,
    choose_truncation_number,
)

__all__ = [
    "ClusteringBase",
    "ClusteringParams",
    "ClusterModel",
    "FarthestPointNumpy",
    "GonzalezClustering",
    "TRUNCATION_NUMBER_UPPER_LIMIT",
    "TruncationResult",
    "choose_truncation_number",
    "direct_gauss_transform",
    "ifgt_transform",
]
