"""Tolerances for the approximate (iterative) algorithms."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class IntersectionConfig:
    # both fast boxes narrower and shorter than this end the subdivision
    bezier_leaf_tolerance: float = 0.005
    # leaf estimates closer than this on both axes are merged
    bezier_cluster_tolerance: float = 0.05
    max_depth: int = 32
    split_length_tolerance: float = 0.01
    split_length_shrink: float = 0.75

    def validate(self) -> None:
        if self.bezier_leaf_tolerance <= 0:
            raise ValueError("bezier_leaf_tolerance must be positive")
        if self.bezier_cluster_tolerance <= 0:
            raise ValueError("bezier_cluster_tolerance must be positive")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if self.split_length_tolerance <= 0:
            raise ValueError("split_length_tolerance must be positive")
        if not 0 < self.split_length_shrink < 1:
            raise ValueError("split_length_shrink must lie in (0, 1)")


_INTERSECTION_CONFIG = IntersectionConfig()


def get_intersection_config() -> IntersectionConfig:
    return copy.deepcopy(_INTERSECTION_CONFIG)


def set_intersection_config(config: IntersectionConfig) -> None:
    global _INTERSECTION_CONFIG
    config.validate()
    _INTERSECTION_CONFIG = copy.deepcopy(config)


__all__ = ["IntersectionConfig", "get_intersection_config", "set_intersection_config"]
