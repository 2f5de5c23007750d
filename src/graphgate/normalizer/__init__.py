"""Backend response normalization."""

from __future__ import annotations

from graphgate.normalizer.core import NORMALIZERS, ResponseNormalizer
from graphgate.normalizer.sparql import parse_binding_value

__all__ = ["NORMALIZERS", "ResponseNormalizer", "parse_binding_value"]
