"""Pseudo-protocol translation."""

from __future__ import annotations

from graphgate.translator.core import ProtocolTranslator, repair_url
from graphgate.translator.external import ExternalServiceGuard
from graphgate.translator.handlers import FETCH_HANDLERS

__all__ = ["FETCH_HANDLERS", "ExternalServiceGuard", "ProtocolTranslator", "repair_url"]
