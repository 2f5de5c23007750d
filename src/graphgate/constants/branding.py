"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "GRAPHGATE"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ GRAPHGATE",
        "     // trust boundary for chart data requests",
        "",
        f"{BRAND_NAME} protocol mediator",
    )
)
