"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, acctctl.toml only contains
overrides. No file at all gives the legacy behaviour (1000.00 opening
balance, 999999.99 display limit).
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from acctctl.domain.money import DISPLAY_LIMIT, OPENING_BALANCE


class AccountConfig(BaseModel):
    """[account] section."""

    model_config = {"frozen": True}

    opening_balance: Decimal = Field(default=OPENING_BALANCE, ge=0, decimal_places=2)
    display_limit: Decimal = Field(default=DISPLAY_LIMIT, ge=0, decimal_places=2)


class MenuConfig(BaseModel):
    """[menu] section."""

    model_config = {"frozen": True}

    title: str = "Account Management System"
    rule_width: int = Field(default=32, ge=0)
