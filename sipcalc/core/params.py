"""Building projection inputs from query strings and presets."""

from __future__ import annotations

from typing import Any, Dict, Mapping
from urllib.parse import urlencode

from sipcalc.schemas.sip import InvestmentConfig, InvestmentRequest

DEFAULT_INPUTS: Dict[str, float] = {
    name: field.default for name, field in InvestmentConfig.model_fields.items()
}

# expected annual return (%) per risk profile
PRESETS: Dict[str, float] = {
    "conservative": 8,
    "moderate": 12,
    "aggressive": 15,
}


def config_from_query(args: Mapping[str, Any]) -> InvestmentConfig:
    """Defaults overridden by any non-empty, known query parameter.

    Unknown keys are ignored. Non-numeric values raise ``ValidationError``.
    """
    values: Dict[str, Any] = dict(DEFAULT_INPUTS)
    for name in DEFAULT_INPUTS:
        raw = args.get(name)
        if raw is None or str(raw).strip() == "":
            continue
        values[name] = str(raw).strip()
    return InvestmentConfig.model_validate(values)


def request_from_query(args: Mapping[str, Any]) -> InvestmentRequest:
    """Like :func:`config_from_query`, with values clamped into the input ranges."""
    return InvestmentRequest.clamp(config_from_query(args).model_dump())


def config_to_query(config: InvestmentConfig) -> str:
    """Query string that :func:`config_from_query` turns back into ``config``."""
    return urlencode({name: _plain(value) for name, value in config.model_dump().items()})


def apply_preset(config: InvestmentConfig, name: str) -> InvestmentConfig:
    """Copy of ``config`` with the preset's expected return."""
    return config.model_copy(update={"expectedReturn": PRESETS[name]})


def _plain(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
