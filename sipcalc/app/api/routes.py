"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from sipcalc import __version__
from sipcalc.core.charts import distribution, growth_series
from sipcalc.core.export import CSV_FILENAME, breakdown_to_csv, breakdown_to_tsv
from sipcalc.core.formatting import format_currency
from sipcalc.core.history import HistoryStore
from sipcalc.core.params import PRESETS, apply_preset, config_to_query, request_from_query
from sipcalc.core.projection import compute
from sipcalc.schemas.sip import InvestmentRequest, ProjectionResult
from sipcalc.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

HISTORY_EXTENSION = "sip_history"

api_bp = Blueprint("api", __name__)


def _history() -> HistoryStore:
    return current_app.extensions[HISTORY_EXTENSION]


class PayloadError(ValueError):
    """Request body that is not a JSON object."""


def _bad_request(detail: str):
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(PayloadError)
def _handle_payload_error(exc: PayloadError):
    return _bad_request(str(exc))


def _read_request() -> InvestmentRequest:
    payload = request.get_json(force=True, silent=False)
    if not isinstance(payload, dict):
        raise PayloadError("request body must be a JSON object")
    return InvestmentRequest.model_validate(payload)


def _run(inputs: InvestmentRequest) -> ProjectionResult:
    result = compute(inputs.to_config())
    logger.info(
        "Projected %s years: invested=%s value=%s",
        inputs.timePeriod,
        result.totalInvested,
        result.totalValue,
    )
    return result


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(version=__version__, historySize=len(_history()))
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip")
def calculate() -> Any:
    """Run a projection and remember it in the history."""
    inputs = _read_request()

    result = _run(inputs)
    _history().record(result)
    return jsonify(result.model_dump())


@api_bp.get("/calc/sip")
def calculate_from_query() -> Any:
    """Run a projection from query parameters (share links); not added to history."""
    inputs = request_from_query(request.args)

    preset = request.args.get("preset")
    if preset:
        if preset not in PRESETS:
            return _bad_request(f"unknown preset: {preset}")
        inputs = InvestmentRequest.model_validate(apply_preset(inputs, preset).model_dump())

    result = _run(inputs)
    return jsonify(
        {
            "inputs": inputs.model_dump(),
            "result": result.model_dump(),
            "query": config_to_query(inputs.to_config()),
            "charts": {
                "growth": growth_series(result),
                "distribution": distribution(result),
            },
        }
    )


@api_bp.post("/calc/sip/export")
def export_breakdown() -> Any:
    """Download the yearly breakdown as CSV, or as a tab-separated table."""
    inputs = _read_request()

    result = _run(inputs)
    if request.args.get("format") == "tsv":
        return Response(breakdown_to_tsv(result.breakdown), mimetype="text/tab-separated-values")

    return Response(
        breakdown_to_csv(result.breakdown),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={CSV_FILENAME}"},
    )


@api_bp.get("/calc/presets")
def presets() -> Any:
    return jsonify(PRESETS)


@api_bp.get("/history")
def history() -> Any:
    return jsonify([entry.model_dump() for entry in _history().entries()])


@api_bp.delete("/history")
def clear_history() -> Any:
    _history().clear()
    logger.info("History cleared")
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/format")
def format_amount() -> Any:
    """Format an amount for display, e.g. /api/format?amount=1234&currency=INR."""
    currency = request.args.get("currency", "USD").upper()
    try:
        amount = float(request.args.get("amount", ""))
        if not math.isfinite(amount):
            raise ValueError(f"amount must be finite, got {amount}")
        text = format_currency(amount, currency)
    except ValueError as exc:
        return _bad_request(str(exc))
    return jsonify({"amount": amount, "currency": currency, "formatted": text})
