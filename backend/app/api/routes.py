"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from backend.core.ping import get_ping_message
from backend.core.presentation import (
    chart_heights,
    format_currency,
    format_multiple,
    return_multiple,
    summary_stats,
)
from backend.core.projection import InvalidInput, ProjectionInput, project_input
from backend.domain.benchmarks import BenchmarkCatalog, UnknownBenchmark
from backend.domain.frequency import DEFAULT_BOUNDS, pay_frequency_options
from backend.schemas.ping import PingResponse
from backend.schemas.projection import (
    DisplayValues,
    ProjectionRequest,
    ProjectionResponse,
)

api_bp = Blueprint("api", __name__)

logger = logging.getLogger(__name__)


def _catalog() -> BenchmarkCatalog:
    return current_app.extensions["benchmarks"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected projection payload: %s", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    logger.warning("invalid projection input: %s", exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(UnknownBenchmark)
def _handle_unknown_benchmark(exc: UnknownBenchmark):
    return jsonify({"detail": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


@api_bp.get("/frequencies")
def frequencies() -> Any:
    return jsonify([option.model_dump() for option in pay_frequency_options()])


@api_bp.get("/benchmarks")
def benchmarks() -> Any:
    return jsonify([benchmark.model_dump() for benchmark in _catalog()])


@api_bp.get("/bounds")
def bounds() -> Any:
    return jsonify(DEFAULT_BOUNDS.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project the recurring contribution and attach everything the results panel shows."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ProjectionRequest.model_validate(raw_payload)

    benchmark = None
    if payload.benchmark is not None:
        benchmark = _catalog().get(payload.benchmark)
        annual_return = benchmark.avgReturn
    else:
        annual_return = payload.annualReturnPercent

    inputs = ProjectionInput(
        contribution=payload.contribution,
        frequency=payload.frequency,
        years=payload.years,
        annualReturnPercent=annual_return,
    )
    result = project_input(inputs)
    logger.info(
        "projection contribution=%s frequency=%s years=%s rate=%s total=%.2f",
        inputs.contribution,
        inputs.frequency,
        inputs.years,
        inputs.annualReturnPercent,
        result.total,
    )

    multiple = return_multiple(result)
    stats = summary_stats(inputs.contribution, inputs.frequency, inputs.annualReturnPercent)
    response = ProjectionResponse(
        total=result.total,
        totalContributed=result.totalContributed,
        totalEarnings=result.totalEarnings,
        yearlySnapshots=list(result.yearlySnapshots),
        annualReturnPercent=annual_return,
        benchmark=benchmark,
        returnMultiple=multiple,
        chartHeights=chart_heights(result.yearlySnapshots),
        stats=stats,
        display=DisplayValues(
            total=format_currency(result.total),
            totalContributed=format_currency(result.totalContributed),
            totalEarnings=format_currency(result.totalEarnings),
            returnMultiple=format_multiple(multiple),
            annualContribution=format_currency(stats.annualContribution),
            monthlyEquivalent=format_currency(stats.monthlyEquivalent),
            yearlySnapshots=[format_currency(value) for value in result.yearlySnapshots],
        ),
    )
    # model_dump_json writes inf/nan as null; jsonify would emit bare NaN tokens
    return current_app.response_class(response.model_dump_json(), mimetype="application/json")
