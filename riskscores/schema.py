import math
from typing import Any, Dict, List, Optional

RISK_SCORE_FIELDS = [
    "auditScore",
    "codeReviewScore",
    "complexityScore",
    "longevityImpact",
    "protocolSafetyScore",
    "teamKnowledgeScore",
    "testingScore",
]
ALLOCATION_FIELDS = [
    "status",
    "currentTVL",
    "availableTVL",
    "currentAmount",
    "availableAmount",
]


def to_score(v: Any) -> Optional[int]:
    """Whole-number value of an int, float or numeric string; None otherwise."""
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    try:
        f = float(str(v))
    except ValueError:
        return None
    if not math.isfinite(f) or not f.is_integer():
        return None
    return int(f)


def _is_number_like(v: Any) -> bool:
    if isinstance(v, bool):
        return False
    try:
        float(str(v))
        return True
    except ValueError:
        return False


def validate_strategy(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages for a yDaemon strategy
    payload. Empty list means the report row can be built.
    """
    errors: List[str] = []

    risk = data.get("risk")
    if not isinstance(risk, dict):
        return ["Missing required object: risk"]

    details = risk.get("riskDetails")
    if not isinstance(details, dict):
        errors.append("Missing required object: risk.riskDetails")
    else:
        for f in RISK_SCORE_FIELDS:
            if f not in details:
                errors.append(f"Missing risk score: {f}")
            elif to_score(details[f]) is None:
                errors.append(f"Risk score '{f}' must be an integer, got {details[f]!r}")
            elif to_score(details[f]) < 0:
                errors.append(f"Risk score '{f}' must be non-negative, got {details[f]!r}")

    allocation = risk.get("allocation")
    if not isinstance(allocation, dict):
        errors.append("Missing required object: risk.allocation")
    else:
        for f in ALLOCATION_FIELDS:
            if f not in allocation:
                errors.append(f"Missing allocation field: {f}")
            elif f != "status" and not _is_number_like(allocation[f]):
                errors.append(f"Allocation field '{f}' must be numeric, got {allocation[f]!r}")

    return errors
