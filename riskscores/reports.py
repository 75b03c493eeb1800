"""
Pipe-separated risk reports built from the yDaemon and subgraph APIs.

Rows are returned as lists of strings; callers join them with ``|``.
"""

from typing import Any, Dict, Iterator, List

from .codec import DEFAULT_BITS_PER_SCORE, encode
from .clients import subgraph, ydaemon
from .logger import get_logger
from .schema import RISK_SCORE_FIELDS, to_score, validate_strategy

logger = get_logger()

RISK_SCORES_HEADER = [
    "#", "Network Id", "Vault Name", "Vault Address", "Strategy Address",
    "Strategy Name", "Display Name", "Audit", "Code Review", "Complexity",
    "Longevity", "Protocol Safety", "Team Knowledge", "Testing",
    "Decimal Risk Score", "Status", "Current TVL", "Available TVL",
    "Current Amount", "Available Amount",
]

SUBGRAPH_HEADER = [
    "#", "Network Id", "Target URL", "Decimal Score", "Scores",
    "Average Score", "Tags",
]


def format_row(cells: List[Any]) -> str:
    return "|".join(str(c) for c in cells)


def _fixed(value: Any, decimals: int) -> str:
    return f"{float(value):.{decimals}f}"


def strategy_scores(strategy: Dict[str, Any]) -> List[int]:
    """Return the seven risk sub-scores in report column order."""
    details = strategy["risk"]["riskDetails"]
    return [to_score(details[f]) for f in RISK_SCORE_FIELDS]


def build_strategy_row(
    counter: int,
    network: int,
    vault: Dict[str, Any],
    strategy: Dict[str, Any],
    bits_per_score: int = DEFAULT_BITS_PER_SCORE,
) -> List[str]:
    """Build one risk-scores row for a strategy of a vault."""
    scores = strategy_scores(strategy)
    allocation = strategy["risk"]["allocation"]
    return [
        str(counter),
        str(network),
        str(vault.get("name")),
        str(vault.get("address")),
        str(strategy.get("address")),
        str(strategy.get("name")),
        str(strategy.get("displayName")),
        *[str(s) for s in scores],
        str(encode(scores, bits_per_score)),
        str(allocation["status"]),
        _fixed(allocation["currentTVL"], 2),
        _fixed(allocation["availableTVL"], 2),
        _fixed(allocation["currentAmount"], 2),
        _fixed(allocation["availableAmount"], 2),
    ]


def build_target_row(counter: int, target: Dict[str, Any]) -> List[str]:
    """Build one subgraph row; the average score is stored in thousandths."""
    score = target.get("score") or {}
    tags = [t["value"] for t in target.get("tags") or [] if not t.get("removed")]
    return [
        str(counter),
        str(target.get("networkId")),
        str(target.get("targetUrl")),
        str(score.get("score")),
        ",".join(str(s) for s in score.get("scores") or []),
        _fixed(float(score.get("averageScore") or 0) / 1000, 3),
        ",".join(tags),
    ]


def risk_scores_report(network: int, bits_per_score: int = DEFAULT_BITS_PER_SCORE) -> Iterator[str]:
    """Yield the header and one line per vault strategy on a network."""
    yield format_row(RISK_SCORES_HEADER)
    vaults = ydaemon.get_vaults(network)
    logger.info("Fetched vaults", network=network, count=len(vaults))
    counter = 1
    for vault in vaults:
        for summary in vault.get("strategies") or []:
            strategy = ydaemon.get_strategy(network, summary["address"])
            errors = validate_strategy(strategy)
            if errors:
                logger.warning("Skipping strategy with invalid risk data", address=summary["address"], errors=errors)
                continue
            yield format_row(build_strategy_row(counter, network, vault, strategy, bits_per_score))
            counter += 1


def subgraph_report(network: int = 0) -> Iterator[str]:
    """Yield the header and one line per subgraph target."""
    yield format_row(SUBGRAPH_HEADER)
    targets = subgraph.get_targets(network)
    logger.info("Fetched subgraph targets", network=network, count=len(targets))
    for counter, target in enumerate(targets, 1):
        yield format_row(build_target_row(counter, target))
