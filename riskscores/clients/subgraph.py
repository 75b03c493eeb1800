from typing import Any, Dict, List

from ..env import subgraph_url
from .common import fetch_json

TARGET_FIELDS = """
        id
        address
        targetUrl
        networkId
        score {
          score
          scores
          averageScore
        }
        tags {
          value
          timestamp
          removed
        }
"""


def build_targets_query(network: int = 0) -> str:
    """Build the GraphQL query for risk targets; network 0 means all networks."""
    where = "targets {"
    if network > 0:
        where = f"targets(where: {{networkId:{network}}}) {{"
    return f"""
    {{
      {where}{TARGET_FIELDS}      }}
    }}
    """


def get_targets(network: int = 0) -> List[Dict[str, Any]]:
    """Fetch risk targets with their scores and tags from the subgraph.

    Raises ValueError on request failures and on GraphQL errors in the body.
    """
    body = fetch_json("POST", subgraph_url(), "subgraph", json={"query": build_targets_query(network)})
    if not isinstance(body, dict):
        raise ValueError(f"Subgraph returned an unexpected body: {type(body).__name__}")
    if body.get("errors"):
        messages = "; ".join(e.get("message", str(e)) for e in body["errors"])
        raise ValueError(f"Subgraph query failed: {messages}")
    data = body.get("data") or {}
    return data.get("targets") or []
