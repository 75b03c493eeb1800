from typing import Any, Dict, List

from ..env import ydaemon_url
from .common import fetch_json


def get_vaults(network: int) -> List[Dict[str, Any]]:
    """List all vaults on a network, including their strategies."""
    url = f"{ydaemon_url()}/{network}/vaults/all"
    params = {"classification": "all", "strategiesDetails": "withDetails"}
    vaults = fetch_json("GET", url, "ydaemon", params=params)
    if vaults is None:
        return []
    if not isinstance(vaults, list):
        raise ValueError(f"Ydaemon returned an unexpected vault list: {type(vaults).__name__}")
    return vaults


def get_strategy(network: int, strategy_address: str) -> Dict[str, Any]:
    """Fetch one strategy with its risk details and allocation."""
    strategy = fetch_json("GET", f"{ydaemon_url()}/{network}/strategies/{strategy_address}", "ydaemon")
    if not isinstance(strategy, dict):
        raise ValueError(f"Ydaemon returned an unexpected strategy: {type(strategy).__name__}")
    return strategy
