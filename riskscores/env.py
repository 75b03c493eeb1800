import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/yearn/yearn-risk-framework"
DEFAULT_YDAEMON_URL = "https://ydaemon.yearn.fi"
DEFAULT_TIMEOUT = 15.0


def load_env(env_path: Optional[Path] = None) -> None:
    """Load .env from the working directory if present.

    Values already set in the environment win over the file.
    """
    env_path = env_path or Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def subgraph_url() -> str:
    return os.getenv("RISKSCORES_SUBGRAPH_URL", DEFAULT_SUBGRAPH_URL)


def ydaemon_url() -> str:
    return os.getenv("RISKSCORES_YDAEMON_URL", DEFAULT_YDAEMON_URL).rstrip("/")


def request_timeout() -> float:
    raw = os.getenv("RISKSCORES_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"RISKSCORES_TIMEOUT must be a number of seconds, got {raw!r}")
