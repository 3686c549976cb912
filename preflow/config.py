import os
import logging
from typing import Dict, Optional

from dotenv import load_dotenv

from .graph.base import GRAPH_TYPES

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULTS = {
    'PREFLOW_GRAPH_TYPE': 'push_relabel',
    'PREFLOW_LOG_LEVEL': 'INFO',
    'PREFLOW_OUTPUT_DIR': 'output',
}


def load_settings(env_file: Optional[str] = None) -> Dict[str, str]:
    """
    Load settings from environment variables, reading a .env file first.

    Variables already set in the environment win over the .env file.

    Returns:
        Dict with 'graph_type', 'log_level' and 'output_dir'
    """
    load_dotenv(env_file)

    graph_type = os.getenv('PREFLOW_GRAPH_TYPE', DEFAULTS['PREFLOW_GRAPH_TYPE']).strip().lower()
    if graph_type not in GRAPH_TYPES:
        raise ValueError(
            f"Invalid PREFLOW_GRAPH_TYPE '{graph_type}', expected one of: {', '.join(GRAPH_TYPES)}"
        )

    log_level = os.getenv('PREFLOW_LOG_LEVEL', DEFAULTS['PREFLOW_LOG_LEVEL']).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid PREFLOW_LOG_LEVEL '{log_level}', expected one of: {', '.join(LOG_LEVELS)}"
        )

    return {
        'graph_type': graph_type,
        'log_level': log_level,
        'output_dir': os.getenv('PREFLOW_OUTPUT_DIR', DEFAULTS['PREFLOW_OUTPUT_DIR']),
    }


def configure_logging(level: str = 'INFO') -> None:
    """Configure root logging the way the command line tools expect."""
    logging.basicConfig(
        level=getattr(logging, level),
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
