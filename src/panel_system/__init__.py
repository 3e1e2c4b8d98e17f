"""
Panel system configuration and application shell
"""

from .config import PanelConfig, FadeConfig
from .shell import PanelShell, EXIT_OK, EXIT_STARTUP_FAILED

__all__ = [
    'PanelConfig',
    'FadeConfig',
    'PanelShell',
    'EXIT_OK',
    'EXIT_STARTUP_FAILED'
]
