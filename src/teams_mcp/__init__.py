"""Teams MCP - delegated Microsoft Graph permission scopes."""

from teams_mcp.permissions import (
    FULL_ACCESS_SCOPES,
    READ_ONLY_SCOPES,
    ScopeSet,
    get_delegated_scopes,
    is_read_only_mode,
    resolve_delegated_scopes,
)
from teams_mcp.settings import TeamsMcpSettings, parse_read_only_flag

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    "__version__",
    # Permissions
    "FULL_ACCESS_SCOPES",
    "READ_ONLY_SCOPES",
    "ScopeSet",
    "get_delegated_scopes",
    "is_read_only_mode",
    "resolve_delegated_scopes",
    # Settings
    "TeamsMcpSettings",
    "parse_read_only_flag",
]
