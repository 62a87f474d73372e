import logging

from teams_mcp.settings import TeamsMcpSettings

logger = logging.getLogger(__name__)

type ScopeSet = tuple[str, ...]

FULL_ACCESS_SCOPES: ScopeSet = (
    "User.Read",
    "User.ReadBasic.All",
    "Team.ReadBasic.All",
    "Channel.ReadBasic.All",
    "ChannelMessage.Read.All",
    "ChannelMessage.Send",
    "TeamMember.Read.All",
    "Chat.ReadBasic",
    "Chat.ReadWrite",
)

# Same as full access minus ChannelMessage.Send, with Chat.Read in place of Chat.ReadWrite
READ_ONLY_SCOPES: ScopeSet = (
    "User.Read",
    "User.ReadBasic.All",
    "Team.ReadBasic.All",
    "Channel.ReadBasic.All",
    "ChannelMessage.Read.All",
    "TeamMember.Read.All",
    "Chat.ReadBasic",
    "Chat.Read",
)


def is_read_only_mode() -> bool:
    return TeamsMcpSettings().read_only


def get_delegated_scopes(read_only: bool) -> ScopeSet:  # noqa: FBT001
    return READ_ONLY_SCOPES if read_only else FULL_ACCESS_SCOPES


def resolve_delegated_scopes() -> ScopeSet:
    read_only = is_read_only_mode()
    logger.debug("Requesting %s delegated scopes", "read-only" if read_only else "full access")
    return get_delegated_scopes(read_only)
