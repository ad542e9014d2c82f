"""Root of the settings command tree."""

from horatio.botsettings.bot_node import BOT_NODE
from horatio.botsettings.router import CommandNode
from horatio.botsettings.server_node import SERVER_NODE
from horatio.botsettings.user_node import USER_NODE

SETTINGS_ROOT = CommandNode(
    "settings",
    "settings",
    children=[BOT_NODE, USER_NODE, SERVER_NODE]
)
