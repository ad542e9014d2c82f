# pylint: skip-file
"""
This is the settings file.

Edit the values below before running the bot.

========================================================================
Log levels:

5  | Trace    | All debug messages, including every step in every
              | function, used to test program logic and to pinpoint
              | the exact locations where things go wrong.

10 | Debug    | Important debug messages showing results of certain
              | computations without necessarily showing intermediate
              | steps.

20 | Info     | All information that might be necessary for the user
              | to monitor what the bot is doing.

30 | Warning  | Errors or things that go wrong that are not the result
              | of incorrect configuration or code; these do not affect
              | the bot's functionality.

40 | Error    | Errors that occur due to incorrect configuration or user
              | input that may impact the execution of a specific
              | command; these do not affect the bot's functionality.

50 | Critical | Unexpected errors that either impact an entire cog or
              | feature or the functionality of the entire bot.

60 | Nothing  | No messages at all.


For example, setting the log level to 40 would mean receiving both error
and critical logs. The master log is a Discord channel dedicated for bot
logs (without accessing the console).
"""

# Command prefix (Guilds may override this with "bot prefix")
command_prefix = "&"

# Bot Description (Shown in help)
bot_description = "Horatio: Server and user settings bot written using Pycord"

# Discord bot token
bot_token = ""

# Bot owner user IDs (Set of ints)
bot_owners = set()

# Master log channel ID (Leave as 0 for no logs)
master_log_channel = 0

# Log level
master_log_level = 30
console_log_level = 20

# Embed colours
embed_color_normal = 0xa0e0f0
embed_color_success = 0x2ded43
embed_color_error = 0xff2b4b
embed_color_usage = 0xbaccdb

# File paths
file_guild_settings = "./resources/settings/guilds.yml"
file_user_settings = "./resources/settings/users.yml"

# Timers
settings_save_interval_minutes = 30.0

# Nintendo Network ID lookup (Client headers are only sent if set)
nnid_lookup_url = "https://accountws.nintendo.net/v1/api/admin/mapped_ids"
nnid_client_id = ""
nnid_client_secret = ""
nnid_lookup_timeout = 10.0
