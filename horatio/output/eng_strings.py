# pylint: skip-file

"""
English Strings.

All strings displayed to discord users will be taken from this file; all
logger messages are hardcoded and shouldn't be in here. There are a lot
of strings here that are so long that they exceed the character limit
per line according to the style guide but that's okay since it would be
really messy otherwise.

Strings ending in _title and _desc are used in pairs; strings ending in
_help are the one-line descriptions shown in command usage lists.
"""

"""'''''''''''
Command Errors
'''''''''''"""

# General Headers
command_error_header = "**Error:** "
command_error_logger_header = "Command error {} triggered by command: {}"
command_error_failed_to_send = "Failed to send user error message to channel {}: {}"

# Command invocation exceptions
command_error_user_input_error = "User input error."
command_error_bad_argument = "Invalid argument."
command_error_missing_required_argument = "Missing required argument."
command_error_unexpected_quote_error = "Encountered unexpected quote mark inside non-quoted string."
command_error_invalid_end_of_quoted_string_error = "Invalid end of quoted string."
command_error_expected_closing_quote_error = "Did not find closing quote character."
command_error_no_private_message = "Command cannot be used in Private Message."
command_error_command_on_cooldown = "Command on cooldown. Please try again later."
command_error_not_owner = "Command can only be used by the bot owner."

# Exceptions with format params
command_error_missing_permissions = "You are missing the necessary permissions to run this command: {}."
command_error_bot_missing_permissions = "I am missing the necessary permissions to execute this command: {}."


"""''''''''''''''
Settings Commands
''''''''''''''"""

settings_usage_line = "**Usage:** `{}{} <setting> (value(s))`"
settings_usage_field = "{}\n*Arguments: {}*"

settings_not_found_title = "Settings Error"
settings_not_found_desc = "Error finding the setting ``{}``."

settings_usage_title = "Settings Help"
settings_usage_desc = "Manages bot, user and server settings."

bot_help = "Bot settings for this server"
user_help = "Your own user settings"
server_help = "Settings for this server"


"""''''''''''
Bot Settings
''''''''''"""

bot_usage_title = "Bot Settings Help"
bot_usage_desc = "Manages how the bot behaves in this server."

bot_prefix_help = "Displays or sets the command prefix for this server"
bot_prefix_view_title = "Bot Settings - Command Prefix"
bot_prefix_view_desc = "Current command prefix:\n\n``{}``"
bot_prefix_set_title = "Bot Settings - Command Prefix"
bot_prefix_set_desc = "Successfully set the command prefix to ``{}``."


"""'''''''''''
User Settings
'''''''''''"""

user_usage_title = "User Settings Help"
user_usage_desc = "Manages your user settings."

# About me
user_about_help = "Displays your about me or a mentioned user's, or sets yours"
user_about_unset_title = "User Settings - About Me Error"
user_about_unset_desc = "You must specify an about me to view it.\n\nEx: ``%PREFIX%user about I like trains.``"
user_about_not_found_title = "About Me - Error"
user_about_not_found_desc = "Error finding the about me for <@!{}>."
user_about_view_title = "About Me"
user_about_view_desc = "<@!{}>"
user_about_view_field = "About Me"
user_about_set_title = "User Settings - About Me"
user_about_set_desc = "Successfully set your about me!"

# Timezone
user_timezone_help = "Displays or sets your timezone"
user_timezone_unset_title = "User Settings - Timezone Error"
user_timezone_unset_desc = "You must specify a timezone to view it."
user_timezone_stored_invalid_title = "User Settings - Timezone Error"
user_timezone_stored_invalid_desc = "You have an invalid timezone set, please set a new one first.\n\nEx: ``{}user timezone America/New_York``"
user_timezone_invalid_title = "User Settings - Timezone Error"
user_timezone_invalid_desc = "Invalid timezone."
user_timezone_view_title = "User Settings - Timezone"
user_timezone_view_desc = "Your current timezone is set to ``{}``.\nYour current time is ``{}``."
user_timezone_set_title = "User Settings - Timezone"
user_timezone_set_desc = "Successfully set your timezone to ``{}``.\nYour current time is ``{}``."

# Socials
user_social_help = "Manages your socials"
user_social_usage_title = "User Settings - Socials Help"
user_social_usage_desc = "Manages your socials."
user_social_command_unknown_title = "User Settings - Socials Error"
user_social_command_unknown_desc = "Unknown socials command ``{}``."
user_social_unknown_title = "User Settings - Socials Error"
user_social_unknown_desc = "Unknown social ``{}``."

user_social_set_help = "Sets a social"
user_social_list_help = "Lists your socials"
user_social_clear_help = "Removes a social"
user_social_available_help = "Lists available socials"

user_social_set_missing_title = "User Settings - Socials"
user_social_set_missing_desc = "You must specify a social and an identifier to set it.\n\nEx: ``%PREFIX%user social set switchfc SW-0000-0000-0000``"
user_social_clear_missing_title = "User Settings - Socials"
user_social_clear_missing_desc = "You must specify a social to clear it."
user_social_invalid_switchfc_title = "User Settings - Socials"
user_social_invalid_switchfc_desc = "Invalid Switch friend code."
user_social_nnid_error_title = "User Settings - Social Error"
user_social_nnid_error_desc = "There was an error checking if that NNID exists."
user_social_nnid_missing_title = "User Settings - Social Error"
user_social_nnid_missing_desc = "That NNID doesn't exist!"

user_social_duplicate_switchfc_title = "User Settings - Socials"
user_social_duplicate_switchfc_desc = "You have already set that Switch friend code."
user_social_duplicate_nnid_title = "User Settings - Socials"
user_social_duplicate_nnid_desc = "You have already set that NNID."
user_social_duplicate_psn_title = "User Settings - Socials"
user_social_duplicate_psn_desc = "You have already set that PSN."
user_social_duplicate_xbox_title = "User Settings - Socials"
user_social_duplicate_xbox_desc = "You have already set that Xbox Live gamertag."

user_social_set_switchfc_title = "User Settings - Socials"
user_social_set_switchfc_desc = "Successfully set your Switch friend code to ``{}``."
user_social_set_nnid_title = "User Settings - Socials"
user_social_set_nnid_desc = "Successfully set your NNID to ``{}``."
user_social_set_psn_title = "User Settings - Socials"
user_social_set_psn_desc = "Successfully set your PSN to ``{}``."
user_social_set_xbox_title = "User Settings - Socials"
user_social_set_xbox_desc = "Successfully set your Xbox Live gamertag to ``{}``."

user_social_unset_switchfc_title = "User Settings - Socials"
user_social_unset_switchfc_desc = "You don't have a Switch friend code set."
user_social_unset_nnid_title = "User Settings - Socials"
user_social_unset_nnid_desc = "You don't have an NNID set."
user_social_unset_psn_title = "User Settings - Socials"
user_social_unset_psn_desc = "You don't have a PSN set."
user_social_unset_xbox_title = "User Settings - Socials"
user_social_unset_xbox_desc = "You don't have an Xbox Live gamertag set."

user_social_clear_switchfc_title = "User Settings - Socials"
user_social_clear_switchfc_desc = "Cleared your Switch friend code."
user_social_clear_nnid_title = "User Settings - Socials"
user_social_clear_nnid_desc = "Cleared your NNID."
user_social_clear_psn_title = "User Settings - Socials"
user_social_clear_psn_desc = "Cleared your PSN."
user_social_clear_xbox_title = "User Settings - Socials"
user_social_clear_xbox_desc = "Cleared your Xbox Live gamertag."

user_social_name_switchfc = "Switch Friend Code"
user_social_name_nnid = "Nintendo Network ID"
user_social_name_psn = "PSN"
user_social_name_xbox = "Xbox Live Gamertag"

user_social_list_title = "Socials"
user_social_list_desc = "Below are all of the socials you have added."
user_social_list_empty_title = "User Settings - Socials"
user_social_list_empty_desc = "You don't have any socials yet!"
user_social_available_title = "User Settings - Socials - Types"
user_social_available_desc = "These are the available socials you can use:\n\n``switchfc`` - Nintendo Switch friend code\n``nnid`` - Nintendo Network ID\n``psn`` - PlayStation Network\n``xbox`` - Xbox Live Gamertag"


"""'''''''''''''
Server Settings
'''''''''''''"""

server_usage_title = "Server Settings Help"
server_usage_desc = "Manages the settings for this server."

# Join and leave messages
server_joinmsg_help = "Displays or sets the message sent to this channel when a user joins"
server_leavemsg_help = "Displays or sets the message sent to this channel when a user leaves"
server_member_message_field = "Message"
server_joinmsg_unset_title = "Server Settings - Join Message"
server_joinmsg_unset_desc = "No join message is set for this server."
server_joinmsg_view_title = "Server Settings - Join Message"
server_joinmsg_view_desc = "The join message is sent to <#{}>."
server_joinmsg_set_title = "Server Settings - Join Message"
server_joinmsg_set_desc = "Successfully set the join message to this channel."
server_leavemsg_unset_title = "Server Settings - Leave Message"
server_leavemsg_unset_desc = "No leave message is set for this server."
server_leavemsg_view_title = "Server Settings - Leave Message"
server_leavemsg_view_desc = "The leave message is sent to <#{}>."
server_leavemsg_set_title = "Server Settings - Leave Message"
server_leavemsg_set_desc = "Successfully set the leave message to this channel."

# Tips
server_tips_help = "Displays, enables or disables hourly tips in this channel"
server_tips_enable_help = "Enables hourly tips for this channel"
server_tips_disable_help = "Disables hourly tips"
server_tips_unknown_title = "Server Settings - Tips Error"
server_tips_unknown_desc = "Unknown tips command ``{}``."
server_tips_enabled_title = "Server Settings - Tips"
server_tips_enabled_desc = "Tips are enabled for this server."
server_tips_disabled_title = "Server Settings - Tips"
server_tips_disabled_desc = "Tips are disabled for this server."
server_tips_enable_title = "Server Settings - Tips"
server_tips_enable_desc = "Successfully enabled hourly tips for this channel."
server_tips_disable_title = "Server Settings - Tips"
server_tips_disable_desc = "Successfully disabled hourly tips for this channel."

# Auto send now playing
server_asnp_help = "Displays, enables or disables now playing messages for automatically started tracks"
server_asnp_enable_help = "Sends now playing messages for automatically started tracks"
server_asnp_disable_help = "Stops sending now playing messages for automatically started tracks"
server_asnp_unknown_title = "Server Settings - Auto Send Now Playing Error"
server_asnp_unknown_desc = "Unknown ASNP command ``{}``."
server_asnp_enabled_title = "Server Settings - Auto Send Now Playing"
server_asnp_enabled_desc = "Now playing messages are sent each time a new track is started without user interaction."
server_asnp_disabled_title = "Server Settings - Auto Send Now Playing"
server_asnp_disabled_desc = "Now playing messages are not sent for tracks started without user interaction."
server_asnp_enable_title = "Server Settings - Auto Send Now Playing"
server_asnp_enable_desc = "Successfully enabled sending now playing messages each time a new track is started without user interaction."
server_asnp_disable_title = "Server Settings - Auto Send Now Playing"
server_asnp_disable_desc = "Successfully disabled sending now playing messages each time a new track is started without user interaction."

# Invite link generation
server_invitegen_help = "Manages invite link generation via the API"
server_invitegen_usage_title = "Server Settings - API Invite Generation Help"
server_invitegen_usage_desc = "Manages invite link generation via the API."
server_invitegen_unknown_title = "Server Settings - API Invite Generation Error"
server_invitegen_unknown_desc = "Unknown invitegen command ``{}``."
server_invitegen_setchannel_help = "Sets the invite link channel to the current channel"
server_invitegen_key_help = "Displays or sets the key to use for invite link generation"
server_invitegen_setchannel_title = "Server Settings - API Invite Generation"
server_invitegen_setchannel_desc = "Successfully set the channel to use for generating invite links to this channel."
server_invitegen_key_set_title = "Server Settings - API Invite Generation"
server_invitegen_key_set_desc = "Successfully set the key to use for generating invite links to ``{}``."
server_invitegen_key_unset_title = "Server Settings - API Invite Generation"
server_invitegen_key_unset_desc = "No key is currently set for generating invite links!"
server_invitegen_key_view_title = "Server Settings - API Invite Generation"
server_invitegen_key_view_desc = "The current key for generating invite links is ``{}``."

# Swear filter
server_filter_help = "Manages the swear filter for this server"
server_filter_usage_title = "Server Settings - Swear Filter Help"
server_filter_usage_desc = "Manages the swear filter for this server."
server_filter_unknown_title = "Server Settings - Swear Filter Error"
server_filter_unknown_desc = "Unknown filter command ``{}``."
server_filter_enable_help = "Enables the swear filter for this server"
server_filter_disable_help = "Disables the swear filter for this server"
server_filter_timeout_help = "Displays or sets the timeout for deleting warning messages"
server_filter_words_help = "Lists filtered words, or adds/removes specified words/clears all words"
server_filter_words_add_help = "Adds words to the filter"
server_filter_words_remove_help = "Removes words from the filter"
server_filter_words_clear_help = "Removes every word from the filter"
server_filter_title = "Server Settings - Swear Filter"
server_filter_enable_title = "Server Settings - Swear Filter"
server_filter_enable_desc = "Successfully enabled the swear filter."
server_filter_disable_title = "Server Settings - Swear Filter"
server_filter_disable_desc = "Successfully disabled the swear filter."
server_filter_words_title = "Server Settings - Swear Filter"
server_filter_words_field = "Filtered Words"
server_filter_words_empty = "No words are in the swear filter!"
server_filter_words_unknown_title = "Server Settings - Swear Filter Error"
server_filter_words_unknown_desc = "Unknown words command ``{}``."
server_filter_words_add_missing_title = "Server Settings - Swear Filter Error"
server_filter_words_add_missing_desc = "You must specify one or more words to add to the filter."
server_filter_words_remove_missing_title = "Server Settings - Swear Filter Error"
server_filter_words_remove_missing_desc = "You must specify one or more words to remove from the filter."
server_filter_words_add_title = "Server Settings - Swear Filter"
server_filter_words_add_desc = "Successfully added the following words to the filter: {}"
server_filter_words_removed = "\nSuccessfully removed the following words from the filter: {}"
server_filter_words_missing = "\nThe following words were not in the filter: {}"
server_filter_words_clear_title = "Server Settings - Swear Filter"
server_filter_words_clear_desc = "Successfully cleared all words from the filter."
server_filter_timeout_invalid_title = "Server Settings - Swear Filter Error"
server_filter_timeout_invalid_desc = "``{}`` is not a valid number."
server_filter_timeout_negative_title = "Server Settings - Swear Filter Error"
server_filter_timeout_negative_desc = "``{}`` is negative; use 0 to disable the timeout."
server_filter_timeout_disabled_title = "Server Settings - Swear Filter"
server_filter_timeout_disabled_desc = "The timeout for deleting warning messages is disabled."
server_filter_timeout_view_title = "Server Settings - Swear Filter"
server_filter_timeout_view_desc = "The current timeout for deleting warning messages is set to {} seconds."
server_filter_timeout_disable_title = "Server Settings - Swear Filter"
server_filter_timeout_disable_desc = "Successfully disabled the timeout for deleting warning messages."
server_filter_timeout_set_title = "Server Settings - Swear Filter"
server_filter_timeout_set_desc = "Successfully set the timeout for deleting warning messages to {} seconds."

# Event logs
server_log_help = "Sets the logging capabilities for this server"
server_log_usage_title = "Server Settings - Log Help"
server_log_usage_desc = "Sets the logging capabilities for this server."
server_log_unknown_title = "Server Settings - Log Error"
server_log_unknown_desc = "Unknown log command ``{}``."
server_log_set_help = "Sets the logging channel to the current channel"
server_log_unset_help = "Unsets the current logging channel and disables logging"
server_log_enable_help = "Enables logging for the server (to this channel if not set), enabling any optionally specified events"
server_log_disable_help = "Disables logging for the server, or disables the specified events"
server_log_events_help = "Returns a list of available events to enable/disable"
server_log_set_title = "Server Settings - Log"
server_log_set_desc = "Successfully set the logging channel to this channel."
server_log_unset_title = "Server Settings - Log"
server_log_unset_desc = "Successfully unset the logging channel and disabled logging."
server_log_enable_title = "Server Settings - Log"
server_log_enable_desc = "Successfully enabled logging."
server_log_enable_channel_title = "Server Settings - Log"
server_log_enable_channel_desc = "Successfully enabled logging and set the logging channel to this channel."
server_log_enable_all_title = "Server Settings - Log"
server_log_enable_all_desc = "Successfully enabled all logging events."
server_log_enable_all_channel_title = "Server Settings - Log"
server_log_enable_all_channel_desc = "Successfully enabled all logging events and set the logging channel to this channel."
server_log_enable_recommended_title = "Server Settings - Log"
server_log_enable_recommended_desc = "Successfully toggled all logging events to their recommended states."
server_log_enable_recommended_channel_title = "Server Settings - Log"
server_log_enable_recommended_channel_desc = "Successfully toggled all logging events to their recommended states and set the logging channel to this channel."
server_log_disable_title = "Server Settings - Log"
server_log_disable_desc = "Successfully disabled logging."
server_log_disable_all_title = "Server Settings - Log"
server_log_disable_all_desc = "Successfully disabled all logging events."
server_log_disable_events_title = "Server Settings - Log"
server_log_disable_events_desc = "Updated logging events."
server_log_events_enabled = "Enabled the following events: {}"
server_log_events_disabled = "Disabled the following events: {}"
server_log_events_failed = "Failed to find the following events: {}"
server_log_events_title = "Server Settings - Log"
server_log_events_desc = "__Event states__\n"
server_log_event_state = "{}: **{}**"

# Reset
server_reset_help = "Resets the specified group of settings to its defaults"
server_reset_missing_title = "Server Settings - Reset Error"
server_reset_missing_desc = "You must specify a setting to reset."
server_reset_unknown_title = "Server Settings - Reset Error"
server_reset_unknown_desc = "Error finding the setting ``{}``."
server_reset_title = "Server Settings - Reset"
server_reset_desc = "Successfully reset the settings for ``{}``."
