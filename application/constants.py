"""Application-level constants."""

# Outbound response on success
SUCCESS_MESSAGE = "Roles successfully updated"

# Slash command option
CHARACTERS_OPTION = "characters"
CHARACTERS_OPTION_DESCRIPTION = "Characters separated by comma"

# Discord enum values used in command/interaction payloads
CHAT_INPUT_COMMAND_TYPE = 1
STRING_OPTION_TYPE = 3
CHANNEL_MESSAGE_WITH_SOURCE = 4

# Engine phases (used as log context)
PHASE_CLEARING = "clearing"
PHASE_ASSIGNING = "assigning"
PHASE_DONE = "done"
