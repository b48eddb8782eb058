DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
REPLY_TEMPERATURE = 0.4
REPLY_MAX_TOKENS = 400

# thread.history limits
INTAKE_HISTORY_LIMIT = 10
MENTION_HISTORY_LIMIT = 100

# Allowed posting hours as [start, end) in local time.
WEEKDAY_REPLY_HOURS = (7, 22)
WEEKEND_REPLY_HOURS = (12, 22)

DISCORD_MAX_MESSAGE_LEN = 1900  # keep under 2000 hard limit

COMMAND_PREFIX = "!"
