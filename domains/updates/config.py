"""Updates domain configuration - daily update collection and reminders."""

import os

# Time zone used for day keys, timestamps and the working-hours gate
TIMEZONE = os.environ.get("UPDATES_TIMEZONE", "UTC")

# Working hours window (inclusive on both ends)
REMINDER_START_HOUR = int(os.environ.get("REMINDER_START_HOUR", 8))
REMINDER_END_HOUR = int(os.environ.get("REMINDER_END_HOUR", 20))

# Cron hour field for reminders - top of every even hour
REMINDER_CRON_HOURS = os.environ.get("REMINDER_CRON_HOURS", "*/2")
REMINDER_INTERVAL_HOURS = 2

# Commands must start with this prefix, e.g. "/update"
COMMAND_PREFIX = os.environ.get("COMMAND_PREFIX", "/")

# Keep only the newest N day buckets (unset = keep every day)
_retain_days = os.environ.get("RETAIN_DAYS", "")
RETAIN_DAYS = int(_retain_days) if _retain_days.strip() else None

# Discord message limit
MAX_MESSAGE_LENGTH = 2000

# Button data token for the reminder's "Submit Update" choice
SUBMIT_UPDATE_TOKEN = "submit_update"
SUBMIT_UPDATE_LABEL = "Submit Update"
