"""
Configuration settings for the nanofs shell.
"""

# Shell settings
PROMPT = "$: "
EXIT_COMMAND = "exit"

# Path settings
SEPARATOR = "/"
PARENT_TOKEN = ".."

# Permission settings
DEFAULT_MODE_ORDINAL = 3  # ReadWrite

# Logging settings
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_LEVEL = "WARNING"
