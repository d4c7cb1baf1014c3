"""Preference keys and defaults for vimcode.

Values are persisted by the host's settings store. This module only names
the keys and their built-in defaults.
"""

SERVER_NAME_KEY = "vimcode_servername"
SET_PATH_KEY = "vimcode_setpath"
EXTRA_COMMANDS_KEY = "vimcode_extracommands"
CODE_ASSETS_KEY = "vimcode_codeassets"

DEFAULT_SERVER_NAME = "Unity"
DEFAULT_SET_PATH = True
DEFAULT_EXTRA_COMMANDS = ""
DEFAULT_CODE_ASSETS = ".cs,.shader,.h,.m,.c,.cpp,.txt,.md,.json"

# Short names accepted by `vimcode config set`
PREFERENCE_KEYS = {
    "servername": SERVER_NAME_KEY,
    "setpath": SET_PATH_KEY,
    "extracommands": EXTRA_COMMANDS_KEY,
    "codeassets": CODE_ASSETS_KEY,
}

BOOL_KEYS = frozenset({SET_PATH_KEY})
