"""Configuration and CLI handling."""

from vidshelf.config.settings import (
    CHANNEL_DELIMITER,
    SEPARATOR_LENGTH,
    HIDDEN_PREFIX,
    WATCHED_DIRNAME,
    VIDEO_PLAYERS,
    LIBRARY_ENV_VAR,
    PLAYER_ENV_VAR,
    LOG_FILENAME,
)
from vidshelf.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    validate_library_dir,
    args_to_cli_args,
)

__all__ = [
    "CHANNEL_DELIMITER",
    "SEPARATOR_LENGTH",
    "HIDDEN_PREFIX",
    "WATCHED_DIRNAME",
    "VIDEO_PLAYERS",
    "LIBRARY_ENV_VAR",
    "PLAYER_ENV_VAR",
    "LOG_FILENAME",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "validate_library_dir",
    "args_to_cli_args",
]
