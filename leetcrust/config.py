"""The ``config`` command: store user settings in the ``.env`` file."""

from __future__ import annotations

from .read_write import update_env_variable

_TEXT_SETTINGS = ("username", "cookie")
_BOOL_SETTINGS = ("premium", "allow_dead_code")
SETTINGS = _TEXT_SETTINGS + _BOOL_SETTINGS


def validate_u8_bool(value: int, name: str) -> tuple[str, str]:
    """Check that ``value`` is 0 or 1 and return the pair to store."""
    if not 0 <= value < 2:
        raise ValueError(
            f"The {name} value {value} is not valid, it should be either 0 or 1"
        )
    return name, str(value)


def handle_config_command(setting: str, value: str | int) -> bool:
    """Store one setting; report the outcome and return whether it was written."""
    key = setting.replace("-", "_")
    if key in _TEXT_SETTINGS:
        variable, text = key, str(value)
    elif key in _BOOL_SETTINGS:
        try:
            variable, text = validate_u8_bool(int(value), key)
        except ValueError as error:
            print(error)
            return False
    else:
        raise ValueError(f"unknown setting {setting!r}")

    try:
        update_env_variable(variable, text)
    except OSError as error:
        print(f"Unexpected error while handling config command: {error}.")
        return False
    print(f"Sucessfully wrote {variable} to .env")
    return True