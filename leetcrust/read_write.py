"""Reading and writing of the local files the tool relies on."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from termcolor import colored

ENV_PATH = ".env"
SLUGS_PATH = "resources/slugs_and_ids.txt"
SOLUTION_MOD_PATH = "./src/solutions/mod.rs"
TEST_FUNCTION_MOLD_PATH = "resources/test_function_mold.txt"
TEST_MODULE_MOLD_PATH = "resources/test_module_mold.txt"

UNEXPECTED_ERR_HEADER = "Unexpected error while"
NO_PREMIUM_ERR = (
    "This problem seems to be premium-only but you are registered as a free-user. "
    "Please run `cargo conf premium 1` if you are premium."
)

_U8_RE = re.compile(r"\+?[0-9]+")


class AbortError(Exception):
    """Raised when the current command must stop; the reason was already reported."""


class ReadStatus(Enum):
    """Outcome of looking a variable up in a local file."""

    FOUND = auto()
    FILE_MISSING = auto()
    LINE_MISSING = auto()
    LINE_CORRUPTED = auto()
    UNEXPECTED_ERROR = auto()


@dataclass(frozen=True)
class LocalRead:
    """Result of a local lookup: a status and, when found, the fields after the key."""

    status: ReadStatus
    value: tuple[str, ...] | None = None


def _error_header() -> str:
    return colored(UNEXPECTED_ERR_HEADER, "red", attrs=["bold"])


def _lines(content: str) -> list[str]:
    parts = content.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _parse_u8(text: str) -> int | None:
    if not _U8_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _write(path: str, content: str) -> None:
    Path(path).write_text(content, encoding="utf-8", newline="")


def update_env_variable(variable: str, value: str) -> None:
    """Set ``variable=value`` as the first line of the ``.env`` file."""
    new_pair = f"{variable}={value}"
    try:
        content = Path(ENV_PATH).read_text(encoding="utf-8")
    except FileNotFoundError:
        _write(ENV_PATH, new_pair)
        return
    new_lines = [new_pair]
    new_lines.extend(line for line in _lines(content) if not line.startswith(variable))
    _write(ENV_PATH, "\n".join(new_lines))


def read_boolean_env_variable(
    variable_name: str, suggested_command: str, explanation: str
) -> bool:
    """Read a 0/1 variable from ``.env``, defaulting to False when it is absent.

    Raises AbortError when the stored value is not 0 or 1.
    """
    result = read_variable(ENV_PATH, variable_name, "=", 2)
    status = result.status
    if status is ReadStatus.FOUND:
        assert result.value is not None
        parsed = _parse_u8(result.value[0])
        if parsed is None:
            print(
                f"{_error_header()} parsing {variable_name} bool from .env, "
                "it should be 0 or 1"
            )
            raise AbortError(variable_name)
        if parsed not in (0, 1):
            print(
                f"{_error_header()} reading {variable_name} bool from .env, "
                "it should be 0 or 1"
            )
            raise AbortError(variable_name)
        return parsed == 1
    if status is ReadStatus.FILE_MISSING:
        print(f"There is no .env file, please use {suggested_command} to create it")
    elif status is ReadStatus.LINE_MISSING:
        print(f"{explanation} by running {suggested_command}")
    elif status is ReadStatus.LINE_CORRUPTED:
        print(
            f"The .env line with the {variable_name} variable seems to be corrupted. "
            f"Please run {suggested_command}"
        )
    else:
        print(f"{_error_header()} trying to read {variable_name} variable in .env")
    return False


def read_test_function_mold() -> str:
    """Return the template used for one generated test function."""
    return Path(TEST_FUNCTION_MOLD_PATH).read_text(encoding="utf-8")


def read_test_module_mold() -> str:
    """Return the template used for a generated test module."""
    return Path(TEST_MODULE_MOLD_PATH).read_text(encoding="utf-8")


def read_variable(path: str, variable: str, separator: str, field_count: int) -> LocalRead:
    """Find the first line of ``path`` whose key before ``separator`` is ``variable``.

    The line is valid when it splits into exactly ``field_count`` fields.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return LocalRead(ReadStatus.FILE_MISSING)
    except (OSError, UnicodeDecodeError):
        return LocalRead(ReadStatus.UNEXPECTED_ERROR)

    for line in _lines(content):
        key, found, _ = line.partition(separator)
        if found and key == variable:
            parts = line.split(separator)
            if len(parts) == field_count:
                return LocalRead(ReadStatus.FOUND, tuple(parts[1:]))
            return LocalRead(ReadStatus.LINE_CORRUPTED)
    return LocalRead(ReadStatus.LINE_MISSING)


def read_slug_locally(problem_id: int, premium: bool) -> str | None:
    """Look a problem's slug up in the local slugs file.

    Returns None when the slug should be fetched instead, and raises
    AbortError when the command must stop.
    """
    result = read_variable(SLUGS_PATH, str(problem_id), ",", 3)
    status = result.status
    if status is ReadStatus.FOUND:
        assert result.value is not None
        slug, prem_text = result.value
        prem = _parse_u8(prem_text)
        if prem not in (0, 1):
            print(f"{_error_header()} parsing premium value locally for problem {problem_id}")
            raise AbortError(problem_id)
        if prem == 1 and not premium:
            print(NO_PREMIUM_ERR)
            raise AbortError(problem_id)
        return slug
    if status is ReadStatus.FILE_MISSING:
        print("File `slugs_and_ids` missing, creating it...")
    elif status is ReadStatus.LINE_CORRUPTED:
        print(
            f"We did find problem {problem_id} locally but the line seems to be "
            "corrupted. Starting api call..."
        )
    elif status is ReadStatus.UNEXPECTED_ERROR:
        print(f"{_error_header()} reading slug locally.")
    return None


def write_slugs_and_ids(content: str) -> None:
    """Replace the local slugs file with ``content``."""
    _write(SLUGS_PATH, content)


def write_solution_template(path: str, content: str) -> None:
    """Write a new solution file, refusing to overwrite an existing one."""
    if Path(path).exists():
        raise FileExistsError("File already exists")
    _write(path, content)


def append_solution_module(filename: str, allow_dead_code: bool) -> None:
    """Declare the solution module in the solutions' ``mod.rs``."""
    content = "#[allow(dead_code)]\n" if allow_dead_code else ""
    content += f"mod {filename};\n"
    with open(SOLUTION_MOD_PATH, "a", encoding="utf-8", newline="") as handle:
        handle.write(content)