"""The ``clip`` command: copy a solution, stripped of scaffolding, to the clipboard."""

from __future__ import annotations

from pathlib import Path

from termcolor import colored

from .create import (
    SOLUTION_STRUCT_PATTERN,
    SOLUTIONS_DIR,
    USE_LISTNODE_PATTERN,
    USE_TREENODE_PATTERN,
    solution_filename,
)
from .read_write import UNEXPECTED_ERR_HEADER, AbortError, read_slug_locally

PATTERNS_TO_REMOVE = (
    "#[cfg(test)]",
    SOLUTION_STRUCT_PATTERN,
    USE_TREENODE_PATTERN,
    USE_LISTNODE_PATTERN,
)
_TEST_MODULE_PATTERN = "mod tests {"


def _error_header() -> str:
    return colored(UNEXPECTED_ERR_HEADER, "red", attrs=["bold"])


def remove_test_module(text: str) -> str:
    """Remove the ``mod tests { ... }`` block, ignoring braces inside comments."""
    start = text.find(_TEST_MODULE_PATTERN)
    if start == -1:
        return text

    depth = 0
    in_line_comment = False
    in_block_comment = False
    end = None
    pos = start
    length = len(text)
    while pos < length:
        char = text[pos]
        following = text[pos + 1] if pos + 1 < length else None
        in_comment = in_line_comment or in_block_comment

        if not in_comment and char == "/" and following == "/":
            in_line_comment = True
            pos += 1
            continue
        if not in_comment and char == "/" and following == "*":
            in_block_comment = True
            pos += 2
            continue
        if in_block_comment and char == "*" and following == "/":
            in_block_comment = False
            pos += 2
            continue
        if in_line_comment and char == "\n":
            in_line_comment = False

        if not in_line_comment and not in_block_comment:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    end = pos
                    break
        pos += 1

    if end is None:
        return text
    return text[:start] + text[end + 1 :]


def strip_solution(content: str) -> str:
    """Remove the scaffolding that is not part of the submitted solution."""
    for pattern in PATTERNS_TO_REMOVE:
        content = content.replace(pattern, "")
    return remove_test_module(content).strip()


def copy_to_clipboard(text: str) -> None:
    """Put ``text`` on the system clipboard; raises RuntimeError when that fails."""
    try:
        import tkinter
    except ImportError as error:
        raise RuntimeError("no clipboard support available") from error

    try:
        root = tkinter.Tk()
    except tkinter.TclError as error:
        raise RuntimeError(f"creating clipboard context: {error}") from error
    try:
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
        # reading the contents back keeps them available on some desktops
        root.clipboard_get()
    except tkinter.TclError as error:
        raise RuntimeError(f"setting solution to clipboard: {error}") from error
    finally:
        root.destroy()


def handle_clip_command(problem_id: int) -> str:
    """Copy the stripped solution of a problem to the clipboard and return it."""
    print("Trying to find slug locally...")
    slug = read_slug_locally(problem_id, True)
    if slug is None:
        raise AbortError(problem_id)

    file_path = Path(SOLUTIONS_DIR) / f"{solution_filename(problem_id, slug)}.rs"
    print("Reading solution file...")
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(
            f"You're trying to clip the content of your solution for problem {problem_id} "
            "but it seems you haven't solved it yet !"
        )
        raise AbortError(problem_id) from None
    except (OSError, UnicodeDecodeError) as error:
        print(
            f"{_error_header()} reading content of solution file for problem "
            f"{problem_id}: {error}"
        )
        raise AbortError(problem_id) from error

    content = strip_solution(content)

    print("Trying to set solution to your clipboard...")
    try:
        copy_to_clipboard(content)
    except RuntimeError as error:
        print(f"{_error_header()} {error}")
        raise AbortError(problem_id) from error

    print(f"{colored('Successfully', 'cyan', attrs=['bold'])} added solution to clipboard!")
    return content