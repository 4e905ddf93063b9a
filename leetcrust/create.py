"""The ``create`` command: build a solution file for a problem."""

from __future__ import annotations

from collections.abc import Iterable

from termcolor import colored

from .fetch import FetchContentError, ProblemContent, ProblemSummary, fetch_problem_list
from .parse_api import FunctionMetaData, ProbMetaData
from .read_write import (
    NO_PREMIUM_ERR,
    UNEXPECTED_ERR_HEADER,
    AbortError,
    append_solution_module,
    read_boolean_env_variable,
    write_slugs_and_ids,
    write_solution_template,
)

ERR_HEADER = "Error while"
PREMIUM_COMMAND = "`cargo conf premium (0 or 1)`"
ALLOW_DEAD_CODE_COMMAND = "`cargo conf allow-dead-code (0 or 1)`"

TEST_COMPILER_CONFIGURATION_ATTRIBUTE = "#[cfg(test)]\n"
PATTERNS_TO_GIVE_TEST_ATTRIBUTE = (
    "impl ",
    "struct ",
    "use std::cell::RefCell;",
    "use std::rc::Rc;",
    "use crate::tree::TreeNode;",
    "use crate::linked_list::ListNode;",
)

SOLUTION_STRUCT_PATTERN = "struct Solution;\n\n"
USE_TREENODE_PATTERN = "use crate::tree::TreeNode;\n"
USE_LISTNODE_PATTERN = "use crate::linked_list::ListNode;\n"

SOLUTIONS_DIR = "./src/solutions"


def _error_header() -> str:
    return colored(UNEXPECTED_ERR_HEADER, "red", attrs=["bold"])


def _lines(content: str) -> list[str]:
    parts = content.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def check_premium() -> bool:
    """Read from ``.env`` whether the user declared a premium account."""
    return read_boolean_env_variable(
        "premium",
        PREMIUM_COMMAND,
        "Please specify if you're a premium leetcode user",
    )


def check_allow_dead_code() -> bool:
    """Read from ``.env`` whether dead code warnings are silenced with an attribute."""
    return read_boolean_env_variable(
        "allow_dead_code",
        ALLOW_DEAD_CODE_COMMAND,
        "Please specify if you'd like to escape rust's warnings by using the "
        "#[allow(dead_code)] attribute",
    )


def solution_filename(problem_id: int, slug: str) -> str:
    """Module name of the solution file for a problem."""
    return f"s{problem_id}_{slug}".replace("-", "_")


def apply_modifications(content: str, metadata: ProbMetaData, allow_dead_code: bool) -> str:
    """Add the imports and attributes a starter code needs to compile as a module."""
    if isinstance(metadata, FunctionMetaData):
        content = SOLUTION_STRUCT_PATTERN + content
        if metadata.has_tree_node():
            content = USE_TREENODE_PATTERN + content
        if metadata.has_list_node():
            content = USE_LISTNODE_PATTERN + content

    if not allow_dead_code:
        for pattern in PATTERNS_TO_GIVE_TEST_ATTRIBUTE:
            replacement = TEST_COMPILER_CONFIGURATION_ATTRIBUTE + pattern
            content = "\n".join(
                line if line.startswith("// ") else line.replace(pattern, replacement)
                for line in _lines(content)
            )
    return content


def find_and_store_problems(
    problems: Iterable[ProblemSummary], problem_id: int
) -> tuple[str, bool] | None:
    """Save every problem to the slugs file and return ``(slug, paid_only)`` of one."""
    found: tuple[str, bool] | None = None
    lines = []
    for problem in problems:
        if problem.frontend_question_id == problem_id:
            found = (problem.slug, problem.paid_only)
        lines.append(
            f"{problem.frontend_question_id},{problem.slug},{int(problem.paid_only)}"
        )
    try:
        write_slugs_and_ids("\n".join(lines))
    except OSError as error:
        print(f"{_error_header()} writing all problems to slugs_and_ids: {error}")
    return found


def fetch_slug(problem_id: int, premium: bool) -> str:
    """Fetch the problem list, refresh the slugs file and return the problem's slug.

    Raises AbortError when the problem is unknown or reserved to premium users.
    """
    try:
        problems = fetch_problem_list()
    except FetchContentError as error:
        print(f"{_error_header()} fecthing all problems: {error}")
        found = None
    else:
        found = find_and_store_problems(problems, problem_id)

    if found is None:
        print(f"We could not find problem {problem_id}, please double-check its number.")
        raise AbortError(problem_id)
    slug, paid_only = found
    if paid_only and not premium:
        print(NO_PREMIUM_ERR)
        raise AbortError(problem_id)
    return slug


def create_solution_file(
    problem_content: ProblemContent,
    test_module: str,
    problem_id: int,
    slug: str,
    allow_dead_code: bool,
) -> bool:
    """Write the solution file and declare its module; return whether it was written."""
    content = apply_modifications(
        problem_content.default_code, problem_content.metadata, allow_dead_code
    )
    content += test_module
    filename = solution_filename(problem_id, slug)
    file_path = f"{SOLUTIONS_DIR}/{filename}.rs"

    try:
        write_solution_template(file_path, content)
    except OSError as error:
        message = error.strerror if isinstance(error, FileExistsError) and error.strerror else error
        print(f"{ERR_HEADER} creating solution file: {message}")
        return False

    print(f"{colored('Successfully', 'cyan', attrs=['bold'])} created and wrote to {file_path}")
    try:
        append_solution_module(filename, allow_dead_code)
    except OSError as error:
        print(f"{_error_header()} declaring module of solution file: {error}")
    return True