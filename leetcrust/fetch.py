"""Requests to the problem site's public API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import requests
from termcolor import colored

from .parse_api import MetadataError, ProbMetaData, parse_metadata
from .read_write import UNEXPECTED_ERR_HEADER

PROBLEM_LIST_URL = "https://leetcode.com/api/problems/algorithms/"
GRAPHQL_URL = "https://leetcode.com/graphql"
QUERY_QUESTION_DATA = (
    "query questionData($titleSlug: String!) "
    "{ question(titleSlug: $titleSlug) { codeDefinition metaData }}"
)
QUERY_EXAMPLE_TESTCASES = (
    "query selectProblem($titleSlug: String!) "
    "{ question(titleSlug: $titleSlug) { exampleTestcases }}"
)
_TIMEOUT = 30
_NOT_IMPLEMENTED = "This command is not implemented yet"
FETCH_COMMANDS = ("slugs", "unimplemented")


@dataclass
class ProblemContent:
    """The Rust starter code of a problem with its parsed metadata."""

    default_code: str
    metadata: ProbMetaData


@dataclass(frozen=True)
class ProblemSummary:
    """One entry of the problem list."""

    frontend_question_id: int
    slug: str
    paid_only: bool


class FetchContentError(Exception):
    """Base error for failures while fetching a problem."""

    def log(self, problem_id: int) -> None:
        """Report the error for the given problem on standard output."""
        header = colored(UNEXPECTED_ERR_HEADER, "red", attrs=["bold"])
        print(f"{header} fetching content for problem {problem_id}: {self}")


class RustUnavailableError(FetchContentError):
    """The problem has no Rust starter code."""

    def log(self, problem_id: int) -> None:
        print(f"Problem {problem_id} doesn't seem to be available in Rust (T_T)")


class RequestFailedError(FetchContentError):
    """The HTTP request or the decoding of its response failed."""


class ResponseParseError(FetchContentError):
    """The response did not hold the expected data."""


def question_data_body(slug: str) -> dict[str, Any]:
    """GraphQL body asking for a problem's code definitions and metadata."""
    return {
        "operationName": "questionData",
        "variables": {"titleSlug": slug},
        "query": QUERY_QUESTION_DATA,
    }


def example_testcases_body(slug: str) -> dict[str, Any]:
    """GraphQL body asking for a problem's example test cases."""
    return {"variables": {"titleSlug": slug}, "query": QUERY_EXAMPLE_TESTCASES}


def _field(data: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise ResponseParseError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ResponseParseError(f"invalid type for field `{key}`")
    return value


def _question(payload: Any) -> Any:
    return _field(_field(payload, "data", dict), "question", dict)


def parse_problem_list(payload: Any) -> list[ProblemSummary]:
    """Extract the problem summaries from the problem list response."""
    problems = []
    for entry in _field(payload, "stat_status_pairs", list):
        stat = _field(entry, "stat", dict)
        question_id = _field(stat, "frontend_question_id", int)
        if not 0 <= question_id <= 0xFFFF:
            raise ResponseParseError(f"invalid question id {question_id}")
        problems.append(
            ProblemSummary(
                question_id,
                _field(stat, "question__title_slug", str),
                _field(entry, "paid_only", bool),
            )
        )
    return problems


def parse_content(payload: Any) -> ProblemContent:
    """Extract the Rust starter code and metadata from a question data response."""
    question = _question(payload)
    code_definition = _field(question, "codeDefinition", str)
    meta_data = _field(question, "metaData", str)
    try:
        languages = json.loads(code_definition)
    except json.JSONDecodeError as error:
        raise ResponseParseError(str(error)) from error
    if not isinstance(languages, list):
        raise ResponseParseError("code definitions are not a list")

    default_code = None
    for language in languages:
        if _field(language, "value", str) == "rust":
            default_code = _field(language, "defaultCode", str)
    if default_code is None:
        raise RustUnavailableError("no Rust code definition")

    try:
        metadata = parse_metadata(meta_data)
    except MetadataError as error:
        raise ResponseParseError(str(error)) from error
    return ProblemContent(default_code, metadata)


def _send(method: str, url: str, body: dict[str, Any] | None = None) -> Any:
    try:
        response = requests.request(method, url, json=body, timeout=_TIMEOUT)
        return response.json()
    except (requests.RequestException, ValueError) as error:
        raise RequestFailedError(str(error)) from error


def fetch_problem_list() -> list[ProblemSummary]:
    """Download the list of all algorithm problems."""
    return parse_problem_list(_send("GET", PROBLEM_LIST_URL))


def fetch_content(slug: str) -> ProblemContent:
    """Download the Rust starter code and metadata of a problem."""
    return parse_content(_send("POST", GRAPHQL_URL, question_data_body(slug)))


def fetch_example_testcases(slug: str) -> str:
    """Download the example test cases of a problem, one value per line."""
    payload = _send("POST", GRAPHQL_URL, example_testcases_body(slug))
    return _field(_question(payload), "exampleTestcases", str)


def handle_fetch_command(command: str) -> None:
    """Run a ``fetch`` subcommand."""
    if command not in FETCH_COMMANDS:
        raise ValueError(f"unknown fetch command {command!r}")
    print(_NOT_IMPLEMENTED)