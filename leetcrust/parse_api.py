"""Parsing of problem metadata and example test cases into Rust snippets."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

_LIST_RE = re.compile(r"list<(.+)>")
_ARRAY_RE = re.compile(r"(.+)\[\]")


class MetadataError(ValueError):
    """Raised when metadata or a test case value cannot be understood."""


class ScalarType(Enum):
    """The scalar types found in problem metadata, valued by their Rust spelling."""

    INTEGER = "i32"
    CHARACTER = "char"
    BOOLEAN = "bool"
    LONG = "i64"
    STRING = "String"
    LIST_NODE = "Option<Box<ListNode>>"
    DOUBLE = "f64"
    TREE_NODE = "Option<Rc<RefCell<TreeNode>>>"
    VOID = "()"

    def __str__(self) -> str:
        return self.value

    def format_value(self, value: str) -> str:
        """Render a single test case value as a Rust expression of this type."""
        if self in (ScalarType.INTEGER, ScalarType.BOOLEAN, ScalarType.LONG, ScalarType.DOUBLE):
            return value
        if self is ScalarType.CHARACTER:
            if len(value) < 2:
                raise MetadataError(
                    f'Erorr formatting the char {value}, expecting someting like "c"'
                )
            return f"'{value[1]}'"
        if self is ScalarType.STRING:
            return f"{value}.into()"
        if self is ScalarType.LIST_NODE:
            return f"linked!{value}"
        if self is ScalarType.TREE_NODE:
            return f"tree!{value}"
        raise MetadataError("Values of type void cannot be written")


_SCALAR_NAMES = {
    "integer": ScalarType.INTEGER,
    "character": ScalarType.CHARACTER,
    "boolean": ScalarType.BOOLEAN,
    "long": ScalarType.LONG,
    "string": ScalarType.STRING,
    "ListNode": ScalarType.LIST_NODE,
    "double": ScalarType.DOUBLE,
    "TreeNode": ScalarType.TREE_NODE,
    "void": ScalarType.VOID,
    "String": ScalarType.STRING,  # typo found in problem 933
}


def parse_scalar_type(text: str) -> ScalarType:
    """Parse a metadata scalar type name such as ``integer`` or ``TreeNode``."""
    try:
        return _SCALAR_NAMES[text]
    except KeyError:
        raise MetadataError(f"{text} is not a known scalar type") from None


@dataclass(frozen=True)
class DataType:
    """A scalar type nested inside ``vec_depth`` vectors."""

    scalar_type: ScalarType
    vec_depth: int = 0

    def __str__(self) -> str:
        result = str(self.scalar_type)
        for _ in range(self.vec_depth):
            result = f"Vec<{result}>"
        return result

    def write_variable(self, value: str) -> str:
        """Render a test case value of this type as Rust code.

        ``[["5","3"],["6","."]]`` as ``Vec<Vec<char>>`` becomes
        ``vec![vec!['5','3'],vec!['6','.']]``.
        """
        return _write_variable(self.scalar_type, value, self.vec_depth)


def _write_variable(scalar_type: ScalarType, text: str, depth: int) -> str:
    if depth == 0:
        return scalar_type.format_value(text)
    if not text.startswith("["):
        raise MetadataError("Expecting a leading '['")

    parts = ["vec!["]
    buffer: list[str] = []
    level = 0
    for char in text[1:]:
        if char == "[":
            buffer.append(char)
            level += 1
        elif char == "]":
            if level > 0:
                buffer.append(char)
                level -= 1
            else:
                if buffer:
                    parts.append(_write_variable(scalar_type, "".join(buffer), depth - 1))
                    buffer.clear()
                parts.append("]")
                break
        elif char == "," and level == 0:
            parts.append(_write_variable(scalar_type, "".join(buffer), depth - 1))
            parts.append(",")
            buffer.clear()
        else:
            buffer.append(char)
    return "".join(parts)


def parse_data_type(text: str) -> DataType:
    """Parse a metadata type such as ``list<integer>`` or ``character[][]``."""
    depth = 0
    current = text
    while True:
        match = _LIST_RE.fullmatch(current) or _ARRAY_RE.fullmatch(current)
        if match is None:
            return DataType(parse_scalar_type(current), depth)
        current = match.group(1)
        depth += 1


@dataclass(frozen=True)
class Param:
    """A named parameter of a function or constructor."""

    name: str
    type: DataType

    def has_tree_node(self) -> bool:
        return self.type.scalar_type is ScalarType.TREE_NODE

    def has_list_node(self) -> bool:
        return self.type.scalar_type is ScalarType.LIST_NODE


@dataclass(frozen=True)
class ReturnType:
    """The return type of a function or class problem."""

    type: DataType


@dataclass
class FunctionMetaData:
    """Metadata of a problem solved by a single function."""

    name: str
    params: list[Param] = field(default_factory=list)
    return_type: ReturnType | None = None

    def has_tree_node(self) -> bool:
        return any(param.has_tree_node() for param in self.params)

    def has_list_node(self) -> bool:
        return any(param.has_list_node() for param in self.params)


@dataclass
class ClassMetaData:
    """Metadata of a design problem solved by a class."""

    class_name: str
    constructor_params: list[Param]
    methods: list[FunctionMetaData]
    return_type: ReturnType

    def has_tree_node(self) -> bool:
        return any(param.has_tree_node() for param in self.constructor_params)

    def has_list_node(self) -> bool:
        return any(param.has_list_node() for param in self.constructor_params)


ProbMetaData = Union[ClassMetaData, FunctionMetaData]


def _require(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise MetadataError(f"expected an object holding {key!r}")
    if key not in data:
        raise MetadataError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, kind):
        raise MetadataError(f"field {key!r} has the wrong type")
    return value


def _param_from_dict(data: Any) -> Param:
    name = snake_case(_require(data, "name", str))
    return Param(name, parse_data_type(_require(data, "type", str)))


def _return_from_dict(data: Any) -> ReturnType:
    return ReturnType(parse_data_type(_require(data, "type", str)))


def _function_from_dict(data: Any) -> FunctionMetaData:
    name = snake_case(_require(data, "name", str))
    params = [_param_from_dict(item) for item in _require(data, "params", list)]
    raw_return = data.get("return")
    return_type = None if raw_return is None else _return_from_dict(raw_return)
    return FunctionMetaData(name, params, return_type)


def _class_from_dict(data: Any) -> ClassMetaData:
    class_name = _require(data, "classname", str)
    constructor = _require(data, "constructor", dict)
    params = [_param_from_dict(item) for item in _require(constructor, "params", list)]
    methods = [_function_from_dict(item) for item in _require(data, "methods", list)]
    return_type = _return_from_dict(_require(data, "return", dict))
    return ClassMetaData(class_name, params, methods, return_type)


def metadata_from_dict(data: Any) -> ProbMetaData:
    """Build class metadata if the object fits, otherwise function metadata."""
    try:
        return _class_from_dict(data)
    except MetadataError as class_error:
        try:
            return _function_from_dict(data)
        except MetadataError as function_error:
            raise MetadataError(
                "data did not match any known metadata layout"
            ) from function_error if function_error else class_error


def parse_metadata(text: str) -> ProbMetaData:
    """Parse the JSON metadata of a problem."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise MetadataError(f"invalid metadata JSON: {error}") from error
    return metadata_from_dict(data)


def snake_case(text: str) -> str:
    """Convert a camel or pascal case identifier to snake case."""
    result: list[str] = []
    prev_is_cap = False
    # trimmed to cope with a trailing space in problem 1323
    for char in text.strip():
        if "A" <= char <= "Z":
            if not prev_is_cap:
                result.append("_")
            result.append(char.lower())
            prev_is_cap = True
        elif "a" <= char <= "z" or "0" <= char <= "9":
            result.append(char)
            prev_is_cap = False
        else:
            raise MetadataError(
                f"Incorrect character '{char}' found, expecting a pascal case string"
            )
    return "".join(result)


def split_array(array: str) -> list[str]:
    """Split a bracketed array into its top-level element strings.

    ``[[1,2],[3]]`` gives ``["[1,2]", "[3]"]``.
    """
    if not array:
        raise MetadataError("Empty")
    if array[0] != "[":
        raise MetadataError("No leading bracket")
    depth = 0
    result: list[str] = []
    current: list[str] = []
    for char in array[1:]:
        if char == "," and depth == 0:
            result.append("".join(current))
            current = []
        elif char == "[":
            depth += 1
            current.append(char)
        elif char == "]":
            if depth == 0:
                if current:
                    result.append("".join(current))
                current = []
            depth -= 1
            current.append(char)
        else:
            current.append(char)
    return result


def parse_class_problem_testcase(
    methods_name: str, methods_arguments: str
) -> list[tuple[str, str]]:
    """Pair each called method name with its argument list.

    Method names are converted to snake case, the constructor name is kept.
    """
    names = []
    for index, name in enumerate(split_array(methods_name)):
        if len(name) < 2:
            raise MetadataError("No quotes")
        stripped = name[1:-1]
        names.append(stripped if index == 0 else snake_case(stripped))
    arguments = split_array(methods_arguments)
    if len(names) != len(arguments):
        raise MetadataError("Methods and arguments amount mismatch")
    return list(zip(names, arguments))