# leetcrust

A command-line helper for solving coding problems in Rust. Given a problem
number, it looks up the problem, downloads its Rust starter code and writes a
solution file into a Rust crate in the working directory. Once you have solved
it, it copies the solution to the clipboard with the scaffolding stripped out.

The package also ships a collection of worked solutions, as plain Python
functions and classes, under `leetcrust.solutions`.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Usage

All paths are relative to the current directory, which is expected to be the
root of a Rust crate with a `src/solutions/` directory and a `resources/`
directory.

### Configuration

Settings are kept in a `.env` file, one `name=value` per line:

```
leetcrust config username <name>
leetcrust config cookie <cookie>
leetcrust config premium 0
leetcrust config allow-dead-code 1
```

`premium` and `allow-dead-code` accept only `0` or `1`; any other number is
rejected. `premium` says whether premium-only problems may be created.
`allow-dead-code` chooses how the generated file avoids dead-code warnings:
with `1` the module is declared under `#[allow(dead_code)]`; with `0`,
`#[cfg(test)]` is put in front of the `impl`, `struct` and helper `use` lines
of the starter code. When a setting is missing it counts as `0`.

### Creating a solution file

```
leetcrust create 1
```

(`c` is an alias of `create`.) The problem's slug is looked up in
`resources/slugs_and_ids.txt`, whose lines read `id,slug,premium`. If it is
not there, the full problem list is downloaded and that file is rewritten.
Premium-only problems are refused unless `premium` is set to `1`.

The Rust starter code is then downloaded and written to
`./src/solutions/s<id>_<slug>.rs` (dashes become underscores), preceded by a
`struct Solution;` line and, where the parameters need them, imports of
`crate::tree::TreeNode` and `crate::linked_list::ListNode`. The module is then
declared at the end of `./src/solutions/mod.rs`. An existing solution file is
never overwritten. Problems without Rust starter code are reported and skipped.

### Copying a solution

```
leetcrust clip 1
```

The solution file is read, the `#[cfg(test)]` attributes, the
`struct Solution;` line, the helper imports and the whole `mod tests { ... }`
block are removed (braces inside comments are ignored), and the result is put
on the clipboard. The slug must already be in the local slugs file. The
clipboard is reached through `tkinter`, so a display and a Tk installation are
needed.

### Fetch

```
leetcrust fetch slugs
```

(`f` is an alias of `fetch`.) Both `fetch slugs` and `fetch unimplemented`
only print that the command is not implemented yet.

Every command exits with status 0 on success and 1 when it stops on an error.

## What it does not do

- `create` writes the starter code only; it does not generate a test module
  from the problem's example test cases. `leetcrust.fetch.fetch_example_testcases`
  downloads those cases and `leetcrust.parse_api` can turn them into Rust
  expressions, but nothing assembles them into tests.
- The `cookie` and `username` settings are stored but not used by any request.
- The Rust crate itself, including the `tree` and `linked_list` helper modules
  the generated files import, is not provided.

## Library use

Parsing of problem metadata and test-case values:

```python
from leetcrust.parse_api import (
    DataType, ScalarType, parse_data_type, parse_class_problem_testcase,
    snake_case, split_array,
)

str(parse_data_type("list<list<long>>"))     # "Vec<Vec<i64>>"
snake_case("lengthOfLIS")                     # "length_of_lis"
split_array("[[1,2],[3]]")                    # ["[1,2]", "[3]"]
DataType(ScalarType.CHARACTER, 2).write_variable('[["5","3"],["6","."]]')
# "vec![vec!['5','3'],vec!['6','.']]"
parse_class_problem_testcase('["LRUCache","put"]', "[[2],[1,1]]")
# [("LRUCache", "[2]"), ("put", "[1,1]")]
```

`parse_metadata` turns a problem's JSON metadata into a `FunctionMetaData` or
`ClassMetaData`; malformed input raises `MetadataError`.

`leetcrust.linked_list` has a `ListNode` dataclass with `to_list` and
`from_list` to convert from and to Python lists.

The solutions are grouped by topic in `leetcrust.solutions.arrays`,
`strings`, `text`, `numbers`, `graphs` and `design`:

```python
from leetcrust.solutions.arrays import two_sum
from leetcrust.solutions.design import MinStack

two_sum([2, 7, 11, 15], 9)    # [1, 0]

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.get_min()               # -2
```