import pytest

from leetcrust.clip import handle_clip_command, remove_test_module, strip_solution
from leetcrust.create import apply_modifications
from leetcrust.parse_api import DataType, FunctionMetaData, Param, ScalarType
from leetcrust.read_write import AbortError

FILE_CONTENT = """fn greet() {
    println!("hello");
}

const XD = 4;

#[cfg(test)]
mod tests {
    use super::*;

    #[test]
    fn test_name() {
        assert!(true);
    }

    // this bracket -> } should be ignored
    /* this one too } */
    /* and
    this
    *one } */
}"""

EXPECTED = """fn greet() {
    println!("hello");
}

const XD = 4;

#[cfg(test)]
"""


def test_remove_test_module():
    assert remove_test_module(FILE_CONTENT) == EXPECTED


def test_remove_test_module_without_module():
    text = "fn main() {}\n"
    assert remove_test_module(text) == text


def test_remove_test_module_keeps_trailing_text():
    text = "a\nmod tests { fn x() { } }\nb"
    assert remove_test_module(text) == "a\n\nb"


def test_strip_solution_removes_scaffolding():
    content = (
        "use crate::tree::TreeNode;\nstruct Solution;\n\nimpl Solution {}\n\n"
        "#[cfg(test)]\nmod tests {\n    #[test]\n    fn t() {}\n}\n"
    )
    assert strip_solution(content) == "impl Solution {}"


def test_strip_solution_undoes_apply_modifications():
    code = "impl Solution {\n    pub fn f(root: Option<Rc<RefCell<TreeNode>>>) {}\n}"
    metadata = FunctionMetaData("f", [Param("root", DataType(ScalarType.TREE_NODE))])
    assert strip_solution(apply_modifications(code, metadata, False)) == code
    assert strip_solution(apply_modifications(code, metadata, True)) == code


def test_clip_without_slug_aborts(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(AbortError):
        handle_clip_command(7)


def test_clip_unsolved_problem_aborts(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "resources").mkdir()
    (tmp_path / "resources" / "slugs_and_ids.txt").write_text("7,reverse-integer,0")
    with pytest.raises(AbortError):
        handle_clip_command(7)
    assert "haven't solved it yet" in capsys.readouterr().out