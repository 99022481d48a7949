import json

from typo2wp.utils.errors import AmbiguousMatchError, MigrationError, report_error, report_ok


def test_report_ok_writes_jsonl_when_directory_given(tmp_path):
    item = {"kind": "article", "id": 10, "slug": "hello", "title": "Hello"}
    report_ok("POST_INSERTED", item, {"post_id": 3}, report_dir=str(tmp_path))

    (line,) = (tmp_path / "success.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(line) == {
        "code": "POST_INSERTED",
        "message": "Post inserted",
        "kind": "article",
        "source_id": 10,
        "slug": "hello",
        "title": "Hello",
        "post_id": 3,
    }


def test_report_error_without_directory_only_prints(tmp_path, capsys):
    entry = report_error("RELATIONSHIP_UNMAPPED", {"kind": "article", "slug": "hello"})

    assert entry["message"] == "Link references a term that was not migrated"
    assert "[ERROR]" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_unknown_code_falls_back_to_code(tmp_path):
    report_error("SOMETHING_ELSE", {}, ValueError("boom"), report_dir=str(tmp_path))
    (line,) = (tmp_path / "errors.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(line)["message"] == "SOMETHING_ELSE"
    assert json.loads(line)["error"] == "boom"


def test_ambiguous_match_error_lists_ids():
    error = AmbiguousMatchError("page", [4, 9])
    assert isinstance(error, MigrationError)
    assert str(error) == "Found more than 1 page with the same name\nIds: 4, 9"
