"""Tests for the typelower command line."""

import json

import pytest

from typelower import cli

DOCUMENT = {
    "types": {
        "user": {
            "type": "object",
            "required": ["id"],
            "properties": {
                "id": {"type": "integer"},
                "friends": {"type": "array", "items": {"ref": "user"}},
            },
        }
    }
}


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "types.json"
    path.write_text(json.dumps(DOCUMENT))
    return path


class TestMain:
    def test_writes_output_file(self, document_file, tmp_path) -> None:
        output = tmp_path / "types.go"
        assert cli.main([str(document_file), "-o", str(output)]) == 0
        assert output.read_text() == (
            "type User struct {\n"
            '\tFriends []*User `json:"friends,omitempty"`\n'
            '\tId int `json:"id"`\n'
            "}\n"
        )

    def test_no_pointers(self, document_file, tmp_path) -> None:
        output = tmp_path / "types.go"
        assert cli.main([str(document_file), "--no-pointers", "-o", str(output)]) == 0
        assert "[]User" in output.read_text()

    def test_plain_stdout(self, document_file, capsys) -> None:
        assert cli.main([str(document_file), "--plain"]) == 0
        assert "type User struct" in capsys.readouterr().out

    def test_missing_input(self) -> None:
        assert cli.main([]) == 1

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        assert cli.main([str(path)]) == 1

    def test_invalid_document(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"types": {"a": {"ref": "nowhere"}}}))
        assert cli.main([str(path)]) == 1

    def test_list_reserved(self, capsys) -> None:
        assert cli.main(["--list-reserved"]) == 0
        assert "fallthrough" in capsys.readouterr().out

    def test_non_list_required(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"types": {"a": {"type": "object", "required": 5}}}))
        assert cli.main([str(path)]) == 1

    def test_invalid_config_value(self, document_file, tmp_path) -> None:
        config = tmp_path / "lowering.json"
        config.write_text(json.dumps({"field_indent": 4}))
        assert cli.main([str(document_file), "-c", str(config)]) == 1

    def test_save_config_only(self, tmp_path) -> None:
        saved = tmp_path / "saved.json"
        assert cli.main(["--no-pointers", "--tag-key", "yaml", "--save-config", str(saved)]) == 0
        data = json.loads(saved.read_text())
        assert data["named_type_pointers"] is False
        assert data["tag_key"] == "yaml"

    def test_save_config_then_generate(self, document_file, tmp_path) -> None:
        saved = tmp_path / "saved.json"
        output = tmp_path / "types.go"
        args = [str(document_file), "--no-pointers", "--save-config", str(saved), "-o", str(output)]
        assert cli.main(args) == 0
        assert "[]User" in output.read_text()
        assert cli.main([str(document_file), "-c", str(saved), "-o", str(output)]) == 0
        assert "[]User" in output.read_text()
