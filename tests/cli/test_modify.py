import json

import pytest

from jsonc_cli.cli.commands import modify as modify_module


def test_modify_replaces_value(invoke):
    res = invoke(
        ["modify", "-p", "[0]", "-v", "123", "-n"], input_data=json.dumps(["hello"])
    )
    assert res.exit_code == 0
    assert res.stdout == json.dumps([123])


def test_modify_appends_newline_by_default(invoke):
    res = invoke(["modify", "-p", "[0]", "-v", "123"], input_data='["hello"]')
    assert res.exit_code == 0
    assert res.stdout == "[123]\n"


def test_modify_persists_rest_of_the_object(invoke):
    doc = json.dumps({"a": ["hello"], "b": ["please change me"]}, separators=(",", ":"))
    res = invoke(["modify", "-p", '["b", 0]', "-v", "123", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout == '{"a":["hello"],"b":[123]}'


def test_modify_long_options(invoke):
    res = invoke(
        ["modify", "--JSONPath", '["a"]', "--value", '"x"', "--no-newline"],
        input_data='{"a": 1}',
    )
    assert res.exit_code == 0
    assert res.stdout == '{"a": "x"}'


def test_modify_preserves_new_line(invoke):
    doc = json.dumps(["hello"], indent=2)
    res = invoke(["modify", "-p", "[0]", "-v", "123", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout == json.dumps([123], indent=2)


def test_modify_preserves_extra_new_lines(invoke):
    doc = json.dumps(["hello"], indent=2) + "\n\n"
    res = invoke(["modify", "-p", "[0]", "-v", "123", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout == json.dumps([123], indent=2) + "\n\n"


def test_modify_preserves_crlf(invoke):
    doc = '[\r\n  "hello"\r\n]\r\n'
    res = invoke(["modify", "-p", "[0]", "-v", "123", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout_bytes == b"[\r\n  123\r\n]\r\n"


def test_modify_keeps_comments(invoke):
    doc = '{\n  // keep me\n  "a": 1 /* and me */\n}'
    res = invoke(["modify", "-p", '["a"]', "-v", "2", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout == '{\n  // keep me\n  "a": 2 /* and me */\n}'


def test_modify_inserts_into_array(invoke):
    res = invoke(
        ["modify", "-p", "[0]", "-v", "123", "-n", "-i"],
        input_data=json.dumps(["hello"]),
    )
    assert res.exit_code == 0
    assert res.stdout == json.dumps([123, "hello"], separators=(",", ":"))


def test_modify_deletes_item_in_array(invoke):
    res = invoke(["modify", "-p", "[0]", "-n", "-d"], input_data=json.dumps(["hello"]))
    assert res.exit_code == 0
    assert res.stdout == "[]"


def test_modify_deletes_item_in_object(invoke):
    res = invoke(["modify", "-p", '["a"]', "-n", "-d"], input_data=json.dumps({"a": 1}))
    assert res.exit_code == 0
    assert res.stdout == "{}"


def test_modify_deleting_missing_property_is_noop(invoke):
    res = invoke(["modify", "-p", '["b"]', "-n", "-d"], input_data='{"a": 1}')
    assert res.exit_code == 0
    assert res.stdout == '{"a": 1}'


def test_modify_adds_property(invoke):
    res = invoke(["modify", "-p", '["b"]', "-v", "[1,2]", "-n"], input_data='{"a": 1}')
    assert res.exit_code == 0
    assert res.stdout == '{"a": 1,"b": [1,2]}'


def test_modify_creates_missing_parents(invoke):
    res = invoke(["modify", "-p", '["a", "b"]', "-v", "true", "-n"], input_data="{}")
    assert res.exit_code == 0
    assert res.stdout == '{"a": {"b":true}}'


def test_modify_null_value_is_not_a_delete(invoke):
    res = invoke(["modify", "-p", '["a"]', "-v", "null", "-n"], input_data='{"a": 1}')
    assert res.exit_code == 0
    assert res.stdout == '{"a": null}'


def test_modify_formats_injected_text_only(invoke):
    doc = '{"keep":   1,\n  "a": 1}'
    res = invoke(["modify", "-p", '["b"]', "-v", "2", "-t", "2", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout == '{"keep":   1,\n  "a": 1,\n  "b": 2\n}'


def test_modify_format_flag_reformats_whole_document(invoke):
    doc = '{"keep":   1,\n  "a": 1}'
    res = invoke(["modify", "-p", '["b"]', "-v", "2", "-m", "-n"], input_data=doc)
    assert res.exit_code == 0
    assert res.stdout == '{\n  "keep": 1,\n  "a": 1,\n  "b": 2\n}'


def test_modify_no_insert_spaces_uses_tabs(invoke):
    res = invoke(
        ["modify", "-p", '["b"]', "-v", "2", "-m", "--no-insert-spaces", "-n"],
        input_data='{"a": 1}',
    )
    assert res.exit_code == 0
    assert res.stdout == '{\n\t"a": 1,\n\t"b": 2\n}'


def test_modify_to_file(invoke, tmp_path):
    out = tmp_path / "out.json"
    res = invoke(
        ["modify", "-p", "[0]", "-v", "1", "-f", str(out)], input_data="[0]"
    )
    assert res.exit_code == 0
    assert res.stdout == ""
    assert out.read_text() == "[1]\n"


def test_modify_unwritable_file(invoke, tmp_path):
    out = tmp_path / "missing" / "out.json"
    res = invoke(["modify", "-p", "[0]", "-v", "1", "-f", str(out)], input_data="[0]")
    assert res.exit_code == 1
    assert "Could not open file" in res.output


def test_modify_property_on_scalar_errors(invoke):
    res = invoke(["modify", "-p", '["a"]', "-v", "1"], input_data="42")
    assert res.exit_code == 1
    assert "Can not add property to parent of type number" in res.output


def test_modify_delete_past_array_end_errors(invoke):
    res = invoke(["modify", "-p", "[5]", "-d"], input_data="[1, 2]")
    assert res.exit_code == 1
    assert "length is not sufficient" in res.output


def test_modify_delete_in_empty_document_errors(invoke):
    res = invoke(["modify", "-p", '["a"]', "-d"], input_data="")
    assert res.exit_code == 1
    assert "Can not delete in empty document" in res.output


def test_modify_requires_json_path(invoke):
    res = invoke(["modify", "-v", "1"], input_data="[0]")
    assert res.exit_code == 2
    assert "JSONPath" in res.output


def test_modify_invalid_json_path(invoke):
    res = invoke(["modify", "-p", "[true]", "-v", "1"], input_data="[0]")
    assert res.exit_code == 2
    assert "Invalid JSONPath" in res.output


def test_modify_invalid_value(invoke):
    res = invoke(["modify", "-p", "[0]", "-v", "{oops"], input_data="[0]")
    assert res.exit_code == 2
    assert "Invalid value, could not parse JSON" in res.output


def test_modify_invalid_eol(invoke):
    res = invoke(["modify", "-p", "[0]", "-v", "1", "--eol", "cr"], input_data="[0]")
    assert res.exit_code == 2


@pytest.fixture
def stdin_guard(monkeypatch):
    """Fail the test if a command reads stdin."""

    def _read_document():
        raise AssertionError("stdin was read")

    monkeypatch.setattr(modify_module, "read_document", _read_document)


def test_modify_requires_delete_or_value(invoke, stdin_guard):
    res = invoke(["modify", "-p", "[0]"], input_data="[0]")
    assert res.exit_code == 2
    assert "You must provide either --delete/-d or --value/-v" in res.output


def test_modify_rejects_delete_and_value_before_reading_stdin(invoke, stdin_guard):
    res = invoke(["modify", "-p", "[0]", "-d", "-v", "1"], input_data="[0]")
    assert res.exit_code == 2
    assert "You can't provide --delete/-d AND --value/-v" in res.output


def test_modify_integral_float_value(invoke):
    res = invoke(["modify", "-p", "[0]", "-v", "1e2", "-n"], input_data="[1]")
    assert res.exit_code == 0
    assert res.stdout == "[100]"


def test_modify_overflowing_value_becomes_null(invoke):
    res = invoke(["modify", "-p", "[0]", "-v", "1e400", "-n"], input_data="[1]")
    assert res.exit_code == 0
    assert res.stdout == "[null]"
