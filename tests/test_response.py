import pytest

from gfastkit.response import (
    ERROR_CODE,
    SUCCESS_CODE,
    Redirect,
    Response,
    ResponseExit,
    fail_json,
    json_exit,
    redirect,
    rjson,
    sub_str,
    success_json,
    write_tpl,
)


def test_to_dict_uses_wire_names():
    body = Response(code=5, msg="hello", data=[1, 2]).to_dict()
    assert body == {"code": 5, "data": [1, 2], "message": "hello"}


def test_rjson_without_data():
    res = rjson(7, "ok")
    assert res.data is None
    assert res.code == 7
    assert res.msg == "ok"


def test_rjson_takes_first_data_only():
    res = rjson(1, "m", {"a": 1}, {"b": 2})
    assert res.data == {"a": 1}


def test_json_exit_raises_with_response():
    with pytest.raises(ResponseExit) as info:
        json_exit(3, "stop", "payload")
    assert info.value.response.to_dict() == {"code": 3, "data": "payload", "message": "stop"}


def test_success_json_returns_success_code():
    res = success_json(False, "done", 42)
    assert res.code == SUCCESS_CODE == 0
    assert res.data == 42


def test_success_json_exit():
    with pytest.raises(ResponseExit) as info:
        success_json(True, "done")
    assert info.value.response.code == SUCCESS_CODE


def test_fail_json_returns_error_code():
    res = fail_json(False, "bad")
    assert res.code == ERROR_CODE == -1
    assert res.msg == "bad"


def test_fail_json_exit():
    with pytest.raises(ResponseExit) as info:
        fail_json(True, "bad", {"x": 1})
    assert info.value.response.code == ERROR_CODE
    assert info.value.response.data == {"x": 1}


def test_sub_str_short_text_unchanged():
    assert sub_str("abc", 3) == "abc"
    assert sub_str(None, 2) == ""


def test_sub_str_cuts_by_characters():
    text = "云南奇讯科技"
    out = sub_str(text, 2)
    assert out.endswith("...")
    assert out.removesuffix("...") == text[:2]


def test_sub_str_converts_values():
    assert sub_str(123456, 10) == "123456"


def test_write_tpl_merges_params_and_binds_substr():
    out = write_tpl(
        "{{ name }}:{{ subStr(title, 3) }}",
        {"name": "first", "title": "abcdef"},
        {"name": "second"},
    )
    assert out == "second:abc..."


def test_write_tpl_filter_form():
    assert write_tpl("{{ t | subStr(10) }}", {"t": "short"}) == "short"


def test_redirect_default_and_custom():
    assert redirect("/login") == Redirect("/login", 302)
    assert redirect("/x", 301).code == 301