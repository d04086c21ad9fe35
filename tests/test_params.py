import pytest

from LanzouPy.comments import strip_comments
from LanzouPy.errors import (
    DataBlockNotFound, FormBlockNotFound, MalformedInput, PatternNotFound
)
from LanzouPy.params import ParamExtractor

from pages import DOWNLOAD_PAGE, FORM_PAGE


@pytest.fixture
def extractor():
    return ParamExtractor()


def test_is_number():
    assert ParamExtractor.is_number("123")
    assert ParamExtractor.is_number("")
    assert not ParamExtractor.is_number("3.14")
    assert not ParamExtractor.is_number("-1")
    assert not ParamExtractor.is_number("1e5")


def test_json_block_with_indirect_var(extractor):
    html = "var x = 'hi';\n$.ajax({data : {'a':'1','b':x}});"
    assert extractor.from_json_block(html) == {"a": "1", "b": "hi"}


def test_json_block_value_kinds(extractor):
    html = "data : {'q':'quoted', 'n':42, 'e':'', 'missing':nowhere, 'f':3.14}"
    assert extractor.from_json_block(html) == {
        "q": "quoted",
        "n": "42",
        "e": "",
        "missing": "",
        "f": "",
    }


def test_download_page_after_stripping(extractor):
    params = extractor.from_json_block(strip_comments(DOWNLOAD_PAGE))
    assert params == {
        "action": "downprocess",
        "signs": "?ctdf",
        "sign": "VTdVaAs7BTRXXgs5AjAHalo2",
        "ves": "1",
        "websign": "",
        "websignkey": "bL23",
    }


def test_commented_var_wins_without_stripping(extractor):
    params = extractor.from_json_block(DOWNLOAD_PAGE)
    assert params["signs"] == "stale"


def test_json_block_missing(extractor):
    with pytest.raises(DataBlockNotFound):
        extractor.from_json_block(FORM_PAGE)


def test_form_block(extractor):
    assert extractor.from_form_block("data : 'k1=v1&k2=v2'") == {"k1": "v1", "k2": "v2"}


def test_form_block_from_page(extractor):
    assert extractor.from_form_block(FORM_PAGE) == {
        "action": "downprocess",
        "sign": "UDZRaQ08BTdXWQE7",
        "p": "",
    }


def test_form_value_keeps_extra_equals(extractor):
    assert extractor.form_to_map("k=a=b") == {"k": "a=b"}


def test_form_skips_empty_segments(extractor):
    assert extractor.form_to_map("k1=v1&&k2=v2&") == {"k1": "v1", "k2": "v2"}


def test_form_pair_without_equals(extractor):
    with pytest.raises(MalformedInput):
        extractor.from_form_block("data : 'k1=v1&broken'")


def test_form_block_missing(extractor):
    with pytest.raises(FormBlockNotFound):
        extractor.from_form_block("nothing here")


def test_extract_prefers_json_then_form(extractor):
    assert extractor.extract(strip_comments(DOWNLOAD_PAGE))["action"] == "downprocess"
    assert extractor.extract(FORM_PAGE)["sign"] == "UDZRaQ08BTdXWQE7"


def test_extract_nothing(extractor):
    with pytest.raises(PatternNotFound):
        extractor.extract("<html></html>")
