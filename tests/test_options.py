from urllib.parse import unquote

import pytest

from default_opener.options import OpenOptions, coerce_options, encode_uri


def test_coerce_options_defaults() -> None:
    options = coerce_options(None)

    assert options == OpenOptions(wait=False, background=False, app=None, url=False)


def test_coerce_options_merges_mapping_over_defaults() -> None:
    options = coerce_options({"wait": True, "app": "firefox"})

    assert options.wait is True
    assert options.background is False
    assert options.app == "firefox"


def test_coerce_options_rejects_unknown_keys() -> None:
    with pytest.raises(TypeError, match="bogus"):
        coerce_options({"bogus": True})


def test_app_sequence_splits_program_and_arguments() -> None:
    options = OpenOptions(app=["google-chrome", "--incognito", "--new-window"])

    assert options.app_program == "google-chrome"
    assert options.app_arguments == ["--incognito", "--new-window"]


def test_app_string_has_no_arguments() -> None:
    options = OpenOptions(app="firefox")

    assert options.app_program == "firefox"
    assert options.app_arguments == []


def test_empty_app_means_no_app() -> None:
    assert OpenOptions(app=[]).app_program is None
    assert OpenOptions(app="").app_program is None


def test_encode_uri_keeps_reserved_characters() -> None:
    url = "https://example.com/a/b?x=1&y=2#frag"

    assert encode_uri(url) == url


def test_encode_uri_escapes_spaces_quotes_and_unicode() -> None:
    assert encode_uri('https://example.com/a b"c') == "https://example.com/a%20b%22c"
    assert encode_uri("/tmp/café") == "/tmp/caf%C3%A9"
    assert encode_uri("100%") == "100%25"


def test_encode_uri_is_reversible() -> None:
    target = 'C:\\Users\\me\\My "Docs"\\résumé & notes.txt'

    assert unquote(encode_uri(target)) == target
