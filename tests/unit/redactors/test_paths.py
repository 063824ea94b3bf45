from trace_redaction.redactors.paths import WILDCARD_SEGMENT, compile_path
from trace_redaction.redactors.types import PathSegment


def lit(key: str) -> PathSegment:
    return PathSegment(kind="literal", key=key)


def test_compile_literal_path():
    assert compile_path("attributes.password") == (lit("attributes"), lit("password"))

def test_compile_single_segment():
    assert compile_path("password") == (lit("password"),)

def test_compile_wildcards():
    segments = compile_path("attributes.*.password")
    assert segments == (lit("attributes"), WILDCARD_SEGMENT, lit("password"))
    assert segments[1].is_wildcard
    assert not segments[0].is_wildcard

def test_array_suffix_compiles_to_literal():
    assert compile_path("entries[].data.password") == compile_path("entries.data.password")

def test_bare_array_marker_contributes_nothing():
    assert compile_path("entries.[].data") == (lit("entries"), lit("data"))
    assert compile_path("[]") == ()

def test_only_first_array_suffix_is_stripped():
    assert compile_path("m[][]") == (lit("m[]"),)
    assert compile_path("a.m[][].b") == (lit("a"), lit("m[]"), lit("b"))

def test_wildcard_token_must_be_exact():
    assert compile_path("a.*b") == (lit("a"), lit("*b"))

def test_empty_tokens_become_empty_literals():
    assert compile_path("a..b") == (lit("a"), lit(""), lit("b"))
    assert compile_path("") == (lit(""),)
    assert compile_path("a.") == (lit("a"), lit(""))
