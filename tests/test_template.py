"""Tests for the Template object: lazy parsing, caching and errors."""

import threading

import pytest

import qwuri
from qwuri import (
    InvalidTemplateError,
    Literal,
    NoTemplateError,
    Template,
    expand,
)


def test_process_with_kwargs():
    t = Template("http://foo.com{/foo,bar}")
    assert t.process(foo="baz", bar="quux") == "http://foo.com/baz/quux"


def test_process_with_mapping_and_kwargs_override():
    t = Template("{?x,y}")
    assert t.process({"x": "1", "y": "2"}, y="768") == "?x=1&y=768"


def test_process_is_idempotent():
    t = Template("{/list*}{?x}")
    vars = {"list": ["a", "b"], "x": "1"}
    first = t.process(vars)
    assert t.process(vars) == first == "/a/b?x=1"
    assert vars == {"list": ["a", "b"], "x": "1"}


def test_no_template_raises():
    t = Template()
    with pytest.raises(NoTemplateError):
        t.parts()
    with pytest.raises(NoTemplateError):
        t.process(x="1")


def test_template_set_after_construction():
    t = Template()
    t.template = "{x:3}"
    assert t.process(x="hello") == "hel"


def test_reassigning_template_reparses():
    t = Template("{x}")
    assert t.process(x="a") == "a"
    t.template = "{?x}"
    assert t.process(x="a") == "?x=a"


def test_invalid_template_raises_without_caching():
    t = Template("{unterminated")
    with pytest.raises(InvalidTemplateError):
        t.process()
    with pytest.raises(InvalidTemplateError):
        t.parts()


def test_parts_cached():
    t = Template("a{b}c")
    parts = t.parts()
    assert t.parts() is parts
    assert parts[0] == Literal("a")


def test_concurrent_first_use_parses_once(monkeypatch):
    calls = []
    original = qwuri.template.parse

    def counting_parse(text):
        calls.append(text)
        return original(text)

    monkeypatch.setattr(qwuri.template, "parse", counting_parse)

    t = Template("{/a,b}{?c}")
    results = []
    threads = [
        threading.Thread(target=lambda: results.append(t.process(a="1", b="2", c="3")))
        for _ in range(8)
    ]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert len(calls) == 1
    assert results == ["/1/2?c=3"] * 8


def test_variable_names():
    t = Template("{+base}/users{/id}{?fields,id}")
    assert t.variable_names() == ["base", "id", "fields"]


def test_expand_helper():
    assert expand("https://api.github.com{/end}", {"end": "users"}) == (
        "https://api.github.com/users"
    )
    assert expand("https://api.github.com{/end}", end="gists") == (
        "https://api.github.com/gists"
    )


def test_variables_named_like_parameters():
    """Any variable name can be passed as a keyword argument."""
    assert Template("{vars}").process(vars="a") == "a"
    assert Template("{self}").process(self="a") == "a"
    assert Template("{?template,vars}").process({"vars": "1"}, template="t") == (
        "?template=t&vars=1"
    )
    assert expand("{template}{/vars}", template="t", vars="v") == "t/v"


def test_repr():
    assert repr(Template("{x}")) == "Template('{x}')"
