import re
import pytest
from vouch import expect, ChainHandle, AssertionFailure

class Tea:
    pass

def test_language_chains_return_the_same_assertion():
    a = expect(1)
    assert a.to is a
    assert a.be is a
    assert a.is_ is a
    assert a.and_ is a
    assert a.have is a
    assert a.with_ is a
    assert a.flags.all().keys() == {"object", "message", "ssfi"}

def test_long_chains_have_no_effect():
    expect("x").to.be.is_.and_.have.with_.to.be.ok

def test_been_sets_past_tense():
    a = expect(1).to.have.been
    assert a.flags.get("tense") == "past"

def test_not_inverts_outcome():
    expect(0).to.not_.be.ok
    with pytest.raises(AssertionFailure):
        expect(1).to.not_.be.ok

def test_repeated_not_equals_single_not():
    for value in (0, 1, "", "x", None, [], [0]):
        single_passes = _passes(lambda: expect(value).not_.ok)
        double_passes = _passes(lambda: expect(value).not_.not_.ok)
        assert single_passes == double_passes
        assert single_passes == (not value)

def _passes(fn):
    try:
        fn()
    except AssertionFailure:
        return False
    return True

def test_not_applies_to_every_later_predicate_in_the_chain():
    expect(5).to.not_.be.above(10).and_.below(1)
    with pytest.raises(AssertionFailure):
        expect(5).to.not_.be.above(10).and_.below(6)

def test_not_does_not_leak_into_a_fresh_chain():
    expect(0).to.not_.be.ok
    with pytest.raises(AssertionFailure):
        expect(0).to.be.ok

@pytest.mark.parametrize("value, name", [
    ("tea", "string"),
    ("tea", "str"),
    (3, "number"),
    (2.5, "float"),
    (True, "boolean"),
    (None, "null"),
    ([], "array"),
    ({}, "object"),
    ((1, 2), "arguments"),
    (re.compile("x"), "regexp"),
    (len, "function"),
    (ValueError("x"), "error"),
    ({1}, "set"),
    (Tea(), "tea"),
    (Tea(), "Tea"),
])
def test_a_compares_type_tags(value, name):
    expect(value).to.be.a(name)

def test_bool_is_not_a_number():
    expect(True).to.not_.be.a("number")

def test_a_failure_reports_tags():
    with pytest.raises(AssertionFailure) as exc:
        expect(5).to.be.a("string")
    assert exc.value.message == "expected 5 to be a string"
    assert exc.value.expected == "String"
    assert exc.value.actual == "Number"

def test_negated_a_failure_message():
    with pytest.raises(AssertionFailure) as exc:
        expect("tea").to.not_.be.an("str")
    assert exc.value.message == "expected 'tea' not to be a str"

def test_a_and_an_read_as_plain_chain_words():
    handle = expect(Tea()).to.be.an
    assert isinstance(handle, ChainHandle)
    handle.instance_of(Tea)
    expect(Tea()).to.be.a.instance_of(Tea)

def test_include_checks_membership():
    expect([1, 2, 3]).to.include(2)
    expect("foobar").to.contain("oob")
    expect({"a": 1}).to.include("a")
    expect([1, 2]).to.not_.include(3)

def test_include_failure_message():
    with pytest.raises(AssertionFailure) as exc:
        expect([1, 2]).to.include(3)
    assert exc.value.message == "expected [1, 2] to include 3"

def test_contain_as_chain_word_sets_contains_flag():
    a = expect({"a": 1})
    a.to.contain
    assert a.flags.get("contains") is True
