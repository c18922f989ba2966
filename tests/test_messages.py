import pytest
from vouch import expect, AssertionFailure, UsageError, VouchError, settings

def test_custom_message_prefixes_rendered_message():
    with pytest.raises(AssertionFailure) as exc:
        expect(1, "answer").to.equal(2)
    assert exc.value.message == "answer: expected 1 to equal 2"
    assert str(exc.value) == "answer: expected 1 to equal 2"

def test_negated_template_is_used_when_negated():
    with pytest.raises(AssertionFailure) as exc:
        expect(1).to.not_.equal(1)
    assert exc.value.message == "expected 1 to not equal 1"

def test_actual_defaults_to_subject_and_expected_to_none():
    with pytest.raises(AssertionFailure) as exc:
        expect(0).to.be.ok
    assert exc.value.actual == 0
    assert exc.value.expected is None
    assert exc.value.show_diff is False

def test_error_kinds_are_distinct():
    assert issubclass(AssertionFailure, AssertionError)
    assert issubclass(AssertionFailure, VouchError)
    assert issubclass(UsageError, VouchError)
    assert not issubclass(UsageError, AssertionError)

def test_anchor_points_at_expect_call_site():
    with pytest.raises(AssertionFailure) as exc:
        expect(1).to.equal(2)
    anchor = exc.value.stack_anchor
    assert anchor.function == "test_anchor_points_at_expect_call_site"
    assert anchor.filename.endswith("test_messages.py")
    assert exc.value.stack is None

def test_include_stack_anchors_at_the_predicate():
    settings.data.include_stack = True
    with pytest.raises(AssertionFailure) as exc:
        expect(1).to.equal(2)
    err = exc.value
    assert err.stack_anchor.function == "equal"
    assert "test_include_stack_anchors_at_the_predicate" in err.stack
    assert str(err).startswith("expected 1 to equal 2\n")

def test_long_lists_are_summarised():
    with pytest.raises(AssertionFailure) as exc:
        expect(list(range(50))).to.be.empty
    assert exc.value.message == "expected [ list(50) ] to be empty"

def test_long_mappings_are_summarised():
    data = {f"key{i}": i for i in range(10)}
    with pytest.raises(AssertionFailure) as exc:
        expect(data).to.be.empty
    assert exc.value.message == "expected { dict (key0, key1, ...) } to be empty"

def test_truncation_threshold_is_configurable():
    settings.data.truncate_threshold = 1000
    with pytest.raises(AssertionFailure) as exc:
        expect(list(range(15))).to.be.empty
    assert exc.value.message == f"expected {list(range(15))} to be empty"

def test_placeholders_render_expected_and_actual():
    with pytest.raises(AssertionFailure) as exc:
        expect({"name": "tea"}).to.have.property("name", "coffee")
    assert "of 'coffee', but got 'tea'" in exc.value.message
