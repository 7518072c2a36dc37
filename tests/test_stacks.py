import pytest

from dsakit.stacks import (
    ArrayStack,
    LinkedStack,
    StackEmptyError,
    StackFullError,
    copy_stack,
    evaluate_postfix,
    evaluate_prefix,
    insert_at,
    insert_at_bottom,
    is_balanced,
    next_greater,
    remove_at,
    remove_bottom,
    reverse_stack,
    stock_span,
)


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_bounded_stack_scenario(cls):
    st = cls(5)
    for v in (1, 2, 3):
        st.push(v)
    assert st.top() == 3
    st.push(4)
    st.push(5)
    assert st.top() == 5
    assert st.is_full()
    with pytest.raises(StackFullError):
        st.push(8)
    assert st.pop() == 5
    assert st.pop() == 4
    assert st.top() == 3
    assert len(st) == 3
    assert not st.is_full()


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_empty_stack_errors(cls):
    st = cls(2)
    with pytest.raises(StackEmptyError):
        st.pop()
    with pytest.raises(StackEmptyError):
        st.top()
    assert len(st) == 0


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_lifo_order(cls):
    st = cls(4)
    for v in [7, 8, 9]:
        st.push(v)
    assert [st.pop() for _ in range(3)] == [9, 8, 7]


def test_balanced_source_example():
    assert is_balanced("[[{(()()[]))]]") is False


@pytest.mark.parametrize("text", ["", "()", "[{()}]", "(){}[]"])
def test_balanced_true(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "a", "([)]"])
def test_balanced_false(text):
    assert is_balanced(text) is False


def test_copy_stack_preserves_order_and_is_new():
    original = [1, 2, 3, 4]
    result = copy_stack(original)
    assert result == [1, 2, 3, 4]
    result.append(5)
    assert original == [1, 2, 3, 4]


def test_postfix_source_example():
    assert evaluate_postfix("231*+9-") == -4


def test_prefix_agrees_with_postfix():
    assert evaluate_prefix("-9+*132") == evaluate_postfix("913*2+-")


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == evaluate_postfix("03-")
    assert evaluate_prefix("/72") == 3


def test_power():
    assert evaluate_postfix("23^") == 8


def test_malformed_expressions():
    with pytest.raises(ValueError):
        evaluate_postfix("1+")
    with pytest.raises(ValueError):
        evaluate_postfix("12")
    with pytest.raises(ValueError):
        evaluate_postfix("12%")
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("10/")


def test_insert_at_bottom():
    assert insert_at_bottom([1, 2, 3, 4], 100) == [100, 1, 2, 3, 4]


def test_insert_at_index():
    assert insert_at([1, 2, 3, 4], 100, 1) == [1, 100, 2, 3, 4]
    assert insert_at([1, 2], 9, 2) == [1, 2, 9]
    with pytest.raises(IndexError):
        insert_at([1, 2], 9, 3)


def test_remove_at_index():
    assert remove_at([1, 2, 3, 4], 3) == [1, 2, 3]
    assert remove_at([1, 2, 3, 4], 0) == [2, 3, 4]
    with pytest.raises(IndexError):
        remove_at([1, 2], 2)


def test_remove_bottom():
    assert remove_bottom([1, 2, 3, 4]) == [2, 3, 4]
    with pytest.raises(StackEmptyError):
        remove_bottom([])


def test_reverse_stack_round_trip():
    stack = [1, 2, 3, 4]
    assert reverse_stack(stack) == [4, 3, 2, 1]
    assert reverse_stack(reverse_stack(stack)) == stack


def test_next_greater_example():
    assert next_greater([4, 5, 2, 25]) == [5, 25, 25, -1]


def test_next_greater_invariant():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    for i, found in enumerate(next_greater(values)):
        later = [v for v in values[i + 1 :] if v > values[i]]
        assert found == (later[0] if later else -1)


def test_next_greater_decreasing():
    assert next_greater([5, 4, 3]) == [-1, -1, -1]


def test_stock_span_example():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_invariants():
    prices = [3, 1, 4, 1, 5, 9, 2, 6]
    spans = stock_span(prices)
    for i, span in enumerate(spans):
        assert all(p <= prices[i] for p in prices[i - span + 1 : i + 1])
        if i - span >= 0:
            assert prices[i - span] > prices[i]


def test_stock_span_increasing():
    assert stock_span([1, 2, 3]) == [1, 2, 3]