import random

import pytest

from nslib.nstring import String


def _sign(value):
    return (value > 0) - (value < 0)


def test_default_is_empty():
    s = String()
    assert s.is_empty()
    assert len(s) == 0
    assert str(s) == ""


def test_construct_from_str_and_string():
    text = "hello world"
    a = String(text)
    b = String(a)
    assert str(a) == text
    assert b == a
    assert len(b) == len(text)


def test_copy_is_independent():
    a = String("abc")
    b = String(a)
    b.append("def")
    assert str(a) == "abc"
    assert str(b) == "abc" + "def"


def test_contains():
    s = String("the quick fox")
    assert s.contains("quick")
    assert s.contains(String("fox"))
    assert not s.contains("slow")


@pytest.mark.parametrize(
    "left,right,expected_sign",
    [
        ("abc", "abd", -1),
        ("abd", "abc", 1),
        ("abc", "abc", 0),
        ("ab", "abc", -1),
    ],
)
def test_compare_with(left, right, expected_sign):
    assert _sign(String(left).compare_with(right)) == expected_sign
    assert _sign(String(left).compare_with(String(right))) == expected_sign


def test_compare_n_with():
    s = String("abcdef")
    assert s.compare_n_with("abcxyz", 3) == 0
    assert s.compare_n_with("abcxyz", 4) < 0
    assert s.is_n_equal_with("abcQQQ", 3)
    assert not s.is_n_equal_with("abcQQQ", 4)


def test_compare_n_negative_raises():
    with pytest.raises(ValueError):
        String("a").compare_n_with("a", -1)


def test_is_equal_with():
    assert String("same").is_equal_with("same")
    assert not String("same").is_equal_with("other")


def test_replace():
    s = String("old")
    s.replace(String("new text"))
    assert str(s) == "new text"
    assert len(s) == len("new text")


def test_append_and_iadd():
    s = String("foo")
    s.append("bar")
    s += String("baz")
    assert str(s) == "foo" + "bar" + "baz"


def test_swap():
    a, b = String("first"), String("second")
    a.swap(b)
    assert str(a) == "second"
    assert str(b) == "first"


def test_swap_requires_string():
    with pytest.raises(TypeError):
        String("x").swap("y")


def test_shuffle_is_permutation():
    text = "permutation"
    s = String(text)
    s.shuffle(random.Random(7))
    assert sorted(str(s)) == sorted(text)
    assert len(s) == len(text)


def test_erase_middle():
    s = String("hello")
    s.erase(1)
    assert str(s) == "hllo"


def test_erase_past_end_is_noop():
    s = String("abc")
    s.erase(3)
    assert str(s) == "abc"


def test_erase_negative_raises():
    with pytest.raises(IndexError):
        String("abc").erase(-1)


def test_access():
    s = String("xyz")
    assert s.first() == "x"
    assert s.last() == "z"
    assert s.at(1) == "y"
    assert s[2] == "z"
    assert s[0:2] == String("xy")


def test_access_errors_on_empty():
    s = String()
    with pytest.raises(IndexError):
        s.first()
    with pytest.raises(IndexError):
        s.last()
    with pytest.raises(IndexError):
        s.at(0)


def test_clear():
    s = String("data")
    s.clear()
    assert s.is_empty()
    assert s == ""


def test_add_returns_new():
    a = String("left")
    result = a + "right"
    assert str(result) == "left" + "right"
    assert str(a) == "left"
    assert str("pre" + a) == "pre" + "left"


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_mul(count):
    text = "ab"
    assert str(String(text) * count) == text * count


def test_mul_zero_keeps_one_copy():
    assert str(String("ab") * 0) == "ab"


def test_mul_negative_raises():
    with pytest.raises(ValueError):
        String("ab") * -1


def test_imul():
    s = String("na")
    s *= 4
    assert str(s) == "na" * 4


def test_ordering():
    assert String("apple") < String("banana")
    assert String("banana") > "apple"
    assert String("a") <= String("a")
    assert String("b") >= "a"
    assert String("a") != String("b")


def test_hash_usable_as_key():
    table = {String("key"): 1}
    assert table[String("key")] == 1
    assert hash(String("key")) == hash(String("key"))