import pytest

from dsakit.palindrome import is_palindrome


@pytest.mark.parametrize(
    "text",
    ["racecar", "A man, a plan, a canal: Panama", "No 'x' in Nixon", "12321", "", "!!", "a"],
)
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["hello", "ab", "12 3", "palindrome"])
def test_non_palindromes(text):
    assert is_palindrome(text) is False


def test_reversed_text_has_same_answer():
    for text in ["Step on no pets", "Was it a car?", "abcd"]:
        assert is_palindrome(text) == is_palindrome(text[::-1])