import pytest
from minspan.util.validation.check import check_choice

# ----------------------------------------------------------------------------
# test check_choice
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("value, allowed, kwargs, expected", [
    ("chars", ["chars", "words"], {}, "chars"),
    ("words", ("chars", "words"), {}, "words"),
    ("words", {"chars": list, "words": str.split}, {}, "words"),
    (2, range(5), {}, 2),
    (None, ["chars"], {"allow_none": True}, None),
])
def test_check_choice_success(value, allowed, kwargs, expected):
    """Tests values that are among the allowed options."""
    result = check_choice(value, allowed, **kwargs)
    assert result == expected

@pytest.mark.parametrize("value, allowed, kwargs, match", [
    # Nullability errors
    (None, ["chars"], {}, "cannot be None"),
    (None, ["chars"], {"param_name": "tokens"}, "tokens cannot be None"),
    # Not an option
    ("lines", ["chars", "words"], {}, "must be one of: 'chars', 'words'"),
    ("Chars", ["chars", "words"], {"param_name": "tokens"},
     "Could not process parameter 'tokens' with value 'Chars'"),
    (7, range(5), {}, "must be one of"),
])
def test_check_choice_failures(value, allowed, kwargs, match):
    """Tests that check_choice correctly raises errors for invalid inputs."""
    with pytest.raises(ValueError, match=match):
        check_choice(value, allowed, **kwargs)
