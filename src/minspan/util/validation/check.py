from typing import Any, Iterable, Optional

def check_choice(
    value: Any,
    allowed: Iterable[Any],
    param_name: Optional[str] = None,
    allow_none: bool = False,
) -> Any:
    """
    Validate that a value is one of a fixed set of options.

    Parameters
    ----------
    value : Any
        The value to validate.
    allowed : Iterable
        The permitted values. Membership is tested with ``==``.
    param_name : str, optional
        The name of the parameter being checked, used for clearer error messages.
    allow_none : bool, default: False
        If True, a `value` of None is permissible and will be returned as None.

    Returns
    -------
    Any
        `value`, unchanged, or None if the input was None and `allow_none`
        was True.

    Raises
    ------
    ValueError
        If the value is None (and not `allow_none`) or is not one of `allowed`.
    """

    if value is None:
        if allow_none:
            return None
        else:
            raise ValueError(f'{param_name} cannot be None')

    allowed = list(allowed)

    try:
        if not any(value == a for a in allowed):
            options = ", ".join(repr(a) for a in allowed)
            raise ValueError(f"Value must be one of: {options}.")

    except ValueError as e:
        raise ValueError(
            f"Could not process parameter '{param_name}' with value '{value}'.\n"
            f"Reason: {e}"
        ) from e

    return value
