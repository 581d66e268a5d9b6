"""Selection of functions whose logs get forwarded."""

from collections.abc import Iterable


def enumerate_targets(
    function_names: Iterable[str], destination_function_name: str | None = None
) -> list[str]:
    """
    Return the functions to subscribe, in catalog order.

    The destination function is left out so it never consumes its own logs.
    An external ARN cannot loop, so nothing is removed in that case.
    """
    if not destination_function_name:
        return list(function_names)
    return [name for name in function_names if name != destination_function_name]
