"""Helpers turning raw include paths into catalog lookup keys."""

# Characters treated as path separators inside an include path.
_SEPARATORS = ("\\", "/")
_JOINER = "_"


def normalize_include(include_path: str) -> str:
    """Fold an include path into a single catalog candidate name.

    Path separators are replaced with ``_`` so the directory prefix becomes
    part of the name, then everything from the first ``.`` on is dropped
    (``pico/stdlib.h.in`` gives ``pico_stdlib``). A path without a dot is
    kept whole.

    Args:
        include_path: Raw text between the include delimiters.

    Returns:
        str: Candidate name, possibly unknown to the catalog.

    Examples:
        >>> normalize_include("hardware/adc.h")
        'hardware_adc'
        >>> normalize_include("pico/stdlib.h")
        'pico_stdlib'
    """
    folded = include_path.strip()
    for sep in _SEPARATORS:
        folded = folded.replace(sep, _JOINER)
    stem, _sep, _ext = folded.partition(".")
    return stem
