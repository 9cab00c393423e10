from __future__ import annotations

DEFAULT_MAX_LENGTH = 150
ELLIPSIS = "..."


def summarize_commit_message(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Cut ``text`` so the subject git records never exceeds ``max_length``.

    Longer messages keep their first ``max_length - 3`` characters and end in
    ``...``.
    """
    if max_length <= len(ELLIPSIS):
        raise ValueError(f"max_length must be greater than {len(ELLIPSIS)}")
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS
