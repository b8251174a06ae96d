from typing import Any, List, Sequence, Tuple

from apc_progress.utils.logging_utils import SEPARATOR, log_info, log_warning


SELECT_ALL_TOKENS = ("all", "*")


def parse_index_selection(user_input: str, option_count: int) -> List[int]:
    """
    Parse a multi-select answer into sorted, de-duplicated indices.

    Accepted forms (may be mixed)::

        0,2,5      single indices, comma or space separated
        3-6        inclusive range
        all / *    every option

    A blank answer selects nothing. Raises ``ValueError`` on anything that is
    not an integer or falls outside ``0 .. option_count - 1``.
    """
    text = user_input.strip().lower()
    if not text:
        return []
    if text in SELECT_ALL_TOKENS:
        return list(range(option_count))

    selected = set()
    for part in text.replace(",", " ").split():
        if "-" in part:
            start_text, end_text = part.split("-", 1)
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"range {part} is reversed")
            indices = range(start, end + 1)
        else:
            indices = [int(part)]
        for idx in indices:
            if not 0 <= idx < option_count:
                raise ValueError(f"{idx} is not between 0 and {option_count - 1}")
            selected.add(idx)
    return sorted(selected)


def prompt_multi_select(message: str, options: Sequence[Tuple[str, Any]]) -> List[Any]:
    """
    List ``(label, value)`` options and ask for a selection until the answer
    parses. Returns the chosen values in display order.
    """
    if not options:
        return []

    for i, (label, _) in enumerate(options):
        log_info(f"[{i}] {label}")
    log_info(SEPARATOR)

    while True:
        user_input = input(
            f"{message} (e.g. 0,2,4-6; 'all' for everything; blank for none):\n"
        )
        try:
            indices = parse_index_selection(user_input, len(options))
        except ValueError as exc:
            log_warning(f"Invalid selection: {exc}. Please try again.")
            continue
        return [options[i][1] for i in indices]
