import re

from Mai.narrative.location import BREADCRUMB_SEPARATOR

_MARKER_SUFFIX = re.compile(r"\.(typed|used)\Z")


def format_step(step_name: str) -> str:
    """Turn a raw step id like 'Accounts:Overview.typed' into 'Accounts › Overview'."""
    clean = _MARKER_SUFFIX.sub("", step_name)
    return BREADCRUMB_SEPARATOR.join(clean.split(":"))
