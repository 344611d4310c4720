"""Root of the anchor exception hierarchy."""


class AnchorError(Exception):
    """Base for every error raised by anchor.

    Callers (CLI, pytest plugin) catch this single type to separate tool
    failures (bad configuration, unparsable sources, violated rules) from
    programming errors.
    """
