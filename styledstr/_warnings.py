"""Warning category for styledstr."""


class StyledStrWarning(UserWarning):
    """Emitted for recoverable configuration problems, like an environment
    variable flag that can't be parsed. The default value is used instead.

    To silence these:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=StyledStrWarning)
    """
