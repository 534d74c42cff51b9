"""
FunctionAction - An Action whose local effect is a plain callable.
"""

from .action import Action


class FunctionAction(Action):
    """
    Wraps a function so it can take part in an action tree without
    subclassing Action.

    Example:
        log = FunctionAction(lambda context: context.append('logged'))
        save = FunctionAction(lambda context: context.append('saved'), log)
        save.act([])
    """

    def __init__(self, func, *reactions):
        """
        Initialize a FunctionAction.

        Args:
            func: Callable invoked with the context as its only argument
            *reactions: Actions to trigger after func, in firing order

        Raises:
            TypeError: If func is not callable
        """
        if not callable(func):
            raise TypeError(f"{self.__class__.__name__} requires a callable, got {func!r}")
        self.func = func
        super().__init__(*reactions)

    def do_action(self, context=None):
        return self.func(context)

    def __repr__(self):
        name = getattr(self.func, '__name__', repr(self.func))
        count = len(self.get_reactions())
        return f"{self.__class__.__name__}({name}, reactions={count})"
