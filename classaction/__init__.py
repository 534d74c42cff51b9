"""
ClassAction - Composable actions that trigger reactions

An action performs a local effect and then passes the same context on to its
reactions, which are themselves actions. This replaces plain methods with
objects that can be extended, rewired or stripped down after the fact:
- do_action holds the local effect
- reactions (per instance) and class_reactions (per class) hold what follows
- act runs the effect and then every reaction, depth-first

Example:
    from classaction import Action

    class Increment(Action):
        def do_action(self, context):
            context['count'] += 1

    root = Increment(Increment(), Increment())
    context = {'count': 0}
    root.act(context)
    print(context['count'])  # 3
"""

__version__ = "1.0.0"
__author__ = "ClassAction Contributors"

from .action import Action
from .function import FunctionAction

__all__ = [
    'Action',
    'FunctionAction',
]
