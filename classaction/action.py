"""
Action - An object that performs a local effect and triggers its reactions.
"""

import logging

logger = logging.getLogger(__name__)


class Action:
    """
    An object which can produce an effect and then trigger all its reactions
    to produce theirs. Reactions are also actions, so operations compose to
    any depth.

    Reactions come from two places:
    - class_reactions: declared on the class body, shared by every instance
      of that exact class
    - reactions: the instance's own list, created the first time a reaction
      is given to the instance

    A subclass may also declare default_reactions, a template every new
    instance copies into its own list.

    Example:
        class Greet(Action):
            def do_action(self, context):
                print(f"Hello, {context['name']}!")

        greet = Greet(Greet())
        greet.act({'name': 'Alice'})  # prints twice
    """

    class_reactions = None
    default_reactions = None
    reactions = None

    def __init__(self, *reactions):
        """
        Initialize an Action with the optionally provided reactions.

        If the class declares default_reactions, the instance starts with a
        copy of that template instead, and the given reactions are discarded.

        Args:
            *reactions: Actions to trigger after this one, in firing order
        """
        if reactions:
            if self.__dict__.get('reactions') is None:
                self.reactions = list(reactions)
            else:
                self.reactions.extend(reactions)

        template = self.default_reactions
        if template is not None:
            self.reactions = list(template)

    @classmethod
    def get_class_reactions(cls, context=None):
        """
        Return the reactions declared on this class.

        Only a class that declares class_reactions in its own body owns them;
        subclasses override this method for context-dependent reactions.

        Args:
            context: Propagation context (ignored by default)

        Returns:
            List of class-level reactions
        """
        return list(cls.__dict__.get('class_reactions') or ())

    def get_reactions(self, context=None):
        """
        Return the instance reactions.

        Args:
            context: Propagation context (ignored by default)

        Returns:
            The instance's own reaction list, or an empty list
        """
        own = self.__dict__.get('reactions')
        if own is None:
            return []
        return own

    def get_all_reactions(self, context=None):
        """Return class reactions followed by instance reactions."""
        return (list(type(self).get_class_reactions(context))
                + list(self.get_reactions(context)))

    def do_action(self, context=None):
        """
        Perform the local action only. Subclasses override this.

        Args:
            context: Caller-defined payload, passed through untouched
        """

    def do_reactions(self, context=None):
        """Trigger every reaction with the same context."""
        reactions = self.get_all_reactions(context)
        logger.debug("%r propagating to %d reaction(s)", self, len(reactions))
        for reaction in reactions:
            reaction.act(context)

    def act(self, context=None):
        """
        Perform the local action, then trigger all reactions.

        Args:
            context: Caller-defined payload shared by the whole propagation
        """
        logger.debug("%r acting", self)
        self.do_action(context)
        self.do_reactions(context)

    def add_reactions(self, *reactions):
        """
        Append reactions to this instance. Duplicates are kept.

        Args:
            *reactions: Actions to append, in firing order

        Returns:
            self (for method chaining)
        """
        if self.__dict__.get('reactions') is None:
            self.reactions = []
        self.reactions.extend(reactions)
        return self

    def remove_reaction(self, reaction):
        """
        Remove the first occurrence of a reaction, compared by identity.
        Missing reactions are ignored.

        Args:
            reaction: The Action to remove

        Returns:
            self (for method chaining)
        """
        own = self.__dict__.get('reactions')
        if own is None:
            return self
        for index, existing in enumerate(own):
            if existing is reaction:
                del own[index]
                break
        return self

    def clear_reactions(self):
        """Remove all instance reactions. Class reactions are untouched."""
        own = self.__dict__.get('reactions')
        if own is not None:
            own.clear()
        return self

    def reaction_count(self, context=None):
        """Return the number of reactions act() would trigger."""
        return len(self.get_all_reactions(context))

    def __repr__(self):
        count = len(self.__dict__.get('reactions') or ())
        return f"{self.__class__.__name__}(reactions={count})"

    def __str__(self):
        return self.__class__.__name__
