"""
Simple example demonstrating composable class actions.
"""

import logging

from classaction import Action, FunctionAction


# Define some simple actions
class GreetUser(Action):
    def do_action(self, context):
        name = context.get('name', 'World')
        context['greeting'] = f"Hello, {name}!"
        print(f"Action: {context['greeting']}")


class AddTimestamp(Action):
    def do_action(self, context):
        import datetime
        context['timestamp'] = datetime.datetime.now().isoformat()
        print(f"Action: Added timestamp {context['timestamp']}")


class FormatMessage(Action):
    def do_action(self, context):
        context['final_message'] = f"{context['greeting']} (at {context['timestamp']})"
        print("Action: Formatted message")


class AuditedGreeting(GreetUser):
    # Every AuditedGreeting triggers the audit trail, without per-instance setup
    class_reactions = [FunctionAction(lambda context: context.setdefault('audit', []).append('greeted'))]


def main():
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    print("=" * 60)
    print("ClassAction Simple Example")
    print("=" * 60)
    print()

    # Build the tree: greet, then stamp, then format
    root = AuditedGreeting(AddTimestamp(FormatMessage()))

    print(f"Tree built: {root} with {root.reaction_count()} reaction(s)")
    print()

    print("Acting...")
    print("-" * 60)

    context = {'name': 'Alice'}
    root.act(context)

    print("-" * 60)
    print()
    print(f"Final message: {context['final_message']}")
    print(f"Audit trail: {context['audit']}")

    print()
    print("=" * 60)


if __name__ == "__main__":
    main()
