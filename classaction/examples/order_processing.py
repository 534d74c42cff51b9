"""
Order processing example: a business workflow as a tree of class actions.

Validation failures are ordinary exceptions; they stop the rest of the tree.
"""

from classaction import Action, FunctionAction


class OrderError(Exception):
    pass


class ValidateOrder(Action):
    def do_action(self, context):
        order = context.get('order')
        if not order:
            raise OrderError("Order is missing")
        if not order.get('items'):
            raise OrderError("Order has no items")
        if not order.get('customer_id'):
            raise OrderError("Customer ID is missing")
        print(f"✓ Order validated for customer {order['customer_id']}")


class CalculateTotals(Action):
    TAX_RATE = 0.08

    def do_action(self, context):
        subtotal = sum(item['price'] * item['quantity'] for item in context['order']['items'])
        tax = subtotal * self.TAX_RATE
        context.update(subtotal=subtotal, tax=tax, total=subtotal + tax)
        print(f"✓ Calculated totals - Subtotal: ${subtotal:.2f}, Tax: ${tax:.2f}, Total: ${subtotal + tax:.2f}")


class ProcessPayment(Action):
    def do_action(self, context):
        payment_id = f"PAY-{abs(hash(context['order']['id'])) % 100000:05d}"
        context['payment_id'] = payment_id
        print(f"✓ Payment processed: {payment_id} (${context['total']:.2f})")


class CreateShipment(Action):
    def do_action(self, context):
        shipment_id = f"SHIP-{abs(hash(context['order']['customer_id'])) % 100000:05d}"
        context['shipment_id'] = shipment_id
        print(f"✓ Shipment created: {shipment_id}")


class GiftWrap(Action):
    def do_action(self, context):
        print("✓ Gift wrapping requested")


class SendConfirmationEmail(Action):
    def do_action(self, context):
        email = context['order'].get('customer_email', 'customer@example.com')
        print(f"✓ Confirmation email sent to {email}")
        print(f"  Order Total: ${context['total']:.2f}")
        print(f"  Payment ID: {context['payment_id']}")


class Fulfil(Action):
    """Ships the order; gift orders get wrapped first."""

    gift_wrap = GiftWrap()

    def get_reactions(self, context=None):
        reactions = list(super().get_reactions(context))
        if context and context['order'].get('gift'):
            reactions.insert(0, self.gift_wrap)
        return reactions


def build_order_tree():
    confirm = SendConfirmationEmail()
    return ValidateOrder(
        CalculateTotals(
            ProcessPayment(
                Fulfil(CreateShipment()),
                confirm,
            ),
        ),
    )


def create_sample_order(order_id, customer_id, gift=False, items=True):
    return {
        'id': order_id,
        'customer_id': customer_id,
        'customer_email': f'customer{customer_id}@example.com',
        'gift': gift,
        'items': [
            {'name': 'Widget', 'price': 19.99, 'quantity': 2},
            {'name': 'Gadget', 'price': 49.99, 'quantity': 1},
        ] if items else [],
    }


def main():
    print("=" * 60)
    print("ClassAction Order Processing Example")
    print("=" * 60)

    order_tree = build_order_tree()
    processed = []
    order_tree.add_reactions(FunctionAction(lambda context: processed.append(context['order']['id'])))

    orders = [
        create_sample_order('ORD-001', 'CUST-123'),
        create_sample_order('ORD-002', 'CUST-456', gift=True),
        create_sample_order('ORD-003', 'CUST-789', items=False),
    ]

    failed = 0
    for order in orders:
        print(f"\n[{order['id']}]")
        try:
            order_tree.act({'order': order})
        except OrderError as e:
            failed += 1
            print(f"✗ Order {order['id']} failed: {e}")

    print("\n" + "=" * 60)
    print(f"Summary: {len(processed)} successful, {failed} failed")
    print("=" * 60)


if __name__ == "__main__":
    main()
