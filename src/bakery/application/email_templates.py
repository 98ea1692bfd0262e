"""Plain HTML renderings of confirmation artifacts.

Only the artifact fields are rendered; there is no styling.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bakery.application.confirmation import ConfirmationArtifact


def _items_table(artifact: ConfirmationArtifact) -> str:
    rows = []
    for row in artifact.rows:
        name = escape(row.name)
        if row.annotation:
            name += f" ({escape(row.annotation)})"
        rows.append(
            f"<tr><td>{name}</td><td>{row.quantity}</td>"
            f"<td>{row.unit_price}</td><td>{row.line_total}</td></tr>"
        )

    footer = [f'<tr><td colspan="3">Subtotal</td><td>{artifact.subtotal}</td></tr>']
    if artifact.discount:
        footer.append(
            f'<tr><td colspan="3">Bulk discount</td><td>{artifact.discount}</td></tr>'
        )
    footer.append(f'<tr><td colspan="3"><strong>Total</strong></td><td><strong>{artifact.grand_total}</strong></td></tr>')

    return (
        "<table>"
        "<thead><tr><th>Item</th><th>Quantity</th><th>Price</th><th>Total</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        f"<tfoot>{''.join(footer)}</tfoot>"
        "</table>"
    )


def _instructions(artifact: ConfirmationArtifact) -> str:
    if not artifact.special_instructions:
        return ""
    return f"<h2>Special Instructions</h2><p>{escape(artifact.special_instructions)}</p>"


def render_customer_email(artifact: ConfirmationArtifact, contact_email: str) -> str:
    first_name = escape(artifact.customer_name.split(" ")[0])
    return (
        "<html><body>"
        "<h1>Thank You For Your Order!</h1>"
        f"<p>Hello {first_name},</p>"
        f"<p>We've received your order from {escape(artifact.business_name)}.</p>"
        f"<p><strong>Order Number:</strong> {escape(artifact.order_number)}</p>"
        f"<p><strong>Order Date:</strong> {artifact.order_date}</p>"
        f"{_items_table(artifact)}"
        f"<h2>Fulfillment</h2><p>{escape(artifact.fulfillment)}</p>"
        f"<p>{escape(artifact.business_location)}</p>"
        "<p>Payment due upon pickup or delivery.</p>"
        f"{_instructions(artifact)}"
        f"<p>Questions? Contact us at {escape(contact_email)}</p>"
        "</body></html>"
    )


def render_business_email(artifact: ConfirmationArtifact) -> str:
    return (
        "<html><body>"
        "<h1>New Order Received</h1>"
        f"<p><strong>Order Number:</strong> {escape(artifact.order_number)}</p>"
        f"<p><strong>Order Date:</strong> {artifact.order_date}</p>"
        f"<p><strong>Fulfillment:</strong> {escape(artifact.fulfillment)}</p>"
        "<h2>Customer Information</h2>"
        f"<p><strong>Name:</strong> {escape(artifact.customer_name)}</p>"
        f"<p><strong>Email:</strong> {escape(artifact.customer_email)}</p>"
        f"<p><strong>Phone:</strong> {escape(artifact.customer_phone)}</p>"
        f"<h2>Order Summary</h2>{_items_table(artifact)}"
        f"{_instructions(artifact)}"
        "</body></html>"
    )
