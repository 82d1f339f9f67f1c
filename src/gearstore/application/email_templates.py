"""HTML bodies for hold and product question emails.

Every interpolated value is escaped; notes, questions and pickup text are
typed by customers.
"""

from __future__ import annotations

from datetime import tzinfo
from html import escape

from gearstore.application.email_sender import EmailMessage
from gearstore.domain.model.hold import Hold
from gearstore.domain.model.product import Product
from gearstore.domain.model.value_objects import Customer
from gearstore.domain.service.pickup_schedule import format_pickup_day

SITE_NAME = "MMA Gear"


def hold_policy(hold_hours: int) -> str:
    return (
        f"We will hold this item for you for {hold_hours} hours from the time of "
        "your request, unless another time is requested."
    )


def _product_title(products: list[Product]) -> str:
    return ", ".join(p.name for p in products)


def _product_lines(products: list[Product]) -> str:
    return "<br/>".join(
        f"<b>{escape(p.name)}</b> (ID: {escape(p.id)}) at <b>{escape(str(p.price))}</b>"
        for p in products
    )


def admin_hold_alert(
    hold: Hold,
    products: list[Product],
    admin_email: str,
    hold_hours: int,
    tz: tzinfo,
) -> EmailMessage:
    pickup = format_pickup_day(hold.pickup_day, hold.pickup_custom, tz)
    notes = f"<p><b>Notes:</b> {escape(hold.notes)}</p>" if hold.notes else ""
    html = f"""
      <h2>New Local Pickup Request</h2>
      <p>{_product_lines(products)}</p>
      <p><b>Hold ID:</b> {escape(hold.id)}</p>
      <p><b>Name:</b> {escape(hold.customer_name)}<br/>
      <b>Email:</b> {escape(hold.customer_email)}<br/>
      <b>Phone:</b> {escape(hold.customer_phone)}</p>
      <p><b>Preferred Pickup Day:</b> {escape(pickup)}</p>
      {notes}
      <p style="color:#888;">{escape(hold_policy(hold_hours))}</p>
      <hr/>
      <small>This is an automated notification from your {SITE_NAME} site.</small>
    """
    return EmailMessage(
        to=admin_email,
        subject=f"New Local Pickup Request: {_product_title(products)}",
        html=html,
    )


def customer_hold_confirmation(
    hold: Hold,
    products: list[Product],
    hold_hours: int,
    tz: tzinfo,
) -> EmailMessage:
    pickup = format_pickup_day(hold.pickup_day, hold.pickup_custom, tz)
    notes = f"Notes: {escape(hold.notes)}<br/>" if hold.notes else ""
    html = f"""
      <h2>Thank you for your purchase request!</h2>
      <p>We received your request for:<br/>{_product_lines(products)}</p>
      <p><b>Your Info:</b><br/>
      Name: {escape(hold.customer_name)}<br/>
      Email: {escape(hold.customer_email)}<br/>
      Phone: {escape(hold.customer_phone)}<br/>
      Preferred Pickup Day: {escape(pickup)}<br/>
      {notes}
      </p>
      <p>{escape(hold_policy(hold_hours))}</p>
      <p>We will contact you shortly to confirm a pickup time.</p>
    """
    return EmailMessage(
        to=hold.customer_email,
        subject=f"Your {SITE_NAME} Pickup Request: {_product_title(products)}",
        html=html,
    )


def admin_question_alert(
    product: Product,
    customer: Customer,
    question: str,
    notes: str,
    admin_email: str,
) -> EmailMessage:
    notes_html = f"<p><b>Additional Notes:</b> {escape(notes)}</p>" if notes else ""
    html = f"""
      <h2>New Product Question</h2>
      <p><b>{escape(product.name)}</b> (ID: {escape(product.id)}) at <b>{escape(str(product.price))}</b></p>
      <p><b>Name:</b> {escape(customer.name)}<br/>
      <b>Email:</b> {escape(customer.email)}<br/>
      <b>Phone:</b> {escape(customer.phone)}</p>
      <blockquote style="border-left:4px solid #dc2626;padding-left:12px;">
        {escape(question)}
      </blockquote>
      {notes_html}
      <p style="color:#888;">Please respond within 24 hours. Reply directly to {escape(customer.email)}.</p>
      <hr/>
      <small>This is an automated notification from your {SITE_NAME} site.</small>
    """
    return EmailMessage(
        to=admin_email,
        subject=f"Product Question: {product.name}",
        html=html,
    )


def customer_question_confirmation(
    product: Product,
    customer: Customer,
    question: str,
    notes: str,
) -> EmailMessage:
    notes_html = f"<p><b>Additional notes:</b> {escape(notes)}</p>" if notes else ""
    html = f"""
      <h2>Thank you for your question!</h2>
      <p>Hi {escape(customer.name)},</p>
      <p>We received your question about <b>{escape(product.name)}</b>
      ({escape(str(product.price))}) and will get back to you within 24 hours.</p>
      <p><b>Your question:</b> "{escape(question)}"</p>
      {notes_html}
      <p>We will contact you at {escape(customer.phone)}, or you can reply to this email.</p>
      <p>Thanks for your interest in our {SITE_NAME}!</p>
    """
    return EmailMessage(
        to=customer.email,
        subject=f"Question Received: {product.name}",
        html=html,
    )
