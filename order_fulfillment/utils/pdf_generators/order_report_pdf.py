# order_fulfillment/utils/pdf_generators/order_report_pdf.py
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from order_fulfillment.models.enums.stock_status import StockStatus
from order_fulfillment.schemas.sales.sales_order_schemas import OrderFulfillmentOut

STOCK_STATUS_COLORS = {
    StockStatus.COMPLETE: colors.green,
    StockStatus.SUFFICIENT: colors.darkblue,
    StockStatus.INSUFFICIENT: colors.red,
}


def _fmt_date(value) -> str:
    return value.strftime("%d/%m/%Y") if value else "-"


def build_order_report_pdf(order: OrderFulfillmentOut) -> bytes:
    """
    Render the order tracker as an A4 landscape PDF: header, fulfillment
    summary, deadline counts and one row per order item.
    """
    buffer = BytesIO()
    styles = getSampleStyleSheet()
    story = []

    # -----------------------------
    # HEADER
    # -----------------------------
    story.append(Paragraph(f"<b>Order {escape(order.order_number)}</b>", styles["Title"]))
    story.append(Spacer(1, 8))
    story.append(Paragraph(f"Customer: {escape(order.customer_name or str(order.customer))}", styles["Normal"]))
    story.append(Paragraph(f"Status: {order.status_display}", styles["Normal"]))
    if order.created_at:
        story.append(Paragraph(f"Created: {_fmt_date(order.created_at)}", styles["Normal"]))
    story.append(Paragraph(f"Report date: {_fmt_date(order.deadlines.as_of)}", styles["Normal"]))
    story.append(Spacer(1, 15))

    # -----------------------------
    # SUMMARY
    # -----------------------------
    summary = order.summary
    story.append(Paragraph("<b>Fulfillment Summary:</b>", styles["Heading3"]))
    story.append(Paragraph(
        f"Ordered: {summary.total_ordered_quantity} | "
        f"Fulfilled: {summary.total_fulfilled_quantity} | "
        f"Remaining: {summary.total_remaining_quantity} | "
        f"Shipped: {summary.total_shipped_quantity}",
        styles["Normal"],
    ))
    story.append(Paragraph(
        f"Completion: {summary.completion_rate}% | Shipping: {summary.shipping_rate}% | "
        f"Completed items: {summary.completed_items_count}/{summary.items_count}",
        styles["Normal"],
    ))

    buckets = order.deadlines.buckets
    story.append(Paragraph(
        f"Overdue: {buckets.overdue} | This week: {buckets.due_this_week} | "
        f"This month: {buckets.due_this_month}",
        styles["Normal"],
    ))
    story.append(Spacer(1, 15))

    # -----------------------------
    # ITEMS
    # -----------------------------
    story.append(Paragraph("<b>Order Items:</b>", styles["Heading3"]))
    data = [[
        "Code", "Product", "Ordered", "Fulfilled", "Remaining",
        "Progress", "Stock", "Stock Status", "Deadline", "Kapsam Deadline",
    ]]
    row_styles = []

    for row_no, item in enumerate(order.items, start=1):
        data.append([
            item.product_code or str(item.product),
            item.product_name or "-",
            str(item.ordered_quantity),
            str(item.fulfilled_quantity),
            str(item.remaining_quantity),
            f"{item.progress_percent}%",
            str(item.current_stock),
            item.stock_status.value,
            _fmt_date(item.deadline_date),
            _fmt_date(item.kapsam_deadline_date),
        ])
        row_styles.append(("TEXTCOLOR", (7, row_no), (7, row_no), STOCK_STATUS_COLORS[item.stock_status]))
        if item.overdue:
            row_styles.append(("TEXTCOLOR", (8, row_no), (8, row_no), colors.red))

    table = Table(data, colWidths=[95, 170, 50, 50, 55, 50, 45, 75, 60, 80], repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
        ("ALIGN", (2, 1), (-1, -1), "CENTER"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        *row_styles,
    ]))
    story.append(table)

    # -----------------------------
    # GENERATE PDF
    # -----------------------------
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        rightMargin=30,
        leftMargin=30,
        topMargin=30,
        bottomMargin=30,
        title=f"Order {order.order_number}",
    )
    doc.build(story)

    return buffer.getvalue()
