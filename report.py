"""
Monthly report rendering: a PDF for download and a plain-text message for sharing.
"""

import io
from datetime import date
from urllib.parse import quote

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from summary import entry_amount, parse_month

APP_TITLE = 'Ghar Ka Doodh Hisaab'
HEADER_ORANGE = colors.Color(249 / 255, 115 / 255, 22 / 255)


def month_name(month):
    return parse_month(month).strftime('%B %Y')


def report_filename(month):
    return f"Milk_Report_{month}.pdf"


def _plain(value):
    # 1.0 -> "1", 1.25 -> "1.25"
    return f"{value or 0:.6f}".rstrip('0').rstrip('.')


def _day_label(value, fmt):
    try:
        return date.fromisoformat(value).strftime(fmt)
    except (TypeError, ValueError):
        return str(value)


def _table(rows, striped):
    table = Table(rows, hAlign='LEFT')
    style = [
        ('BACKGROUND', (0, 0), (-1, 0), HEADER_ORANGE),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
        ('TOPPADDING', (0, 0), (-1, -1), 6),
    ]
    if striped:
        style.append(('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.whitesmoke]))
    else:
        style.append(('GRID', (0, 0), (-1, -1), 0.5, colors.grey))
    table.setStyle(TableStyle(style))
    return table


def build_pdf(month, summary, entries):
    """Render the month's summary and daily entries, returning the PDF bytes."""
    styles = getSampleStyleSheet()
    summary_rows = [
        ['Description', 'Value'],
        ['Total Liters', f"{summary['totalLiters']:.2f} L"],
        ['Total Amount', f"Rs. {summary['totalAmount']:.2f}"],
        ['Paid Amount', f"Rs. {summary['paidAmount']:.2f}"],
        ['Remaining Balance', f"Rs. {summary['balance']:.2f}"],
    ]
    entry_rows = [['Date', 'Quantity', 'Rate', 'Total']]
    for e in entries:
        entry_rows.append([
            _day_label(e['date'], '%d %b %Y'),
            f"{_plain(e['quantity'])} L",
            f"Rs. {_plain(e['rate'])}",
            f"Rs. {entry_amount(e):.2f}",
        ])

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, title=f"Milk Report - {month_name(month)}")
    doc.build([
        Paragraph(APP_TITLE, styles['Title']),
        Paragraph(f"Monthly Report: {month_name(month)}", styles['Heading3']),
        Spacer(1, 12),
        _table(summary_rows, striped=True),
        Spacer(1, 18),
        Paragraph('Daily Entries', styles['Heading2']),
        _table(entry_rows, striped=False),
    ])
    return buffer.getvalue()


def share_text(month, summary, entries):
    lines = [
        f"*🥛 {APP_TITLE} - {month_name(month)} Report*",
        "",
        "*📊 SUMMARY*",
        "--------------------------",
        f"Total Liters: {summary['totalLiters']:.2f} L",
        f"Total Amount: ₹{summary['totalAmount']:.2f}",
        f"Paid Amount: ₹{summary['paidAmount']:.2f}",
        f"*Balance Due: ₹{summary['balance']:.2f}*",
        "",
        "*📅 DAILY ENTRIES*",
        "--------------------------",
    ]
    if entries:
        for e in entries:
            lines.append(
                f"{_day_label(e['date'], '%d %b')}: {_plain(e['quantity'])}L x ₹{_plain(e['rate'])}"
                f" = ₹{entry_amount(e):.1f}"
            )
    else:
        lines.append("No entries found.")
    lines.append("")
    lines.append(f"_Generated via {APP_TITLE} App_")
    return "\n".join(lines)


def whatsapp_url(text):
    return f"https://wa.me/?text={quote(text, safe='')}"
