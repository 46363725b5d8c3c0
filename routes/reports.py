import io
from flask import Blueprint, jsonify, current_app, send_file
from auth_utils import login_required
from report import build_pdf, report_filename, share_text, whatsapp_url
from request_utils import valid_month_arg
from routes.entries import fetch_entries
from routes.payments import fetch_payments
from summary import monthly_summary

reports_bp = Blueprint('reports', __name__, url_prefix='/api/report')

def _month_report():
    month = valid_month_arg()
    entries = fetch_entries(current_app.db, month)
    payments = fetch_payments(current_app.db, month)
    return month, monthly_summary(entries, payments), entries

@reports_bp.route('/pdf')
@login_required
def pdf():
    month, summary, entries = _month_report()
    data = build_pdf(month, summary, entries)
    current_app.logger.info("Generated PDF report for %s (%d entries)", month, len(entries))
    return send_file(
        io.BytesIO(data),
        as_attachment=True,
        download_name=report_filename(month),
        mimetype='application/pdf'
    )

@reports_bp.route('/share')
@login_required
def share():
    month, summary, entries = _month_report()
    text = share_text(month, summary, entries)
    return jsonify({"text": text, "url": whatsapp_url(text)})
