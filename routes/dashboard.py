from flask import Blueprint, jsonify, current_app
from auth_utils import login_required
from request_utils import valid_month_arg
from routes.entries import fetch_entries
from routes.payments import fetch_payments
from summary import monthly_summary, daily_series

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api')

@dashboard_bp.route('/summary')
@login_required
def summary():
    month = valid_month_arg()
    entries = fetch_entries(current_app.db, month)
    payments = fetch_payments(current_app.db, month)
    return jsonify({"month": month, **monthly_summary(entries, payments)})

@dashboard_bp.route('/chart')
@login_required
def chart():
    month = valid_month_arg()
    return jsonify(daily_series(month, fetch_entries(current_app.db, month)))
