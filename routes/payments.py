from flask import Blueprint, jsonify, current_app
from request_utils import json_body, month_arg, id_arg
from summary import coerce_number

payments_bp = Blueprint('payments', __name__, url_prefix='/api/payments')

def fetch_payments(db, month):
    return db.query(
        "SELECT id, date, amount FROM payments WHERE date LIKE %s ORDER BY date ASC, id ASC",
        (month + '%',)
    )

def _payment_fields(data):
    date_str = data.get('date')
    return None if date_str is None else str(date_str), coerce_number(data.get('amount'))

@payments_bp.route('', methods=['GET'])
def index():
    return jsonify(fetch_payments(current_app.db, month_arg()))

@payments_bp.route('', methods=['POST'])
def save_payment():
    data = json_body()
    date_str, amount = _payment_fields(data)

    if data.get('id'):
        current_app.db.query(
            "UPDATE payments SET date = %s, amount = %s WHERE id = %s",
            (date_str, amount, data['id'])
        )
    else:
        current_app.db.query("INSERT INTO payments (date, amount) VALUES (%s, %s)", (date_str, amount))
    current_app.logger.info("Saved payment of %s on %s", amount, date_str)
    return jsonify({"success": True})

@payments_bp.route('/<int:id>', methods=['PUT'])
def edit_payment(id):
    date_str, amount = _payment_fields(json_body())
    current_app.db.query(
        "UPDATE payments SET date = %s, amount = %s WHERE id = %s",
        (date_str, amount, id)
    )
    return jsonify({"success": True})

@payments_bp.route('', methods=['DELETE'])
def delete_payment_by_query():
    return delete_payment(id_arg())

@payments_bp.route('/<int:id>', methods=['DELETE'])
def delete_payment(id):
    current_app.db.query("DELETE FROM payments WHERE id = %s", (id,))
    return jsonify({"success": True})
