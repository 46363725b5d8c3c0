from flask import Blueprint, jsonify, current_app
from request_utils import json_body, month_arg, id_arg
from summary import coerce_number

entries_bp = Blueprint('entries', __name__, url_prefix='/api/entries')

def fetch_entries(db, month):
    return db.query(
        "SELECT id, date, quantity, rate FROM entries WHERE date LIKE %s ORDER BY date ASC",
        (month + '%',)
    )

def _entry_fields(data):
    date_str = data.get('date')
    return (
        None if date_str is None else str(date_str),
        coerce_number(data.get('quantity')),
        coerce_number(data.get('rate')),
    )

@entries_bp.route('', methods=['GET'])
def index():
    return jsonify(fetch_entries(current_app.db, month_arg()))

@entries_bp.route('', methods=['POST'])
def save_entry():
    date_str, quantity, rate = _entry_fields(json_body())

    # One entry per day: a second save for the same date replaces the first.
    with current_app.db.transaction() as tx:
        tx.execute("DELETE FROM entries WHERE date = %s", (date_str,))
        tx.execute(
            "INSERT INTO entries (date, quantity, rate) VALUES (%s, %s, %s)",
            (date_str, quantity, rate)
        )
    current_app.logger.info("Saved entry for %s", date_str)
    return jsonify({"success": True})

@entries_bp.route('/<int:id>', methods=['PUT'])
def edit_entry(id):
    date_str, quantity, rate = _entry_fields(json_body())
    current_app.db.query(
        "UPDATE entries SET date = %s, quantity = %s, rate = %s WHERE id = %s",
        (date_str, quantity, rate, id)
    )
    return jsonify({"success": True})

@entries_bp.route('', methods=['DELETE'])
def delete_entry_by_query():
    return delete_entry(id_arg())

@entries_bp.route('/<int:id>', methods=['DELETE'])
def delete_entry(id):
    current_app.db.query("DELETE FROM entries WHERE id = %s", (id,))
    return jsonify({"success": True})
