from flask import Blueprint, jsonify, current_app, session
from request_utils import json_body
from routes.settings import read_settings, upsert_setting

auth_bp = Blueprint('auth', __name__, url_prefix='/api')

def stored_pin():
    return read_settings(current_app.db)['pin']

@auth_bp.route('/login', methods=['POST'])
def login():
    pin = json_body().get('pin')

    if pin is None or str(pin) != stored_pin():
        current_app.logger.warning("Rejected login with incorrect PIN")
        return jsonify({"success": False, "message": "Incorrect PIN"}), 401

    session['logged_in'] = True
    return jsonify({"success": True})

@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()
    return jsonify({"success": True})

@auth_bp.route('/session', methods=['GET'])
def session_status():
    return jsonify({"loggedIn": bool(session.get('logged_in'))})

@auth_bp.route('/change-pin', methods=['POST'])
def change_pin():
    data = json_body()
    current_pin = data.get('currentPin')
    new_pin = data.get('newPin')

    if current_pin is None or str(current_pin) != stored_pin():
        return jsonify({"success": False, "message": "Current PIN is incorrect"}), 400

    with current_app.db.transaction() as tx:
        upsert_setting(tx, 'pin', None if new_pin is None else str(new_pin))
    current_app.logger.info("PIN changed")
    return jsonify({"success": True, "message": "PIN updated successfully"})
