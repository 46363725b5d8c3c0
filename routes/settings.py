import json
from flask import Blueprint, jsonify, current_app
from init_db import DEFAULT_SETTINGS
from request_utils import json_body

settings_bp = Blueprint('settings', __name__, url_prefix='/api/settings')

def read_settings(db):
    """All settings as a dict, with defaults for seed keys missing from the table or NULL."""
    settings = dict(DEFAULT_SETTINGS)
    for row in db.query("SELECT `key`, value FROM settings"):
        if row['value'] is not None or row['key'] not in DEFAULT_SETTINGS:
            settings[row['key']] = row['value']
    return settings

def upsert_setting(tx, key, value):
    tx.execute("DELETE FROM settings WHERE `key` = %s", (key,))
    tx.execute("INSERT INTO settings (`key`, value) VALUES (%s, %s)", (key, value))

def _as_text(value):
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)

@settings_bp.route('', methods=['GET'])
def index():
    return jsonify(read_settings(current_app.db))

@settings_bp.route('', methods=['POST'])
def update_settings():
    data = json_body()
    with current_app.db.transaction() as tx:
        for key, value in data.items():
            upsert_setting(tx, key, _as_text(value))
    current_app.logger.info("Updated settings: %s", ", ".join(sorted(data)))
    return jsonify({"success": True})
