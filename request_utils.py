from flask import request, abort
from summary import current_month, parse_month

def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data

def month_arg():
    """The ``month`` query parameter, defaulting to the current month."""
    return request.args.get('month') or current_month()

def valid_month_arg():
    month = month_arg()
    try:
        parse_month(month)
    except ValueError:
        abort(400, description="month must be in YYYY-MM format")
    return month

def id_arg():
    record_id = request.args.get('id', type=int)
    if record_id is None:
        abort(400, description="id is required")
    return record_id
