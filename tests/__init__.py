"""
Milk Tracker Test Suite

- test_entries.py: Daily entry CRUD and the one-entry-per-date rule
- test_payments.py: Payment CRUD
- test_settings.py: Settings read/upsert and schema seeding
- test_auth.py: PIN login gate and PIN change
- test_summary.py: Monthly summary and chart series calculations
- test_dashboard.py: Summary and chart endpoints
- test_reports.py: PDF export and share message
- test_db.py: Storage adapter (SQLite and MySQL backends)
- test_security.py: Security headers, session cookies, error responses

Run all tests:
    pytest tests/

Run with verbose output:
    pytest tests/ -v
"""
