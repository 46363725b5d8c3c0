"""
Test suite for the PDF export and share message.
"""

import pytest
import os
import sys
from urllib.parse import unquote

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from report import build_pdf, month_name, report_filename, share_text, whatsapp_url
from summary import monthly_summary


ENTRIES = [
    {'id': 1, 'date': '2024-03-01', 'quantity': 1.0, 'rate': 60.0},
    {'id': 2, 'date': '2024-03-02', 'quantity': 2.5, 'rate': 60.0},
]
PAYMENTS = [{'id': 1, 'date': '2024-03-01', 'amount': 100.0}]


class TestShareText:
    """Test the plain-text share message."""

    def test_summary_block(self):
        text = share_text('2024-03', monthly_summary(ENTRIES, PAYMENTS), ENTRIES)
        assert text.startswith('*🥛 Ghar Ka Doodh Hisaab - March 2024 Report*')
        assert 'Total Liters: 3.50 L' in text
        assert 'Total Amount: ₹210.00' in text
        assert 'Paid Amount: ₹100.00' in text
        assert '*Balance Due: ₹110.00*' in text

    def test_entry_lines(self):
        text = share_text('2024-03', monthly_summary(ENTRIES, PAYMENTS), ENTRIES)
        assert '01 Mar: 1L x ₹60 = ₹60.0' in text
        assert '02 Mar: 2.5L x ₹60 = ₹150.0' in text

    def test_no_entries(self):
        text = share_text('2024-03', monthly_summary([], []), [])
        assert 'No entries found.' in text
        assert text.endswith('_Generated via Ghar Ka Doodh Hisaab App_')

    def test_whatsapp_url_round_trips(self):
        text = share_text('2024-03', monthly_summary(ENTRIES, PAYMENTS), ENTRIES)
        url = whatsapp_url(text)
        prefix = 'https://wa.me/?text='
        assert url.startswith(prefix)
        assert ' ' not in url
        assert unquote(url[len(prefix):]) == text


class TestPdf:
    """Test PDF rendering."""

    def test_build_pdf(self):
        data = build_pdf('2024-03', monthly_summary(ENTRIES, PAYMENTS), ENTRIES)
        assert data.startswith(b'%PDF')

    def test_build_pdf_without_entries(self):
        data = build_pdf('2024-03', monthly_summary([], []), [])
        assert data.startswith(b'%PDF')

    def test_names(self):
        assert month_name('2024-03') == 'March 2024'
        assert report_filename('2024-03') == 'Milk_Report_2024-03.pdf'


class TestReportEndpoints:
    """Test the report routes."""

    def test_pdf_download(self, logged_in_client):
        logged_in_client.post('/api/entries', json={'date': '2024-03-01', 'quantity': 1, 'rate': 60})

        response = logged_in_client.get('/api/report/pdf?month=2024-03')
        assert response.status_code == 200
        assert response.mimetype == 'application/pdf'
        assert 'Milk_Report_2024-03.pdf' in response.headers['Content-Disposition']
        assert response.data.startswith(b'%PDF')

    def test_share(self, logged_in_client):
        logged_in_client.post('/api/entries', json={'date': '2024-03-01', 'quantity': 1, 'rate': 60})
        logged_in_client.post('/api/payments', json={'date': '2024-03-01', 'amount': 60})

        response = logged_in_client.get('/api/report/share?month=2024-03')
        assert response.status_code == 200
        body = response.get_json()
        assert '*Balance Due: ₹0.00*' in body['text']
        assert body['url'].startswith('https://wa.me/?text=')

    def test_pdf_invalid_month(self, logged_in_client):
        response = logged_in_client.get('/api/report/pdf?month=soon')
        assert response.status_code == 400
