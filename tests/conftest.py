"""
Pytest configuration and fixtures for the survey tests.

Airtable is replaced by an in-memory fake patched over httpx.request, so
the data layer runs its real request/response handling.
"""
import importlib.util
import itertools
import re
import sys
from pathlib import Path
from urllib.parse import unquote

import httpx
import pytest

# Make the shared package importable without installing it
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import survey.airtable  # noqa: E402

FORMULA_TERM = re.compile(r"\{([^}]+)\}='((?:[^'\\]|\\.)*)'")


def _unescape(value):
    return re.sub(r"\\(.)", r"\1", value)


class FakeAirtable:
    """Just enough of the Airtable REST API for the survey data layer."""

    def __init__(self):
        self.tables = {}
        self.calls = []
        self.page_size = 100
        self.fail = False
        self._ids = itertools.count(1)

    def seed(self, table, fields, created_time='2026-01-01T00:00:00.000Z'):
        record = {'id': f'rec{next(self._ids):05d}', 'createdTime': created_time, 'fields': dict(fields)}
        self.tables.setdefault(table, []).append(record)
        return record

    def records(self, table):
        return self.tables.get(table, [])

    def request(self, method, url, headers=None, timeout=None, params=None, json=None):
        params = list(params.items()) if isinstance(params, dict) else list(params or [])
        self.calls.append((method, url, params, json))
        request = httpx.Request(method, url)

        if self.fail:
            return httpx.Response(500, json={'error': 'SERVER_ERROR'}, request=request)

        parts = [unquote(part) for part in httpx.URL(url).path.split('/')]
        table = parts[3]
        record_id = parts[4] if len(parts) > 4 else None

        if method == 'GET':
            body = self._list(table, dict(params))
        elif method == 'POST':
            body = self.seed(table, json['fields'], created_time='2026-06-01T00:00:00.000Z')
        elif method == 'PATCH':
            record = self._find(table, record_id)
            if record is None:
                return httpx.Response(404, json={'error': 'NOT_FOUND'}, request=request)
            record['fields'].update(json['fields'])
            body = record
        elif method == 'DELETE':
            ids = [record_id] if record_id else [value for key, value in params if key == 'records[]']
            if len(ids) > 10:
                return httpx.Response(422, json={'error': 'TOO_MANY_RECORDS'}, request=request)
            for deleted_id in ids:
                if self._find(table, deleted_id) is None:
                    return httpx.Response(404, json={'error': 'NOT_FOUND'}, request=request)
            self.tables[table] = [r for r in self.records(table) if r['id'] not in ids]
            body = {'records': [{'id': deleted_id, 'deleted': True} for deleted_id in ids]}
        else:
            raise AssertionError(f'Unexpected method {method}')

        return httpx.Response(200, json=body, request=request)

    def _find(self, table, record_id):
        for record in self.records(table):
            if record['id'] == record_id:
                return record
        return None

    def _list(self, table, params):
        records = list(self.records(table))

        formula = params.get('filterByFormula')
        if formula:
            terms = [(field, _unescape(value)) for field, value in FORMULA_TERM.findall(formula)]
            records = [
                r for r in records
                if all(r['fields'].get(field) == value for field, value in terms)
            ]

        sort_field = params.get('sort[0][field]')
        if sort_field:
            records.sort(
                key=lambda r: r['fields'].get(sort_field, ''),
                reverse=params.get('sort[0][direction]') == 'desc'
            )

        start = int(params.get('offset', 0))
        page = records[start:start + self.page_size]
        body = {'records': page}
        if start + self.page_size < len(records):
            body['offset'] = str(start + self.page_size)
        return body


@pytest.fixture
def airtable(monkeypatch):
    """In-memory Airtable with an API key configured."""
    fake = FakeAirtable()
    monkeypatch.setattr(survey.airtable, 'AIRTABLE_API_KEY', 'test-key')
    monkeypatch.setattr(survey.airtable.httpx, 'request', fake.request)
    return fake


def _load_app(name, relative_path):
    spec = importlib.util.spec_from_file_location(name, ROOT / relative_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    module.app.config['TESTING'] = True
    return module


@pytest.fixture(scope='session')
def feedback_module():
    return _load_app('survey_feedback_app', 'feedback/app.py')


@pytest.fixture(scope='session')
def dashboard_module():
    return _load_app('survey_dashboard_app', 'dashboard/app.py')


@pytest.fixture
def clean_ip(monkeypatch, feedback_module):
    """Every caller passes the geolocation gate with its own IP."""
    monkeypatch.setattr(feedback_module, 'check_ip', lambda ip: (True, ip, None))


@pytest.fixture
def form_client(feedback_module):
    return feedback_module.app.test_client()


@pytest.fixture
def dashboard_client(dashboard_module):
    return dashboard_module.app.test_client()


def log_in(client, role='superadmin', user_id='superadmin', username='superadmin'):
    with client.session_transaction() as sess:
        sess['user'] = {'id': user_id, 'username': username, 'role': role}
