# Survey Shared Airtable Functions
# All Airtable read/write operations

import json
import httpx
from werkzeug.security import generate_password_hash, check_password_hash
from .config import (
    AIRTABLE_API_KEY,
    AIRTABLE_BASE_ID,
    AIRTABLE_URL,
    AIRTABLE_REVIEWS_TABLE,
    AIRTABLE_USERS_TABLE,
    AIRTABLE_IP_LOGS_TABLE,
    SUPERADMIN_USERNAME,
    SUPERADMIN_PASSWORD
)
from .errors import StoreError, IPLimitReached, UsernameExists
from .helpers import now_iso

# Airtable accepts at most 10 record ids per batch delete
DELETE_BATCH_SIZE = 10


def _get_headers():
    """Get standard Airtable headers"""
    return {
        'Authorization': f'Bearer {AIRTABLE_API_KEY}',
        'Content-Type': 'application/json'
    }


def _table_url(table, record_id=None):
    url = f"{AIRTABLE_URL}/{AIRTABLE_BASE_ID}/{table}"
    if record_id:
        url = f"{url}/{record_id}"
    return url


def _request(method, url, **kwargs):
    """Send one request to Airtable and return the decoded JSON body.

    Raises StoreError if no API key is configured or the call fails.
    """
    if not AIRTABLE_API_KEY:
        print("No Airtable API key configured")
        raise StoreError("No Airtable API key configured")

    try:
        response = httpx.request(method, url, headers=_get_headers(), timeout=10.0, **kwargs)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, ValueError) as e:
        print(f"Error calling Airtable ({method} {url}): {e}")
        raise StoreError(str(e)) from e


def _formula_string(value):
    """Quote a value for use inside filterByFormula"""
    escaped = str(value).replace('\\', '\\\\').replace("'", "\\'")
    return f"'{escaped}'"


def _list_records(table, formula=None, sort_field=None, direction='asc'):
    """Fetch every record in a table, following Airtable's pagination"""
    params = {}
    if formula:
        params['filterByFormula'] = formula
    if sort_field:
        params['sort[0][field]'] = sort_field
        params['sort[0][direction]'] = direction

    records = []
    while True:
        data = _request('GET', _table_url(table), params=params)
        records.extend(data.get('records', []))

        offset = data.get('offset')
        if not offset:
            return records
        params['offset'] = offset


def _create_record(table, fields):
    return _request('POST', _table_url(table), json={'fields': fields})


def _delete_record(table, record_id):
    return _request('DELETE', _table_url(table, record_id))


def _review_from_record(record):
    fields = record.get('fields', {})

    ratings = fields.get('Ratings') or {}
    if isinstance(ratings, str):
        try:
            ratings = json.loads(ratings)
        except ValueError:
            print(f"Unreadable ratings on review {record.get('id')}")
            ratings = {}
    if not isinstance(ratings, dict):
        print(f"Ratings on review {record.get('id')} are not a mapping")
        ratings = {}

    return {
        'id': record['id'],
        'className': fields.get('Class Name', ''),
        'ratings': ratings,
        'comment': fields.get('Comment', ''),
        'ipAddress': fields.get('IP Address', 'N/A'),
        'submissionDate': fields.get('Submission Date') or record.get('createdTime') or now_iso()
    }


def _ip_log_from_record(record):
    fields = record.get('fields', {})
    return {
        'id': record['id'],
        'ipAddress': fields.get('IP Address', 'N/A'),
        'className': fields.get('Class Name', ''),
        'timestamp': fields.get('Timestamp') or record.get('createdTime') or now_iso()
    }


def _user_from_record(record):
    fields = record.get('fields', {})
    return {
        'id': record['id'],
        'username': fields.get('Username', ''),
        'role': fields.get('Role', 'admin')
    }


# ===================
# REVIEWS
# ===================

def get_reviews():
    """Get all reviews, newest first."""
    records = _list_records(AIRTABLE_REVIEWS_TABLE, sort_field='Submission Date', direction='desc')
    return [_review_from_record(record) for record in records]


def add_review(class_name, ratings, comment, ip_address):
    """Store a new review unless this IP already reviewed the class.

    A repeat attempt is written to the IP Logs table and raises
    IPLimitReached. The check and the insert are separate calls, so two
    simultaneous submissions can both pass the check.
    """
    formula = (
        f"AND({{Class Name}}={_formula_string(class_name)}, "
        f"{{IP Address}}={_formula_string(ip_address)})"
    )
    existing = _list_records(AIRTABLE_REVIEWS_TABLE, formula=formula)

    if existing:
        _create_record(AIRTABLE_IP_LOGS_TABLE, {
            'IP Address': ip_address,
            'Class Name': class_name,
            'Timestamp': now_iso()
        })
        print(f"Blocked repeat review from {ip_address} for class {class_name}")
        raise IPLimitReached(class_name, ip_address)

    record = _create_record(AIRTABLE_REVIEWS_TABLE, {
        'Class Name': class_name,
        'Ratings': json.dumps(ratings, ensure_ascii=False),
        'Comment': comment,
        'IP Address': ip_address,
        'Submission Date': now_iso()
    })
    print(f"Created review for class {class_name}")
    return record.get('id')


def get_reviewed_classes_by_ip(ip_address):
    """Class names this IP has already reviewed"""
    if not ip_address:
        return []

    formula = f"{{IP Address}}={_formula_string(ip_address)}"
    records = _list_records(AIRTABLE_REVIEWS_TABLE, formula=formula)

    classes = []
    for record in records:
        class_name = record.get('fields', {}).get('Class Name')
        if class_name and class_name not in classes:
            classes.append(class_name)
    return classes


def delete_review(review_id):
    _delete_record(AIRTABLE_REVIEWS_TABLE, review_id)
    print(f"Deleted review {review_id}")


def delete_all_reviews():
    """Delete every review in batches. IP logs are left alone.

    Returns the number of reviews deleted.
    """
    record_ids = [record['id'] for record in _list_records(AIRTABLE_REVIEWS_TABLE)]

    for start in range(0, len(record_ids), DELETE_BATCH_SIZE):
        batch = record_ids[start:start + DELETE_BATCH_SIZE]
        _request('DELETE', _table_url(AIRTABLE_REVIEWS_TABLE),
                 params=[('records[]', record_id) for record_id in batch])

    print(f"Deleted {len(record_ids)} reviews")
    return len(record_ids)


# ===================
# IP LOGS
# ===================

def get_ip_logs():
    """Get blocked repeat attempts, newest first."""
    records = _list_records(AIRTABLE_IP_LOGS_TABLE, sort_field='Timestamp', direction='desc')
    return [_ip_log_from_record(record) for record in records]


def delete_ip_log(log_id):
    _delete_record(AIRTABLE_IP_LOGS_TABLE, log_id)
    print(f"Deleted IP log {log_id}")


# ===================
# USERS
# ===================

def login(username, password):
    """Check credentials against the super admin, then the Users table.

    Returns {id, username, role} or None if nothing matches.
    """
    if SUPERADMIN_PASSWORD and username == SUPERADMIN_USERNAME and password == SUPERADMIN_PASSWORD:
        return {
            'id': 'superadmin',
            'username': SUPERADMIN_USERNAME,
            'role': 'superadmin'
        }

    formula = f"{{Username}}={_formula_string(username)}"
    records = _list_records(AIRTABLE_USERS_TABLE, formula=formula)

    for record in records:
        stored_hash = record.get('fields', {}).get('Password', '')
        if stored_hash and check_password_hash(stored_hash, password):
            return _user_from_record(record)

    return None


def get_users():
    records = _list_records(AIRTABLE_USERS_TABLE, sort_field='Username')
    return [_user_from_record(record) for record in records]


def add_user(username, password):
    """Create a secondary admin. Raises UsernameExists on a clash."""
    formula = f"{{Username}}={_formula_string(username)}"
    if _list_records(AIRTABLE_USERS_TABLE, formula=formula):
        raise UsernameExists(username)

    record = _create_record(AIRTABLE_USERS_TABLE, {
        'Username': username,
        'Password': generate_password_hash(password),
        'Role': 'admin'
    })
    print(f"Created admin user: {username}")
    return record.get('id')


def delete_user(user_id):
    _delete_record(AIRTABLE_USERS_TABLE, user_id)
    print(f"Deleted user {user_id}")


def update_password(user_id, new_password):
    _request('PATCH', _table_url(AIRTABLE_USERS_TABLE, user_id),
             json={'fields': {'Password': generate_password_hash(new_password)}})
    print(f"Updated password for user {user_id}")
