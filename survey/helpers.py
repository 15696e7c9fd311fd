# Survey Shared Helpers
# Utility functions used by the form and dashboard apps

from datetime import datetime, timezone
from .config import CLASS_TEACHER_MAP, CLASSES, GENERAL_RATING_ITEMS, RATING_LEVELS
from .messages import MESSAGES


def now_iso():
    """Current UTC time as an ISO-8601 string (e.g. '2026-10-19T08:30:00.000Z')"""
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'


def parse_iso(value):
    """Parse an ISO-8601 timestamp into an aware datetime.

    Unparseable values sort as the oldest possible time.
    """
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (AttributeError, ValueError):
        return datetime.min.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date_display(date_str):
    """Format an ISO timestamp as 'DD/MM/YYYY HH:MM'

    Returns the original string if parsing fails.
    """
    if not date_str:
        return ''
    try:
        return datetime.fromisoformat(date_str.replace('Z', '+00:00')).strftime('%d/%m/%Y %H:%M')
    except (AttributeError, ValueError):
        return date_str


def rating_items_for_class(class_name):
    """Rating items in form order: the class teachers, then the general items"""
    teachers = CLASS_TEACHER_MAP.get(class_name)
    if not teachers:
        return []
    return [f"Cô giáo {teacher}" for teacher in teachers] + list(GENERAL_RATING_ITEMS)


def ordered_rating_items(review):
    """Items of a stored review in form order.

    Reviews for classes no longer configured keep their stored order.
    """
    ratings = review.get('ratings', {})
    items = rating_items_for_class(review.get('className'))
    if not items:
        return list(ratings.keys())
    return [item for item in items if ratings.get(item)]


def validate_submission(class_name, ratings, comment):
    """Check a form submission.

    Returns a dict of field -> message; empty when the submission is valid.
    """
    errors = {}
    errors_text = MESSAGES['formErrors']

    if not class_name or class_name not in CLASSES:
        errors['class'] = errors_text['classMissing']

    items = rating_items_for_class(class_name)
    if items and any(ratings.get(item) not in RATING_LEVELS for item in items):
        errors['rating'] = errors_text['ratingMissing']

    if not comment or not comment.strip():
        errors['comment'] = errors_text['comment']

    return errors


def sort_reviews(reviews):
    """Newest submission first"""
    return sorted(reviews, key=lambda review: parse_iso(review['submissionDate']), reverse=True)


def filter_reviews(reviews, filter_class='all'):
    if filter_class == 'all':
        return list(reviews)
    return [review for review in reviews if review['className'] == filter_class]


def unique_classes(reviews):
    return sorted({review['className'] for review in reviews})
