# Survey Shared Reports
# Rating aggregation, chart configs and Excel export for the dashboard

import io
from datetime import date
import pandas as pd
from .helpers import format_date_display
from .messages import MESSAGES

CHART_COLORS = [
    '#4f46e5', '#10b981', '#f59e0b', '#ef4444', '#3b82f6',
    '#8b5cf6', '#ec4899', '#64748b', '#06b6d4', '#84cc16',
]
SATISFIED_COLOR = '#10b981'
UNSATISFIED_COLOR = '#ef4444'


def generate_colors(count):
    """Cycle the palette to give `count` colours"""
    return [CHART_COLORS[i % len(CHART_COLORS)] for i in range(count)]


def aggregate_ratings(reviews):
    """Tally satisfied/unsatisfied answers per rating item.

    Returns {item: {'total', 'satisfied', 'unsatisfied'}} with items in
    the order they were first seen.
    """
    aggregation = {}
    for review in reviews:
        for item, level in review['ratings'].items():
            counts = aggregation.setdefault(item, {'total': 0, 'satisfied': 0, 'unsatisfied': 0})
            counts['total'] += 1
            if level == 'satisfied':
                counts['satisfied'] += 1
            else:
                counts['unsatisfied'] += 1
    return aggregation


def _summary_chart(chart_id, title, aggregation):
    labels = list(aggregation.keys())
    return {
        'id': chart_id,
        'title': title,
        'total': sum(counts['total'] for counts in aggregation.values()),
        'type': 'doughnut',
        'data': {
            'labels': labels,
            'datasets': [{
                'data': [aggregation[label]['total'] for label in labels],
                'backgroundColor': generate_colors(len(labels)),
            }],
        },
    }


def _item_chart(chart_id, item, counts):
    return {
        'id': chart_id,
        'title': item,
        'total': counts['total'],
        'type': 'doughnut',
        'data': {
            'labels': [MESSAGES['satisfied'], MESSAGES['unsatisfied']],
            'datasets': [{
                'data': [counts['satisfied'], counts['unsatisfied']],
                'backgroundColor': [SATISFIED_COLOR, UNSATISFIED_COLOR],
            }],
        },
    }


def build_charts(reviews, filter_class='all'):
    """Chart.js configs for the dashboard.

    For 'all': one summary chart across every class, then one per class.
    For a single class: one satisfied/unsatisfied chart per rating item.
    """
    if not reviews:
        return []

    if filter_class != 'all':
        aggregation = aggregate_ratings(reviews)
        return [
            _item_chart(f'item-{index}', item, counts)
            for index, (item, counts) in enumerate(aggregation.items())
        ]

    charts = [_summary_chart('summary-all', MESSAGES['chartAllClasses'], aggregate_ratings(reviews))]

    class_names = sorted({review['className'] for review in reviews})
    for index, class_name in enumerate(class_names):
        class_reviews = [review for review in reviews if review['className'] == class_name]
        title = f"{MESSAGES['classPrefix']} {class_name}"
        charts.append(_summary_chart(f'summary-{index}', title, aggregate_ratings(class_reviews)))

    return charts


def build_export_frame(reviews):
    """One row per review: class, time, IP, comment, then one column per rating item"""
    columns = MESSAGES['exportColumns']

    rows = []
    for review in reviews:
        row = {
            columns['className']: review['className'],
            columns['submissionDate']: format_date_display(review['submissionDate']),
            columns['ipAddress']: review['ipAddress'],
            columns['comment']: review['comment'],
        }
        for item, level in review['ratings'].items():
            row[item] = MESSAGES['satisfied'] if level == 'satisfied' else MESSAGES['unsatisfied']
        rows.append(row)

    return pd.DataFrame(rows, columns=list(columns.values()) + _rating_columns(reviews))


def _rating_columns(reviews):
    items = []
    for review in reviews:
        for item in review['ratings']:
            if item not in items:
                items.append(item)
    return items


def export_workbook(reviews):
    """Write the export sheet to an in-memory .xlsx file"""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
        build_export_frame(reviews).to_excel(writer, sheet_name=MESSAGES['exportSheetName'], index=False)
    buffer.seek(0)
    return buffer


def export_filename(today=None):
    today = today or date.today()
    return f"Danh_sach_danh_gia_{today.isoformat()}.xlsx"
