"""Tests for aggregation, chart configs and the Excel export."""
from datetime import date

import pandas as pd

from survey import reports
from survey.messages import MESSAGES

COLUMNS = MESSAGES['exportColumns']


def review(class_name, ratings, comment='Tốt', review_id=None):
    return {
        'id': review_id or class_name,
        'className': class_name,
        'ratings': ratings,
        'comment': comment,
        'ipAddress': '1.2.3.4',
        'submissionDate': '2026-10-19T08:05:00.000Z'
    }


REVIEWS = [
    review('Mầm 1', {'Cô giáo Lan': 'satisfied', 'Vệ sinh lớp học': 'unsatisfied'}),
    review('Mầm 1', {'Cô giáo Lan': 'unsatisfied', 'Vệ sinh lớp học': 'unsatisfied'}),
    review('Lá 2', {'Cô giáo Dung': 'satisfied', 'Vệ sinh lớp học': 'satisfied'}),
]


class TestAggregateRatings:

    def test_counts_per_item(self):
        aggregation = reports.aggregate_ratings(REVIEWS)

        assert aggregation['Cô giáo Lan'] == {'total': 2, 'satisfied': 1, 'unsatisfied': 1}
        assert aggregation['Vệ sinh lớp học'] == {'total': 3, 'satisfied': 1, 'unsatisfied': 2}
        assert list(aggregation) == ['Cô giáo Lan', 'Vệ sinh lớp học', 'Cô giáo Dung']

    def test_totals_equal_satisfied_plus_unsatisfied(self):
        for counts in reports.aggregate_ratings(REVIEWS).values():
            assert counts['total'] == counts['satisfied'] + counts['unsatisfied']

    def test_empty_input(self):
        assert reports.aggregate_ratings([]) == {}


class TestBuildCharts:

    def test_all_classes_gives_summary_then_one_per_class(self):
        charts = reports.build_charts(REVIEWS, 'all')

        assert [chart['title'] for chart in charts] == [
            MESSAGES['chartAllClasses'], 'Lớp Lá 2', 'Lớp Mầm 1'
        ]
        summary = charts[0]
        assert summary['data']['labels'] == ['Cô giáo Lan', 'Vệ sinh lớp học', 'Cô giáo Dung']
        assert summary['data']['datasets'][0]['data'] == [2, 3, 1]
        assert summary['total'] == 6

    def test_single_class_gives_one_chart_per_item(self):
        class_reviews = [r for r in REVIEWS if r['className'] == 'Mầm 1']

        charts = reports.build_charts(class_reviews, 'Mầm 1')

        assert [chart['title'] for chart in charts] == ['Cô giáo Lan', 'Vệ sinh lớp học']
        assert charts[1]['data']['datasets'][0]['data'] == [0, 2]
        assert charts[1]['data']['labels'] == [MESSAGES['satisfied'], MESSAGES['unsatisfied']]
        assert len({chart['id'] for chart in charts}) == 2

    def test_no_reviews_no_charts(self):
        assert reports.build_charts([], 'all') == []

    def test_colours_cycle(self):
        colours = reports.generate_colors(12)

        assert colours[10] == colours[0]
        assert colours[11] == colours[1]


class TestExport:

    def test_one_row_per_review(self):
        frame = reports.build_export_frame(REVIEWS)

        assert len(frame) == len(REVIEWS)
        assert list(frame.columns) == [
            COLUMNS['className'], COLUMNS['submissionDate'], COLUMNS['ipAddress'], COLUMNS['comment'],
            'Cô giáo Lan', 'Vệ sinh lớp học', 'Cô giáo Dung'
        ]
        assert frame.iloc[0]['Cô giáo Lan'] == MESSAGES['satisfied']
        assert frame.iloc[1]['Cô giáo Lan'] == MESSAGES['unsatisfied']
        assert frame.iloc[0][COLUMNS['submissionDate']] == '19/10/2026 08:05'

    def test_row_count_follows_filtered_set(self):
        filtered = [r for r in REVIEWS if r['className'] == 'Lá 2']

        assert len(reports.build_export_frame(filtered)) == 1

    def test_workbook_is_readable(self):
        workbook = reports.export_workbook(REVIEWS)

        sheet = pd.read_excel(workbook, sheet_name=MESSAGES['exportSheetName'])
        assert len(sheet) == len(REVIEWS)
        assert list(sheet[COLUMNS['className']]) == ['Mầm 1', 'Mầm 1', 'Lá 2']

    def test_filename_uses_date(self):
        assert reports.export_filename(date(2026, 10, 19)) == 'Danh_sach_danh_gia_2026-10-19.xlsx'
