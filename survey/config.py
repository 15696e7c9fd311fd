# Survey Shared Config
# Central configuration for the form and dashboard apps

import os

# Airtable
AIRTABLE_API_KEY = os.environ.get('AIRTABLE_API_KEY')
AIRTABLE_BASE_ID = os.environ.get('AIRTABLE_BASE_ID', 'appParentSurvey01')
AIRTABLE_URL = 'https://api.airtable.com/v0'

# Table names
AIRTABLE_REVIEWS_TABLE = 'Reviews'
AIRTABLE_USERS_TABLE = 'Users'
AIRTABLE_IP_LOGS_TABLE = 'IP Logs'

# Flask sessions
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')

# Super admin (never stored in Airtable; disabled when no password is set)
SUPERADMIN_USERNAME = os.environ.get('SUPERADMIN_USERNAME', 'superadmin')
SUPERADMIN_PASSWORD = os.environ.get('SUPERADMIN_PASSWORD')

# Geolocation gate
GEO_LOOKUP_URL = os.environ.get('GEO_LOOKUP_URL', 'https://ipwho.is')
EXPECTED_COUNTRY = os.environ.get('EXPECTED_COUNTRY', 'VN')

# Reverse proxies in front of the form service; each appends one X-Forwarded-For hop
PROXY_HOPS = int(os.environ.get('PROXY_HOPS', 1))

# Classes and their teachers, in form order
CLASS_TEACHER_MAP = {
    'Mầm 1': ['Lan', 'Hương'],
    'Mầm 2': ['Mai', 'Thu'],
    'Chồi 1': ['Hạnh', 'Ngọc'],
    'Chồi 2': ['Trang', 'Yến'],
    'Lá 1': ['Hằng', 'Phương'],
    'Lá 2': ['Dung', 'Thảo'],
}
CLASSES = list(CLASS_TEACHER_MAP.keys())

# Rated for every class, after the class teachers
GENERAL_RATING_ITEMS = [
    'Chất lượng bữa ăn',
    'Vệ sinh lớp học',
    'Cơ sở vật chất',
    'Hoạt động ngoại khóa',
    'Thông tin liên lạc với phụ huynh',
]

RATING_LEVELS = ('satisfied', 'unsatisfied')
