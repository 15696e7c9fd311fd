# Survey Shared Module
# Common functions used by the form and dashboard apps

import os

from .config import (
    SECRET_KEY,
    PROXY_HOPS,
    CLASSES,
    RATING_LEVELS
)

from .errors import (
    StoreError,
    IPLimitReached,
    UsernameExists
)

from .messages import MESSAGES

from .helpers import (
    format_date_display,
    rating_items_for_class,
    ordered_rating_items,
    validate_submission,
    sort_reviews,
    filter_reviews,
    unique_classes
)

from .geo import check_ip

from .reports import (
    aggregate_ratings,
    build_charts,
    export_workbook,
    export_filename
)

from .airtable import (
    get_reviews,
    add_review,
    get_reviewed_classes_by_ip,
    delete_review,
    delete_all_reviews,
    get_ip_logs,
    delete_ip_log,
    login,
    get_users,
    add_user,
    delete_user,
    update_password
)

# Template folder shared by both apps
TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')
