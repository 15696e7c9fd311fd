# Survey Feedback
# Public parent feedback form
#
# Parents pick their child's class, rate each teacher and the general
# items as satisfied/unsatisfied, and leave a comment. Connections from
# outside the expected country, or through a VPN/proxy/hosting provider,
# are turned away before anything reaches Airtable.

import sys
import os

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify, render_template, redirect, url_for, session
from werkzeug.middleware.proxy_fix import ProxyFix

from survey import (
    SECRET_KEY,
    PROXY_HOPS,
    TEMPLATE_DIR,
    CLASSES,
    MESSAGES,
    StoreError,
    IPLimitReached,
    check_ip,
    rating_items_for_class,
    validate_submission,
    add_review,
    get_reviewed_classes_by_ip
)

app = Flask(__name__, template_folder=TEMPLATE_DIR)
app.secret_key = SECRET_KEY

# Trust only the X-Forwarded-For hops appended by our own proxies
if PROXY_HOPS:
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=PROXY_HOPS)


def get_client_ip():
    """Caller IP as seen by the closest trusted proxy"""
    return request.remote_addr


def render_form(class_name='', ratings=None, comment='', errors=None, ip_error=None, ip_address=None, status=200):
    reviewed_classes = []
    if ip_address and not ip_error:
        try:
            reviewed_classes = get_reviewed_classes_by_ip(ip_address)
        except StoreError as e:
            print(f"Could not load reviewed classes for {ip_address}: {e}")

    return render_template(
        'form.html',
        t=MESSAGES,
        classes=CLASSES,
        class_name=class_name,
        rating_items=rating_items_for_class(class_name),
        ratings=ratings or {},
        comment=comment,
        errors=errors or {},
        ip_error=ip_error,
        reviewed_classes=reviewed_classes,
        submitted=request.args.get('submitted') == '1'
    ), status


@app.route('/', methods=['GET'])
def form():
    """Show the form, blocked if the caller's connection fails the IP check"""
    allowed, ip_address, ip_error = check_ip(get_client_ip())

    class_name = request.args.get('class', '')
    if class_name not in CLASSES:
        class_name = ''

    return render_form(class_name=class_name, ip_error=ip_error, ip_address=ip_address)


@app.route('/submit', methods=['POST'])
def submit():
    """Process a submission.

    Accepts form fields:
        - className: one of the configured classes
        - rating_<n>: 'satisfied' or 'unsatisfied' for the n-th rating item
        - comment: free text, required
    """
    class_name = request.form.get('className', '')
    comment = request.form.get('comment', '')

    ratings = {}
    for index, item in enumerate(rating_items_for_class(class_name)):
        level = request.form.get(f'rating_{index}')
        if level:
            ratings[item] = level

    # Posting directly skips the check on the form page
    allowed, ip_address, ip_error = check_ip(get_client_ip())
    if not allowed:
        return render_form(class_name, ratings, comment, ip_error=ip_error, status=403)

    errors = validate_submission(class_name, ratings, comment)
    if errors:
        return render_form(class_name, ratings, comment, errors=errors, ip_address=ip_address, status=400)

    try:
        add_review(class_name, ratings, comment.strip(), ip_address)
    except IPLimitReached:
        errors = {'class': MESSAGES['formErrors']['ipLimitError']}
        return render_form(class_name, ratings, comment, errors=errors, ip_address=ip_address, status=409)
    except StoreError as e:
        print(f"Submission failed: {e}")
        errors = {'api': MESSAGES['formErrors']['apiError']}
        return render_form(class_name, ratings, comment, errors=errors, ip_address=ip_address, status=502)

    return redirect(url_for('form', submitted='1'))


@app.route('/theme', methods=['GET'])
def toggle_theme():
    session['theme'] = 'light' if session.get('theme') == 'dark' else 'dark'
    return redirect(request.referrer or url_for('form'))


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Survey Feedback',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
