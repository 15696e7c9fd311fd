# Survey Dashboard
# Admin console for reviewing parent feedback

import sys
import os
from functools import wraps

# Add parent directory to path for shared imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, request, jsonify, render_template, redirect, url_for, session, flash, send_file

from survey import (
    SECRET_KEY,
    TEMPLATE_DIR,
    MESSAGES,
    StoreError,
    UsernameExists,
    format_date_display,
    ordered_rating_items,
    sort_reviews,
    filter_reviews,
    unique_classes,
    build_charts,
    export_workbook,
    export_filename,
    get_reviews,
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

app = Flask(__name__, template_folder=TEMPLATE_DIR)
app.secret_key = SECRET_KEY
app.jinja_env.filters['display_date'] = format_date_display

ERRORS = MESSAGES['formErrors']
XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def current_user():
    return session.get('user')


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_user():
            flash(ERRORS['loginRequired'], 'error')
            return redirect(url_for('login_page'))
        return view(*args, **kwargs)
    return wrapped


def superadmin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        user = current_user()
        if not user:
            flash(ERRORS['loginRequired'], 'error')
            return redirect(url_for('login_page'))
        if user['role'] != 'superadmin':
            flash(ERRORS['forbidden'], 'error')
            return redirect(url_for('dashboard'))
        return view(*args, **kwargs)
    return wrapped


def load_filtered_reviews(filter_class):
    """Reviews newest first, narrowed to one class unless filter_class is 'all'.

    Returns (all_reviews, filtered_reviews).
    """
    reviews = sort_reviews(get_reviews())
    return reviews, filter_reviews(reviews, filter_class)


# ===================
# AUTH
# ===================

@app.route('/login', methods=['GET'])
def login_page():
    if current_user():
        return redirect(url_for('dashboard'))
    return render_template('login.html', t=MESSAGES, error=None, username='')


@app.route('/login', methods=['POST'])
def login_submit():
    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        user = login(username, password)
    except StoreError as e:
        print(f"Login failed: {e}")
        return render_template('login.html', t=MESSAGES, error=ERRORS['apiError'], username=username), 502

    if not user:
        return render_template('login.html', t=MESSAGES, error=ERRORS['loginError'], username=username), 401

    session['user'] = user
    print(f"Logged in: {user['username']} ({user['role']})")
    return redirect(url_for('dashboard'))


@app.route('/logout', methods=['GET'])
def logout():
    session.pop('user', None)
    return redirect(url_for('login_page'))


# ===================
# DASHBOARD
# ===================

@app.route('/', methods=['GET'])
@login_required
def dashboard():
    """Review list, charts, and the super admin panels"""
    user = current_user()
    filter_class = request.args.get('class', 'all') or 'all'

    reviews, filtered = [], []
    try:
        reviews, filtered = load_filtered_reviews(filter_class)
    except StoreError as e:
        print(f"Failed to fetch reviews: {e}")
        flash(ERRORS['apiError'], 'error')

    ip_logs, admins = [], []
    if user['role'] == 'superadmin':
        try:
            ip_logs = get_ip_logs()
            admins = [u for u in get_users() if u['role'] == 'admin']
        except StoreError as e:
            print(f"Failed to fetch IP logs or users: {e}")
            flash(ERRORS['apiError'], 'error')

    return render_template(
        'dashboard.html',
        t=MESSAGES,
        user=user,
        filter_class=filter_class,
        classes=unique_classes(reviews),
        reviews=[dict(review, orderedItems=ordered_rating_items(review)) for review in filtered],
        charts=build_charts(filtered, filter_class),
        ip_logs=ip_logs,
        admins=admins
    )


@app.route('/export', methods=['GET'])
@login_required
def export():
    """Download the currently filtered reviews as an Excel file"""
    filter_class = request.args.get('class', 'all') or 'all'

    try:
        _, filtered = load_filtered_reviews(filter_class)
    except StoreError as e:
        print(f"Export failed: {e}")
        flash(ERRORS['apiError'], 'error')
        return redirect(url_for('dashboard', **{'class': filter_class}))

    if not filtered:
        flash(MESSAGES['noReviews'], 'error')
        return redirect(url_for('dashboard', **{'class': filter_class}))

    return send_file(
        export_workbook(filtered),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=export_filename()
    )


@app.route('/reviews/<review_id>/delete', methods=['POST'])
@superadmin_required
def delete_review_route(review_id):
    try:
        delete_review(review_id)
        flash(MESSAGES['reviewDeletedSuccess'], 'success')
    except StoreError as e:
        print(f"Failed to delete review {review_id}: {e}")
        flash(ERRORS['apiError'], 'error')
    return redirect(url_for('dashboard', **{'class': request.form.get('class', 'all')}))


@app.route('/reviews/delete-all', methods=['POST'])
@superadmin_required
def delete_all_reviews_route():
    try:
        delete_all_reviews()
        flash(MESSAGES['reviewsResetSuccess'], 'success')
    except StoreError as e:
        print(f"Failed to delete all reviews: {e}")
        flash(ERRORS['apiError'], 'error')
    return redirect(url_for('dashboard'))


@app.route('/ip-logs/<log_id>/delete', methods=['POST'])
@superadmin_required
def delete_ip_log_route(log_id):
    try:
        delete_ip_log(log_id)
        flash(MESSAGES['ipLogDeletedSuccess'], 'success')
    except StoreError as e:
        print(f"Failed to delete IP log {log_id}: {e}")
        flash(ERRORS['apiError'], 'error')
    return redirect(url_for('dashboard'))


# ===================
# ACCOUNTS
# ===================

@app.route('/users', methods=['POST'])
@superadmin_required
def add_user_route():
    username = request.form.get('username', '').strip()
    password = request.form.get('password', '').strip()

    if not username or not password:
        flash(ERRORS['credentialsMissing'], 'error')
        return redirect(url_for('dashboard'))

    try:
        add_user(username, password)
        flash(ERRORS['userAddedSuccess'], 'success')
    except UsernameExists:
        flash(ERRORS['usernameExistsError'], 'error')
    except StoreError as e:
        print(f"Failed to add user {username}: {e}")
        flash(ERRORS['apiError'], 'error')
    return redirect(url_for('dashboard'))


@app.route('/users/<user_id>/delete', methods=['POST'])
@superadmin_required
def delete_user_route(user_id):
    try:
        delete_user(user_id)
        flash(ERRORS['userDeletedSuccess'], 'success')
    except StoreError as e:
        print(f"Failed to delete user {user_id}: {e}")
        flash(ERRORS['apiError'], 'error')
    return redirect(url_for('dashboard'))


@app.route('/password', methods=['GET', 'POST'])
@login_required
def change_password():
    """Secondary admins change their own password (min 6 characters)"""
    user = current_user()
    if user['role'] == 'superadmin':
        flash(ERRORS['forbidden'], 'error')
        return redirect(url_for('dashboard'))

    if request.method == 'GET':
        return render_template('password.html', t=MESSAGES, error=None)

    new_password = request.form.get('new_password', '')
    confirm_password = request.form.get('confirm_password', '')

    if new_password != confirm_password:
        return render_template('password.html', t=MESSAGES, error=MESSAGES['passwordsDoNotMatch']), 400
    if len(new_password) < 6:
        return render_template('password.html', t=MESSAGES, error=MESSAGES['passwordTooShort']), 400

    try:
        update_password(user['id'], new_password)
    except StoreError as e:
        print(f"Failed to update password for {user['username']}: {e}")
        return render_template('password.html', t=MESSAGES, error=ERRORS['passwordUpdateError']), 502

    flash(MESSAGES['passwordChangedSuccess'], 'success')
    return redirect(url_for('dashboard'))


@app.route('/theme', methods=['GET'])
def toggle_theme():
    session['theme'] = 'light' if session.get('theme') == 'dark' else 'dark'
    return redirect(request.referrer or url_for('dashboard'))


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': 'Survey Dashboard',
        'version': '1.0'
    })


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    app.run(host='0.0.0.0', port=port)
