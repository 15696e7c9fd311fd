# Survey Shared Geolocation
# IP lookup used to gate the parent form

import httpx
from .config import GEO_LOOKUP_URL, EXPECTED_COUNTRY
from .messages import MESSAGES


def lookup_ip(ip_address=None):
    """Look up an IP with the geolocation service.

    With no IP the service reports on the caller's own address.
    Returns the decoded response. Raises on any failure, including a
    response with success=false.
    """
    url = f"{GEO_LOOKUP_URL}/{ip_address}" if ip_address else f"{GEO_LOOKUP_URL}/"

    response = httpx.get(url, timeout=10.0)
    response.raise_for_status()

    data = response.json()
    if not data.get('success'):
        raise ValueError(data.get('message') or 'Geolocation lookup failed')

    return data


def check_ip(ip_address=None):
    """Decide whether an IP may submit the form.

    Returns (allowed, ip, error_message). Blocks non-domestic addresses,
    anything flagged as VPN, proxy or hosting, and every lookup failure.
    """
    try:
        data = lookup_ip(ip_address)
    except Exception as e:
        print(f"IP verification failed for {ip_address}: {e}")
        return False, ip_address, MESSAGES['formErrors']['ipVerifyFailed']

    security = data.get('security') or {}
    flagged = security.get('vpn') or security.get('proxy') or security.get('hosting')

    if data.get('country_code') != EXPECTED_COUNTRY or flagged:
        print(f"Blocked IP {data.get('ip')} (country {data.get('country_code')}, security {security})")
        return False, data.get('ip', ip_address), MESSAGES['formErrors']['vpnOrProxyError']

    return True, data.get('ip', ip_address), None
