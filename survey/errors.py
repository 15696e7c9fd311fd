# Survey Shared Errors
# Raised by the Airtable layer, caught by the app routes


class StoreError(Exception):
    """An Airtable call failed or Airtable is not configured"""


class IPLimitReached(Exception):
    """A review for this class was already submitted from this IP"""

    def __init__(self, class_name, ip_address):
        super().__init__(f"IP {ip_address} already submitted a review for {class_name}")
        self.class_name = class_name
        self.ip_address = ip_address


class UsernameExists(Exception):
    """An admin account with this username already exists"""
