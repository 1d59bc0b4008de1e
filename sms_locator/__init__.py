"""SMS resource locator.

Finds shelters and distribution points near the ZIP codes in an inbound
text message and replies with SMS-sized text segments.
"""
