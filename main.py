"""Server Entry Point - Root Module.

Runs the SMS webhook server. It imports from the sms_locator package.
"""

from sms_locator.main import create_application, main

__all__ = [
    "create_application",
    "main",
]

if __name__ == "__main__":
    main()
