"""Exception hierarchy for the locator core."""


class LocatorError(Exception):
    """Base exception for all locator errors."""


class UnknownPostalCode(LocatorError):
    """The postal code has no entry in the gazetteer."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown postal code: '{code}'")


class EmptyQuery(LocatorError):
    """No usable postal codes were supplied."""

    def __init__(self) -> None:
        super().__init__("No postal codes to locate resources for")


class IndexIntegrityError(LocatorError):
    """A resource index would violate one of its invariants."""


class DuplicateRecordIdentity(IndexIntegrityError):
    """Two distinct resource records share the same identity."""

    def __init__(self, identity: object, postal_code: str):
        self.identity = identity
        self.postal_code = postal_code
        super().__init__(
            f"Duplicate record identity {identity!r} (postal code {postal_code})"
        )
