"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownAllianceError(DomainException):
    """Alliance key is not one of the tracked alliances"""

    def __init__(self, alliance: object):
        self.alliance = alliance
        super().__init__(f"Unknown alliance: {alliance!r}")


class InsufficientDataError(DomainException):
    """No contribution records available for the requested range"""

    pass


class InvalidRecordError(DomainException):
    """Raw contribution record is malformed or invalid"""

    pass


class DataIntegrityError(DomainException):
    """Records contradict each other (e.g. one player under two alliances)"""

    pass
