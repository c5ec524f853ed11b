"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordNotFoundError(DomainException):
    """Requested record does not exist for this user"""

    def __init__(self, record_type: str, record_id: str):
        super().__init__(f"{record_type} {record_id} not found")
        self.record_type = record_type
        self.record_id = record_id


class InvalidMonthError(DomainException):
    """Month reference could not be parsed"""

    pass
