# repairdesk/errors.py


class RepairDeskError(Exception):
    """Base class for errors raised by the booking and payment services."""


class NotFoundError(RepairDeskError):
    """A technician or booking the request depends on does not exist."""


class PaymentError(RepairDeskError):
    """The payment gateway declined to settle a payment reference."""
