"""Domain errors raised by the service layer."""


class TourNotFoundError(LookupError):
    def __init__(self, message: str = 'tourId is not found.') -> None:
        super().__init__(message)


class TourRatingNotFoundError(LookupError):
    def __init__(self, message: str = 'The TourRating is not found.') -> None:
        super().__init__(message)
